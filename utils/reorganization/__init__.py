from utils.reorganization.plan_reorganization import (
    group_bookings_by_window,
    plan_reorganization,
)

__all__ = [
    "group_bookings_by_window",
    "plan_reorganization",
]

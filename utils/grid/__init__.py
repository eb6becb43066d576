from utils.grid.render_week_grid import get_booking_for_cell, render_week_grid

__all__ = [
    "get_booking_for_cell",
    "render_week_grid",
]

from utils.conflicts.find_conflicts import find_conflicts

__all__ = [
    "find_conflicts",
]

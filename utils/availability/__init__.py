from utils.availability.get_free_sections import get_free_sections
from utils.availability.resolve_sections import resolve_sections
from utils.availability.validate_time_window import validate_time_window

__all__ = [
    "get_free_sections",
    "resolve_sections",
    "validate_time_window",
]

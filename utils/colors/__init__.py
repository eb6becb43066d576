from utils.colors.get_occupant_color import (
    CATEGORY_COLORS,
    CLOSED_COLOR,
    DEFAULT_COLOR,
    get_occupant_color,
    normalize_hex_color,
)
from utils.colors.build_color_map import build_color_map

__all__ = [
    "CATEGORY_COLORS",
    "CLOSED_COLOR",
    "DEFAULT_COLOR",
    "build_color_map",
    "get_occupant_color",
    "normalize_hex_color",
]

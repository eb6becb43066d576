DEFAULT_COLOR = "#DCDCDC"
CLOSED_COLOR = "#FBBF24"

CATEGORY_COLORS: dict[str, str] = {
    "Running group": "#93C5FD",
    "Sports training": "#86EFAC",
    "Facility closed": CLOSED_COLOR,
}


def normalize_hex_color(color: str) -> str:
    """Return an uppercase #RRGGBB string, raising ValueError for anything else."""
    value = color.strip().lstrip("#")
    if len(value) != 6:
        raise ValueError(f"'{color}' is not a #RRGGBB colour")
    int(value, 16)
    return f"#{value.upper()}"


def get_occupant_color(
    occupant_label: str,
    color_map: dict[str, str] | None = None,
    category: str | None = None,
    is_closed: bool = False,
    anonymized: bool = False
) -> str:
    """
    Pick the display colour of a booking.

    Closed bookings are always amber. In anonymized exports the colour only
    reflects the category, so parties cannot be told apart. Otherwise the
    caller's colour map is used, matching labels case-insensitively as a
    fallback, and unknown labels get a neutral grey.
    """
    if is_closed:
        return CLOSED_COLOR

    if anonymized:
        return CATEGORY_COLORS.get(category or "", DEFAULT_COLOR)

    color_map = color_map or {}
    if occupant_label in color_map:
        return normalize_hex_color(color_map[occupant_label])

    lower_label = occupant_label.lower()
    for name, color in color_map.items():
        if name.lower() == lower_label:
            return normalize_hex_color(color)

    return DEFAULT_COLOR

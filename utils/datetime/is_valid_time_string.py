import re


TIME_STRING_PATTERN = re.compile(r"([01]\d|2[0-3]):[0-5]\d")


def is_valid_time_string(time_str: str) -> bool:
    """Check that a time is a zero-padded 24h HH:MM string (e.g. "07:30", not "7:30")."""
    return isinstance(time_str, str) and TIME_STRING_PATTERN.fullmatch(time_str) is not None

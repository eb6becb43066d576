from datetime import timedelta
from utils.datetime.convert_time_to_datetime import convert_time_to_datetime


def add_minutes_to_time_string(time_str: str, minutes: int) -> str:
    """
    Shift an HH:MM time by a number of minutes within the same day.

    Args:
        time_str: Time in HH:MM format
        minutes: Number of minutes to add (negative to subtract)

    Returns:
        Time string in HH:MM format

    Raises:
        ValueError: If the result falls outside 00:00-23:59
    """
    start = convert_time_to_datetime(time_str)
    shifted = start + timedelta(minutes=minutes)
    if shifted.date() != start.date():
        raise ValueError(f"{time_str} shifted by {minutes} minutes leaves the day")
    return shifted.strftime("%H:%M")

from datetime import datetime


def convert_time_to_datetime(time_str: str) -> datetime:
    """
    Convert a time string (HH:MM) to a datetime object on a fixed reference date.
    """
    hours, minutes = map(int, time_str.split(":"))
    return datetime(2000, 1, 1, hour=hours, minute=minutes)

def is_time_between(time_str: str, from_time: str, to_time: str) -> bool:
    """
    Check if a time string falls inside the half-open range [from_time, to_time).

    All arguments must be zero-padded HH:MM strings, which makes plain
    string comparison equivalent to chronological comparison.

    Args:
        time_str: The time to check in HH:MM format
        from_time: The start time of the range in HH:MM format (inclusive)
        to_time: The end time of the range in HH:MM format (exclusive)

    Returns:
        True if the time is inside the range, False otherwise
    """
    return from_time <= time_str < to_time

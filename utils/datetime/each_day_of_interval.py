from datetime import date, timedelta


def each_day_of_interval(date_from: date, date_to: date) -> list[date]:
    """
    List every calendar date between date_from and date_to, both inclusive.
    Returns an empty list when date_from is after date_to.
    """
    days = []
    current = date_from
    while current <= date_to:
        days.append(current)
        current += timedelta(days=1)
    return days


def get_weekday_number(day: date) -> int:
    """Weekday number used by weekday patterns: 0 = Sunday ... 6 = Saturday."""
    return day.isoweekday() % 7

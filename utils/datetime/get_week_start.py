from datetime import date, timedelta


def get_week_start(day: date) -> date:
    """Return the Monday of the ISO week containing the given date."""
    return day - timedelta(days=day.weekday())


def get_week_days(week_start: date) -> list[date]:
    monday = get_week_start(week_start)
    return [monday + timedelta(days=offset) for offset in range(7)]

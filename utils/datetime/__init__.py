from utils.datetime.add_minutes_to_time_string import add_minutes_to_time_string
from utils.datetime.convert_time_to_datetime import convert_time_to_datetime
from utils.datetime.each_day_of_interval import each_day_of_interval, get_weekday_number
from utils.datetime.get_week_start import get_week_days, get_week_start
from utils.datetime.is_time_between import is_time_between
from utils.datetime.is_valid_time_string import is_valid_time_string

__all__ = [
    "add_minutes_to_time_string",
    "convert_time_to_datetime",
    "each_day_of_interval",
    "get_week_days",
    "get_week_start",
    "get_weekday_number",
    "is_time_between",
    "is_valid_time_string",
]

"""Calendar helpers for counting trading days and parsing date arguments."""
from .weekday_counter import weekdays_between, next_friday, day_of_week_number
from .date_parser import parse_date_arg

__all__ = ['weekdays_between', 'next_friday', 'day_of_week_number', 'parse_date_arg']

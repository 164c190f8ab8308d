"""Trading weekday arithmetic."""
import math
from datetime import date, timedelta

FRIDAY = 5


def day_of_week_number(day: date) -> int:
    """Return the day of week with Sunday = 0 through Saturday = 6.

    Python's isoweekday() runs Monday = 1 through Sunday = 7, so Sunday
    wraps around to zero.
    """
    return day.isoweekday() % 7


def weekdays_between(earlier: date, later: date) -> int:
    """Count the Monday-Friday dates between two dates, inclusive.

    Uses a closed form rather than walking the range day by day. The
    number of Sundays in the span is the number of multiples of 7 that
    the day numbers cross; shifting the same count by one finds the
    Saturdays.

    The caller must ensure ``earlier <= later``; a reversed range gives
    a meaningless result.

    Args:
        earlier: First date of the range
        later: Last date of the range

    Returns:
        Number of weekdays in the range
    """
    num_days = (later - earlier).days + 1
    start_num = day_of_week_number(earlier)

    # Sunday is 0, so Sundays land on multiples of 7
    num_sundays = math.ceil((start_num + num_days) / 7.0) - math.ceil(start_num / 7.0)
    num_saturdays = math.ceil((start_num + num_days + 1) / 7.0) - math.ceil((start_num + 1) / 7.0)
    return num_days - int(num_saturdays) - int(num_sundays)


def next_friday(today: date) -> date:
    """Return today if it is a Friday, otherwise the upcoming Friday.

    Args:
        today: Starting date

    Returns:
        The nearest Friday on or after today
    """
    days_until_friday = (FRIDAY - day_of_week_number(today)) % 7
    return today + timedelta(days=days_until_friday)

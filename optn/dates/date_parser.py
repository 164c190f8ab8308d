"""Parsing of short-form date arguments from the command line."""
from datetime import date
from typing import Optional

from optn.errors import MalformedDateError


def parse_date_arg(arg: str, today: Optional[date] = None) -> date:
    """Resolve a ``YYYY-MM-DD``, ``MM-DD`` or ``DD`` argument to a date.

    Missing components are taken from today's date, so ``17`` means the
    17th of the current month and ``12-19`` means December 19th of the
    current year.

    Args:
        arg: Dash-separated date argument
        today: Reference date for missing components (defaults to today)

    Returns:
        The resolved calendar date

    Raises:
        MalformedDateError: If the argument has more than three parts, a
            non-numeric part, or names a day that does not exist
    """
    if today is None:
        today = date.today()

    parts = arg.strip().split('-')
    if not all(part.isdecimal() for part in parts):
        raise MalformedDateError(arg)

    try:
        numbers = [int(part) for part in parts]
        if len(numbers) == 3:
            return date(numbers[0], numbers[1], numbers[2])
        if len(numbers) == 2:
            return date(today.year, numbers[0], numbers[1])
        if len(numbers) == 1:
            return date(today.year, today.month, numbers[0])
    except (ValueError, OverflowError):
        raise MalformedDateError(arg) from None

    raise MalformedDateError(arg)

"""Errors raised while validating calculator input.

Every error here is detected before any formula runs. They subclass
ValueError so callers that only care about bad input can catch that.
"""


class OptnError(ValueError):
    """Base class for all calculator input errors."""


class MissingRequiredValueError(OptnError):
    """Strike or premium was not supplied."""

    def __init__(self, message: str = "Must give both strike price and sale price!"):
        super().__init__(message)


class InvalidPriceError(OptnError):
    """A price was supplied but is not a finite positive number."""


class InvalidDateOrderError(OptnError):
    """The expiry date falls before the open date."""

    def __init__(self, message: str = "Expiry can't be before the open date!"):
        super().__init__(message)


class MalformedDateError(OptnError):
    """A date argument could not be resolved to a calendar date."""

    def __init__(self, arg: str):
        self.arg = arg
        super().__init__(f"'{arg}' is not a valid date.")


class UsageError(OptnError):
    """Help was requested or the command line could not be understood."""


class NoTradingDaysError(OptnError):
    """The date range contains no weekdays, so nothing can be annualized."""

    def __init__(self, message: str = "No trading days between the open and expiry dates!"):
        super().__init__(message)

"""Return calculations for short puts and covered calls."""
import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from optn.config.models import Config, CalculatorSettings, WDAYS_PER_YEAR
from optn.dates.weekday_counter import weekdays_between
from optn.errors import (
    InvalidDateOrderError,
    InvalidPriceError,
    MissingRequiredValueError,
    NoTradingDaysError,
)
from optn.logging.calc_logger import CalcLogger


@dataclass(frozen=True)
class DateRange:
    """Open and expiry dates of a position."""
    open: date
    expiry: date

    def validate(self) -> tuple[bool, Optional[str]]:
        """Validate the date ordering.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.expiry < self.open:
            return False, "Expiry can't be before the open date!"
        return True, None


@dataclass(frozen=True)
class ShortPutInput:
    """Inputs for a cash-secured short put."""
    range: DateRange
    strike: float
    premium: float


@dataclass(frozen=True)
class CoveredCallInput:
    """Inputs for a covered call.

    A basis of None means the shares are valued at the strike price.
    """
    range: DateRange
    strike: float
    premium: float
    basis: Optional[float] = None

    @property
    def resolved_basis(self) -> float:
        return self.strike if self.basis is None else self.basis


@dataclass(frozen=True)
class ShortPutResult:
    """Return metrics of a short put."""
    weekdays: int
    capital: float
    max_value: float
    pct_gain: float
    pct_annualized: float
    break_even: float


@dataclass(frozen=True)
class CoveredCallResult:
    """Return metrics of a covered call.

    The max figures assume the shares are called away at the strike; the
    low figures assume they are not and only the premium is kept.
    """
    weekdays: int
    basis: float
    capital: float
    max_value: float
    pct_max_gain: float
    pct_max_annualized: float
    low_value: float
    pct_low_gain: float
    pct_low_annualized: float


def annualize(multiplier: float, weekdays: int, weekdays_per_year: int = WDAYS_PER_YEAR) -> float:
    """Compound a per-period return multiplier to an annual rate.

    Args:
        multiplier: Period return multiplier (1.03 for a 3% gain)
        weekdays: Trading days in the period, at least 1
        weekdays_per_year: Trading days in a year

    Returns:
        Annualized return as a fraction (0.25 for 25%)
    """
    try:
        return math.pow(multiplier, weekdays_per_year / weekdays) - 1.0
    except ValueError:
        # negative multiplier with a fractional exponent
        return math.nan
    except OverflowError:
        return math.inf


class StrategyCalculator:
    """Calculator for option-selling strategy returns."""

    def __init__(self, config: Optional[Config] = None, logger: Optional[CalcLogger] = None):
        """Initialize the StrategyCalculator.

        Args:
            config: Configuration with the formula constants (defaults apply when omitted)
            logger: Optional logger for calculation details
        """
        self._settings: CalculatorSettings = config.calculator if config else CalculatorSettings()
        self._logger = logger

    def compute_short_put(self, strike: float, premium: float, weekdays: int) -> ShortPutResult:
        """Calculate the returns of a short put.

        Inputs are assumed to be validated already.

        Args:
            strike: Strike price of the put
            premium: Premium received per share
            weekdays: Trading days in the market, at least 1

        Returns:
            ShortPutResult with capital, max value, returns and break-even
        """
        s = self._settings
        multiplier = 1.0 + (premium - s.per_share_fee) / strike
        return ShortPutResult(
            weekdays=weekdays,
            capital=strike * s.contract_size,
            max_value=premium * s.contract_size - s.contract_fee,
            pct_gain=multiplier - 1.0,
            pct_annualized=annualize(multiplier, weekdays, s.weekdays_per_year),
            break_even=strike - premium,
        )

    def compute_covered_call(self, strike: float, premium: float,
                             basis: Optional[float], weekdays: int) -> CoveredCallResult:
        """Calculate the returns of a covered call.

        Inputs are assumed to be validated already.

        Args:
            strike: Strike price of the call
            premium: Premium received per share
            basis: Cost basis per share, or None to use the strike
            weekdays: Trading days in the market, at least 1

        Returns:
            CoveredCallResult for both the called-away and the kept scenario
        """
        s = self._settings
        resolved_basis = strike if basis is None else basis

        max_gain = (strike - resolved_basis) + (premium - s.per_share_fee)
        max_multiplier = 1.0 + max_gain / resolved_basis
        low_gain = premium - s.per_share_fee
        low_multiplier = 1.0 + low_gain / resolved_basis

        return CoveredCallResult(
            weekdays=weekdays,
            basis=resolved_basis,
            capital=resolved_basis * s.contract_size,
            max_value=max_gain * s.contract_size,
            pct_max_gain=max_multiplier - 1.0,
            pct_max_annualized=annualize(max_multiplier, weekdays, s.weekdays_per_year),
            low_value=low_gain * s.contract_size,
            pct_low_gain=low_multiplier - 1.0,
            pct_low_annualized=annualize(low_multiplier, weekdays, s.weekdays_per_year),
        )

    def evaluate_short_put(self, position: ShortPutInput) -> ShortPutResult:
        """Validate a short put, count its trading days and calculate its returns.

        Raises:
            MissingRequiredValueError: If strike or premium is missing
            InvalidPriceError: If strike or premium is not a finite positive number
            InvalidDateOrderError: If the expiry is before the open date
            NoTradingDaysError: If the range falls entirely on a weekend
        """
        self.validate_short_put_input(position)
        weekdays = self._count_weekdays(position.range)
        result = self.compute_short_put(position.strike, position.premium, weekdays)
        if self._logger:
            self._logger.log_result('sp', result)
        return result

    def evaluate_covered_call(self, position: CoveredCallInput) -> CoveredCallResult:
        """Validate a covered call, count its trading days and calculate its returns.

        Raises:
            MissingRequiredValueError: If strike or premium is missing
            InvalidPriceError: If a price is not usable
            InvalidDateOrderError: If the expiry is before the open date
            NoTradingDaysError: If the range falls entirely on a weekend
        """
        self.validate_covered_call_input(position)
        weekdays = self._count_weekdays(position.range)
        result = self.compute_covered_call(position.strike, position.premium, position.basis, weekdays)
        if self._logger:
            self._logger.log_result('cc', result)
        return result

    def validate_short_put_input(self, position: ShortPutInput) -> bool:
        """Validate short put inputs.

        Returns:
            True if valid

        Raises:
            OptnError subclass describing the first problem found
        """
        self._validate_prices(position.strike, position.premium)
        self._validate_range(position.range)
        return True

    def validate_covered_call_input(self, position: CoveredCallInput) -> bool:
        """Validate covered call inputs.

        The basis is not checked against the strike; buying below or above
        it is normal. It only has to be a usable number.

        Returns:
            True if valid

        Raises:
            OptnError subclass describing the first problem found
        """
        self._validate_prices(position.strike, position.premium)
        self._validate_range(position.range)
        if position.basis is not None:
            if not math.isfinite(position.basis):
                raise InvalidPriceError("Basis must be a finite number")
            if position.basis == 0:
                raise InvalidPriceError("Basis cannot be zero")
        return True

    def _validate_prices(self, strike: float, premium: float):
        if math.isnan(strike) or math.isnan(premium):
            raise MissingRequiredValueError()
        if math.isinf(strike) or strike <= 0:
            raise InvalidPriceError("Strike price must be a finite positive number")
        if math.isinf(premium) or premium <= 0:
            raise InvalidPriceError("Premium must be a finite positive number")

    def _validate_range(self, date_range: DateRange):
        is_valid, error_message = date_range.validate()
        if not is_valid:
            raise InvalidDateOrderError(error_message)

    def _count_weekdays(self, date_range: DateRange) -> int:
        weekdays = weekdays_between(date_range.open, date_range.expiry)
        if weekdays == 0:
            raise NoTradingDaysError()
        return weekdays

"""Strategy calculation module."""
from .strategy_calculator import (
    StrategyCalculator,
    DateRange,
    ShortPutInput,
    CoveredCallInput,
    ShortPutResult,
    CoveredCallResult,
    annualize,
)

__all__ = [
    'StrategyCalculator',
    'DateRange',
    'ShortPutInput',
    'CoveredCallInput',
    'ShortPutResult',
    'CoveredCallResult',
    'annualize',
]

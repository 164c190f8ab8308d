"""Logging module."""
from .calc_logger import CalcLogger

__all__ = ['CalcLogger']

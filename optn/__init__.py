"""Option return calculator for short puts and covered calls."""

__version__ = '1.0.0'

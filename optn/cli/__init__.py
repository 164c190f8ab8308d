"""Command-line interface."""
from .app import main, run_command

__all__ = ['main', 'run_command']

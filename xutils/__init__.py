"""
Utils module for the matrix helpers
Contains settings persistence and logging setup
"""

from .logging_config import setup_logging
from .settings import SettingsManager

__all__ = [
    'setup_logging',
    'SettingsManager',
]

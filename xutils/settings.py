"""
Settings Manager
Handles persistence of matrix helper preferences
"""

import logging
from typing import Optional

from PyQt6.QtCore import QSettings

from xmath.matrix_helper import DEFAULT_FILL_VALUE

from .logging_config import setup_logging

DEFAULT_LOG_LEVEL = 'WARNING'


class SettingsManager:
    """
    Manages matrix helper settings

    Values are only read here; callers pass them on explicitly, e.g.
    multiply_by_vector(m, v, fill_value=settings.get_column_fill_value()).
    """
    
    def __init__(self, path: Optional[str] = None):
        """
        Args:
            path: Optional INI file to store settings in. Without it the
                platform's native settings store is used.
        """
        if path:
            self.settings = QSettings(path, QSettings.Format.IniFormat)
        else:
            self.settings = QSettings('XMath', 'Settings')
    
    def get_column_fill_value(self) -> float:
        """Get the saved fill for multiply_by_vector columns"""
        return self.settings.value('column_fill_value', DEFAULT_FILL_VALUE, type=float)
    
    def set_column_fill_value(self, value: float):
        """Save the fill for multiply_by_vector columns"""
        self.settings.setValue('column_fill_value', float(value))
    
    def get_log_level(self) -> str:
        """Get the saved log level name"""
        return self.settings.value('log_level', DEFAULT_LOG_LEVEL, type=str)
    
    def set_log_level(self, level: str):
        """Save the log level name"""
        if not isinstance(logging.getLevelName(level.upper()), int):
            raise ValueError(f"Unknown log level: {level}")
        self.settings.setValue('log_level', level.upper())
    
    def sync(self):
        """Flush pending changes to storage"""
        self.settings.sync()
    
    def configure_logging(self, stream=None) -> logging.Logger:
        """Set up the xmath logger at the saved log level"""
        return setup_logging(self.get_log_level(), stream)

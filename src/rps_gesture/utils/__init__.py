"""
Utility modules for the gesture classifier.
"""

from .config import ConfigManager
from .logger import Logger

__all__ = [
    "ConfigManager",
    "Logger",
]

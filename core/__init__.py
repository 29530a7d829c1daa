"""
Zero Waste Chef Core Module
Central configuration and persistence
"""

from .config import Settings, get_settings
from .database import Base, Database

__all__ = [
    "Settings",
    "get_settings",
    "Base",
    "Database",
]

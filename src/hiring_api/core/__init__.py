"""
Core module - Configuration, database, security, and utilities.
"""

from hiring_api.core.config import get_settings, settings
from hiring_api.core.database import Base, close_db, get_db, init_db
from hiring_api.core.security import hash_password, verify_password

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    # Security
    "hash_password",
    "verify_password",
]

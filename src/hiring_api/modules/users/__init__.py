"""
Users module - Admin credential storage.
"""

from hiring_api.modules.users.models import AdminUser
from hiring_api.modules.users.repository import UserRepository

__all__ = ["AdminUser", "UserRepository"]

"""Authentication module."""

from hiring_api.modules.auth.router import router
from hiring_api.modules.auth.schemas import LoginRequest, LoginResponse

__all__ = ["router", "LoginRequest", "LoginResponse"]

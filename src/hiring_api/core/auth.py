"""
Authentication and Authorization Module

Holds the single process-wide admin session token and provides the FastAPI
dependency that protects staff-only endpoints.

SECURITY NOTE:
- Only one token is valid at a time. A successful login replaces the
  current token, which logs out every other caller.
- Tokens live in memory only and are lost on restart.
- Tokens are never logged.
"""

import logging
import secrets
import threading

from fastapi import Depends
from fastapi.security import APIKeyHeader

from hiring_api.core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

TOKEN_LENGTH = 32  # 256 bits of entropy when using token_urlsafe

# Security scheme for OpenAPI documentation
authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Session token returned by POST /api/login",
)


class SessionTokenIssuer:
    """
    Single-slot holder for the current admin session token.

    issue() replaces whatever token was current, so the most recent
    successful login wins.
    """

    def __init__(self) -> None:
        self._token: str | None = None
        self._lock = threading.Lock()

    def issue(self) -> str:
        """Generate a fresh token and make it the only valid one."""
        token = secrets.token_urlsafe(TOKEN_LENGTH)
        with self._lock:
            replaced = self._token is not None
            self._token = token
        if replaced:
            logger.info("Issued new session token; previous token invalidated")
        else:
            logger.info("Issued session token")
        return token

    def current(self) -> str | None:
        with self._lock:
            return self._token

    def check(self, candidate: str | None) -> bool:
        """True iff a token has been issued and candidate matches it exactly."""
        current = self.current()
        if current is None or candidate is None:
            return False
        return secrets.compare_digest(candidate.encode("utf-8"), current.encode("utf-8"))

    def reset(self) -> None:
        """Forget the current token."""
        with self._lock:
            self._token = None


# Process-wide issuer instance
session_tokens = SessionTokenIssuer()


def get_token_issuer() -> SessionTokenIssuer:
    """FastAPI dependency returning the process-wide token issuer."""
    return session_tokens


def _extract_token(header_value: str | None) -> str | None:
    """Accept both a raw token and a 'Bearer <token>' header value."""
    if header_value is None:
        return None
    scheme, _, rest = header_value.partition(" ")
    if rest and scheme.lower() == "bearer":
        return rest.strip()
    return header_value


async def require_session_token(
    authorization: str | None = Depends(authorization_header),
    issuer: SessionTokenIssuer = Depends(get_token_issuer),
) -> None:
    """
    FastAPI dependency that rejects requests without the current session token.

    Usage:
        @router.get("/protected", dependencies=[Depends(require_session_token)])

    Raises:
        HTTPException 401: If the token is missing or does not match
    """
    if not issuer.check(_extract_token(authorization)):
        logger.warning("Rejected request with missing or invalid session token")
        raise UnauthorizedError().to_http_exception()


__all__ = [
    "SessionTokenIssuer",
    "session_tokens",
    "get_token_issuer",
    "require_session_token",
]

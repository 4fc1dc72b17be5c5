"""Authentication router."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hiring_api.core.auth import SessionTokenIssuer, get_token_issuer
from hiring_api.core.database import get_db
from hiring_api.core.exceptions import ServiceError
from hiring_api.modules.auth import service
from hiring_api.modules.auth.schemas import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {
                    "example": {
                        "detail": {
                            "error": "INVALID_CREDENTIALS",
                            "message": "Invalid credentials",
                        }
                    }
                }
            },
        },
        500: {"description": "Database error"},
    },
)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
    issuer: SessionTokenIssuer = Depends(get_token_issuer),
) -> LoginResponse:
    """
    Authenticate the admin and return a session token.

    Issuing a token invalidates any token handed out by an earlier login.

    Raises:
        HTTPException 401: Invalid credentials
        HTTPException 500: Database error
    """
    try:
        token = await service.login(db, issuer, credentials.username, credentials.password)
    except ServiceError as e:
        raise e.to_http_exception() from e

    return LoginResponse(token=token)

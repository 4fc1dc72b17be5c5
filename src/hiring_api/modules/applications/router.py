"""
Applications Router

Endpoints:
- POST /apply - Submit a job application (public)
- GET /applications - List all applications (requires the admin session token)

Security:
- The listing requires the token from the most recent successful login
- Storage errors return a generic message; details stay in the server log
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from hiring_api.core.auth import require_session_token
from hiring_api.core.database import get_db
from hiring_api.core.exceptions import ServiceError
from hiring_api.modules.applications import service
from hiring_api.modules.applications.schemas import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationSubmitResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/apply",
    response_model=ApplicationSubmitResponse,
    status_code=status.HTTP_200_OK,
    summary="Submit Job Application",
    description="""
Submit a new job application.

The application is stored first, then a confirmation email is sent to the
applicant. A failed email does not fail the request: the response is still
200 and the `message` field says the email could not be sent.
""",
    responses={
        200: {
            "description": "Application stored",
            "content": {
                "application/json": {
                    "examples": {
                        "sent": {"value": {"message": "Application received", "id": 1}},
                        "email_failed": {
                            "value": {
                                "message": "Application received, but failed to send email",
                                "id": 1,
                            }
                        },
                    }
                }
            },
        },
        500: {"description": "Database error"},
    },
)
async def submit_application(
    data: ApplicationCreate,
    db: AsyncSession = Depends(get_db),
) -> ApplicationSubmitResponse:
    """
    Store an application and notify the applicant.

    Raises:
        HTTPException 500: If the application could not be stored
    """
    try:
        return await service.submit_application(db, data)
    except ServiceError as e:
        raise e.to_http_exception() from e


@router.get(
    "/applications",
    response_model=list[ApplicationResponse],
    dependencies=[Depends(require_session_token)],
    summary="List Job Applications",
    responses={
        401: {"description": "Missing or invalid session token"},
        500: {"description": "Database error"},
    },
)
async def list_applications(
    db: AsyncSession = Depends(get_db),
) -> list[ApplicationResponse]:
    """Return every application, most recent first."""
    try:
        applications = await service.list_applications(db)
    except ServiceError as e:
        raise e.to_http_exception() from e

    return [ApplicationResponse.model_validate(a) for a in applications]

"""
Applications Service Layer

Business logic for job application intake.

Submission is a two-phase operation:
1. Durable insert. If it fails the whole request fails and no email is sent.
2. Best-effort confirmation email. Its outcome only changes the response
   message; the request still succeeds.
"""

import enum
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hiring_api.core.email import send_application_received
from hiring_api.core.exceptions import StorageError
from hiring_api.modules.applications import repository
from hiring_api.modules.applications.models import Application
from hiring_api.modules.applications.schemas import (
    ApplicationCreate,
    ApplicationSubmitResponse,
)

logger = logging.getLogger(__name__)

MESSAGE_RECEIVED = "Application received"
MESSAGE_EMAIL_FAILED = "Application received, but failed to send email"


class NotificationOutcome(str, enum.Enum):
    """Result of the applicant confirmation email."""

    SENT = "sent"
    FAILED = "failed"


async def notify(application: ApplicationCreate) -> NotificationOutcome:
    """
    Send the confirmation email to the applicant's declared address.

    Never raises: every failure is logged and reported as FAILED.
    """
    if not application.email:
        logger.warning("Application has no email address; skipping confirmation email")
        return NotificationOutcome.FAILED

    try:
        email_sent = await send_application_received(
            to_email=application.email,
            applicant_name=application.name,
        )
    except Exception as e:
        logger.error(f"Exception sending confirmation email to {application.email}: {e}")
        return NotificationOutcome.FAILED

    return NotificationOutcome.SENT if email_sent else NotificationOutcome.FAILED


async def submit_application(
    db: AsyncSession,
    data: ApplicationCreate,
) -> ApplicationSubmitResponse:
    """
    Store an application, then email the applicant.

    Args:
        db: Database session
        data: Application data from the request

    Returns:
        ApplicationSubmitResponse with the new id and a message reflecting
        whether the confirmation email went out

    Raises:
        StorageError: If the insert fails (no email is attempted)
    """
    try:
        application_id = await repository.insert_application(db, data)
    except SQLAlchemyError as e:
        logger.error(f"DB insert error: {e}")
        raise StorageError() from e

    logger.info(f"Created application {application_id} for position: {data.position}")

    outcome = await notify(data)
    if outcome is NotificationOutcome.FAILED:
        logger.error(f"Confirmation email not sent for application {application_id}")
        return ApplicationSubmitResponse(message=MESSAGE_EMAIL_FAILED, id=application_id)

    return ApplicationSubmitResponse(message=MESSAGE_RECEIVED, id=application_id)


async def list_applications(db: AsyncSession) -> list[Application]:
    """
    Get all applications, newest first.

    Raises:
        StorageError: If the query fails
    """
    try:
        return await repository.list_applications(db)
    except SQLAlchemyError as e:
        logger.error(f"DB fetch error: {e}")
        raise StorageError() from e

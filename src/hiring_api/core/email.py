"""
Email Service using Resend

Sends the applicant confirmation email. Delivery is best-effort: callers get
a boolean and a failed send never raises.
"""

import asyncio
import logging
from datetime import UTC, datetime
from html import escape

import resend

from hiring_api.core.config import settings
from hiring_api.core.exceptions import NotificationError

logger = logging.getLogger(__name__)

# Initialize Resend with API key
resend.api_key = settings.resend_api_key


async def _deliver(params: resend.Emails.SendParams) -> str:
    """
    Hand a message to Resend and return the provider message id.

    Raises:
        NotificationError: If Resend is not configured, fails, or times out
    """
    if not resend.api_key:
        raise NotificationError("RESEND_API_KEY not set")

    try:
        # Run sync Resend call in thread pool to avoid blocking event loop
        email = await asyncio.wait_for(
            asyncio.to_thread(resend.Emails.send, params),
            timeout=settings.email_timeout_seconds,
        )
    except TimeoutError as e:
        raise NotificationError(
            f"Resend did not respond within {settings.email_timeout_seconds}s"
        ) from e
    except Exception as e:
        raise NotificationError(str(e)) from e

    return email["id"]


async def send_email(
    to_email: str,
    subject: str,
    html_content: str,
    text_content: str | None = None,
) -> bool:
    """
    Send an email using Resend.

    Args:
        to_email: Recipient email address
        subject: Email subject line
        html_content: HTML content of the email
        text_content: Optional plain-text alternative

    Returns:
        True if email was sent successfully, False otherwise
    """
    params: resend.Emails.SendParams = {
        "from": settings.email_from,
        "to": [to_email],
        "subject": subject,
        "html": html_content,
    }
    if text_content:
        params["text"] = text_content

    try:
        message_id = await _deliver(params)
    except NotificationError as e:
        logger.error(f"Failed to send email to {to_email}: {e}")
        return False

    logger.info(f"Email sent successfully to {to_email}, id: {message_id}")
    return True


async def send_application_received(
    to_email: str,
    applicant_name: str | None,
) -> bool:
    """Send the 'application received' confirmation to an applicant."""
    # Escape user inputs to prevent XSS
    safe_applicant_name = escape(applicant_name or "Applicant")
    safe_company_name = escape(settings.company_name)
    year = datetime.now(UTC).year

    text_content = (
        f"Dear {applicant_name or 'Applicant'},\n\n"
        f"Thank you for applying to {settings.company_name}. We have received your "
        "application and will review it soon.\n\n"
        f"Best regards,\n{settings.company_name} Hiring Team"
    )
    html_content = f"""
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8" />
        <meta name="viewport" content="width=device-width, initial-scale=1.0"/>
        <title>Application Submitted Successfully</title>
        <style>
            body {{ font-family: Arial, sans-serif; background-color: #f4f4f4; padding: 0; margin: 0; }}
            .email-wrapper {{ max-width: 600px; margin: 40px auto; background: #fff; border-radius: 10px; padding: 30px; box-shadow: 0 2px 8px rgba(0,0,0,0.05); }}
            h2 {{ color: #9e1c18; }}
            p {{ font-size: 16px; color: #555; line-height: 1.6; }}
            .highlight {{ color: #9e1c18; }}
            .footer {{ font-size: 13px; color: #aaa; margin-top: 30px; }}
        </style>
    </head>
    <body>
        <div class="email-wrapper">
            <h2>Application Submitted Successfully</h2>

            <p>Dear {safe_applicant_name},</p>

            <p>Thank you for applying to <strong class="highlight">{safe_company_name}</strong>. We have successfully received your application. Our team will review your submission and get back to you if your qualifications match our requirements.</p>

            <p><strong class="highlight">Best regards,</strong><br/>{safe_company_name} Hiring Team</p>

            <div class="footer">
                &copy; {year} {safe_company_name}. All rights reserved.
            </div>
        </div>
    </body>
    </html>
    """

    return await send_email(
        to_email=to_email,
        subject="Application Received",
        html_content=html_content,
        text_content=text_content,
    )

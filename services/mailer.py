"""
services/mailer.py
────────────────────────────────────────────────────────────────────────
Password-reset mail over plain SMTP. Sending is blocking, so the async
wrapper hands it to Starlette's threadpool.
"""
from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage

from starlette.concurrency import run_in_threadpool

from config import settings

Logger = logging.getLogger(__name__)


class EmailDeliveryError(RuntimeError):
    pass


def reset_url(reset_token: str) -> str:
    return f"{settings.frontend_url.rstrip('/')}/reset-password/{reset_token}"


def build_reset_message(to: str, reset_token: str) -> EmailMessage:
    url = reset_url(reset_token)
    msg = EmailMessage()
    msg["Subject"] = "Password Reset Request"
    msg["From"] = settings.email_from
    msg["To"] = to
    msg.set_content(
        f"You requested a password reset for your Fitness Tracker account.\n\n"
        f"Open this link to reset your password:\n{url}\n\n"
        f"This link will expire in 1 hour.\n"
        f"If you didn't request this, please ignore this email.\n"
    )
    msg.add_alternative(
        f"""
        <h2>Password Reset Request</h2>
        <p>You requested a password reset for your Fitness Tracker account.</p>
        <p>Click the link below to reset your password:</p>
        <a href="{url}">{url}</a>
        <p>This link will expire in 1 hour.</p>
        <p>If you didn't request this, please ignore this email.</p>
        """,
        subtype="html",
    )
    return msg


def _send(msg: EmailMessage) -> None:
    with smtplib.SMTP(settings.email_host, settings.email_port, timeout=15) as smtp:
        if settings.email_user and settings.email_pass:
            smtp.starttls()
            smtp.login(settings.email_user, settings.email_pass)
        smtp.send_message(msg)


async def send_password_reset_email(email: str, reset_token: str) -> None:
    msg = build_reset_message(email, reset_token)
    try:
        await run_in_threadpool(_send, msg)
    except (smtplib.SMTPException, OSError) as exc:
        raise EmailDeliveryError(f"could not send reset mail to {email}") from exc

    if not settings.is_production:
        Logger.info("password reset link for %s: %s", email, reset_url(reset_token))

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import httpx
from httpx import AsyncClient
from jinja2 import Environment, FileSystemLoader

from .sanitize import escape_html, nl2br
from ..exceptions.contact import EmailDispatchError
from ..logger import get_logger
from ..schemas.contact import Submission
from ..settings import settings


logger = get_logger(__name__)


# values are escaped by build_message, the email address is rendered as submitted
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "../templates"), autoescape=False)  # noqa: S701


@dataclass
class EmailMessage:
    from_: str
    to: list[str]
    subject: str
    html: str
    reply_to: str

    def to_payload(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["from"] = payload.pop("from_")
        return payload


def build_message(submission: Submission, source: str) -> EmailMessage:
    name = escape_html(submission.name)
    html = env.get_template("contact_submission.html").render(
        name=name, email=submission.email, source=source, message=nl2br(escape_html(submission.message))
    )
    return EmailMessage(
        from_=settings.email_from,
        to=settings.email_recipients,
        subject=f"New Contact Form Submission from {name}",
        html=html,
        reply_to=submission.email,
    )


async def send_email(message: EmailMessage) -> dict[str, Any]:
    logger.debug(f"Sending email to {', '.join(message.to)} ({message.subject})")

    try:
        async with AsyncClient() as client:
            response = await client.post(
                settings.email_api_endpoint,
                headers={"Authorization": f"Bearer {settings.email_api_key}"},
                json=message.to_payload(),
            )
    except httpx.HTTPError as e:
        raise EmailDispatchError(f"Email API unreachable: {e}") from e

    try:
        result = response.json()
    except ValueError as e:
        raise EmailDispatchError(f"Email API returned an invalid response (status {response.status_code})") from e

    if not isinstance(result, dict):
        result = {}
    if not response.is_success or result.get("error"):
        raise EmailDispatchError(_error_message(result) or "Failed to send email")

    return result


def _error_message(result: dict[str, Any]) -> str | None:
    match result.get("error"):
        case {"message": str(message)}:
            return message
        case str(message):
            return message
    message = result.get("message")
    return message if isinstance(message, str) else None

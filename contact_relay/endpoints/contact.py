"""Contact form submission endpoint"""

from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..counter_store import CounterStore, get_counter_store
from ..exceptions.api_exception import APIException
from ..exceptions.contact import (
    CouldNotSendMessageError,
    InvalidSubmissionError,
    MalformedRequestError,
    MethodNotAllowedError,
    OriginNotAllowedError,
    RateLimitExceededError,
)
from ..logger import get_logger
from ..schemas.contact import INVALID_EMAIL, ContactResponse, Submission
from ..settings import settings
from ..utils.cors import check_origin, cors_headers, preflight_headers
from ..utils.docs import responses
from ..utils.email import build_message, send_email
from ..utils.rate_limit import Quota, consume_quota, get_client_ip


logger = get_logger(__name__)

router = APIRouter(tags=["contact"])

METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def parse_submission(request: Request) -> Submission:
    try:
        data = await request.json()
    except ValueError:
        raise MalformedRequestError
    if not isinstance(data, dict):
        raise MalformedRequestError

    try:
        return Submission.parse_obj(data)
    except ValidationError as e:
        if any(error["loc"] == ("email",) and error["msg"] == INVALID_EMAIL for error in e.errors()):
            raise InvalidSubmissionError("Invalid email format")
        raise InvalidSubmissionError


def submission_source(request: Request) -> str:
    if settings.submitted_from == "url":
        return str(request.url)
    return request.headers.get("Origin", "")


def success_response(quota: Quota | None) -> Response:
    headers = cors_headers() | (quota.headers if quota else {})
    return JSONResponse({"success": True, "message": "Form submitted successfully"}, headers=headers)


@router.api_route(
    "/{path:path}",
    methods=METHODS,
    responses=responses(
        ContactResponse,
        InvalidSubmissionError,
        MalformedRequestError,
        OriginNotAllowedError,
        MethodNotAllowedError,
        RateLimitExceededError,
        CouldNotSendMessageError,
    ),
)
async def submit_contact_form(request: Request, store: CounterStore | None = Depends(get_counter_store)) -> Any:
    """
    Forward a contact form submission to the configured recipients.

    Only requests from the allowed origin are accepted. `OPTIONS` answers CORS pre-flight requests,
    `POST` expects a JSON body with `name`, `email` and `message`. Every client ip may submit
    `DAILY_LIMIT` forms per day; the remaining quota is reported in the `X-RateLimit-*` headers.
    """

    check_origin(request)

    if request.method == "OPTIONS":
        return Response(status_code=204, headers=preflight_headers())
    if request.method != "POST":
        raise MethodNotAllowedError

    try:
        quota = await consume_quota(store, get_client_ip(request), settings.daily_limit) if store else None
        submission = await parse_submission(request)
        await send_email(build_message(submission, submission_source(request)))
    except APIException:
        raise
    except Exception as e:
        logger.exception("Could not send contact form submission")
        raise CouldNotSendMessageError(str(e) if settings.expose_error_details else None)

    return success_response(quota)

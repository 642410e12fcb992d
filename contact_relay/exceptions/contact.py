from fastapi import status

from .api_exception import APIException


class OriginNotAllowedError(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Unauthorized origin"
    description = "The Origin header is missing or does not match the allowed origin."


class MethodNotAllowedError(APIException):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    detail = "Method not allowed"
    description = "Only POST (and OPTIONS for pre-flight requests) is supported."


class MalformedRequestError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid request body"
    description = "The request body is not a valid JSON object."


class InvalidSubmissionError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Missing required fields"
    description = "Name, email or message is missing or empty, or the email address is invalid."


class RateLimitExceededError(APIException):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    detail = "Rate limit exceeded. Please try again later."
    description = "The daily submission limit for this client has been reached."
    cors = True
    headers = {"Retry-After": "3600"}


class CouldNotSendMessageError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Could not send message"
    description = "The message could not be sent."
    cors = True


class EmailDispatchError(Exception):
    """Raised when the email API rejects a message or cannot be reached."""

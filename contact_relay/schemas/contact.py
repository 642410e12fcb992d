import re
from typing import Any

from pydantic import BaseModel, Field, StrictStr, validator

from ..utils.docs import example


EMAIL_REGEX = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
INVALID_EMAIL = "invalid email format"


class Submission(BaseModel):
    name: StrictStr = Field(description="Name of the sender")
    email: StrictStr = Field(description="Email address of the sender, used as reply-to")
    message: StrictStr = Field(description="Content of the message")

    @validator("name", "email", "message", pre=True)
    def _not_blank(cls, value: Any) -> Any:  # noqa: N805
        if isinstance(value, str) and not value.strip():
            raise ValueError("must not be empty")
        return value

    @validator("email")
    def _validate_email(cls, value: str) -> str:  # noqa: N805
        if not EMAIL_REGEX.fullmatch(value):
            raise ValueError(INVALID_EMAIL)
        return value

    Config = example(name="Jane Doe", email="jane@example.com", message="Hello!\nI'd like to get in touch.")


class ContactResponse(BaseModel):
    success: bool = Field(description="Whether the submission was forwarded")
    message: str = Field(description="Human readable result")

    Config = example(success=True, message="Form submitted successfully")

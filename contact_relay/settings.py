from typing import Literal

from pydantic import BaseSettings, Field


class Settings(BaseSettings):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8000
    root_path: str = ""

    debug: bool = False
    reload: bool = False

    allowed_origin: str

    email_from: str
    email_to: str
    email_api_endpoint: str = Field(regex=r"^https?://.*$")
    email_api_key: str

    daily_limit: int = Field(ge=0)
    redis_url: str | None = Field(None, regex=r"^rediss?://.*$")

    submitted_from: Literal["origin", "url"] = "origin"
    expose_error_details: bool = False

    sentry_dsn: str | None = None
    sentry_environment: str = "test"

    @property
    def email_recipients(self) -> list[str]:
        return [address.strip() for address in self.email_to.split(",") if address.strip()]


settings = Settings()

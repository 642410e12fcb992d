from fastapi import HTTPException


class APIException(HTTPException):
    status_code: int
    detail: str
    description: str
    cors: bool = False
    headers: dict[str, str] | None = None

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(self.status_code, detail or type(self).detail, type(self).headers)

from typing import Any, Type

from pydantic import BaseModel

from ..exceptions.api_exception import APIException


def example(*args: Any, **kwargs: Any) -> Type[BaseModel.Config]:
    class Config(BaseModel.Config):
        schema_extra = {"example": args[0] if args else kwargs}

    return Config


def _error_examples(excs: list[Type[APIException]]) -> dict[str, Any]:
    return {
        exc.__name__: {"summary": exc.description, "value": {"success": False, "message": exc.detail}} for exc in excs
    }


def responses(default: type, *args: Type[APIException]) -> dict[int | str, dict[str, Any]]:
    exceptions: dict[int, list[Type[APIException]]] = {}
    for exc in args:
        exceptions.setdefault(exc.status_code, []).append(exc)

    return {200: {"model": default}} | {
        code: {
            "description": " / ".join(exc.description for exc in excs),
            "content": {"application/json": {"examples": _error_examples(excs)}},
        }
        for code, excs in exceptions.items()
    }

from typing import Any, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: Literal[True] = True
    message: str
    data: Optional[T] = None


class ErrorEnvelope(BaseModel):
    success: Literal[False] = False
    message: str


class RouteMissEnvelope(ErrorEnvelope):
    path: str


# OpenAPI descriptions for the failure bodies shared by every resource route
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorEnvelope, "description": "Malformed request"},
    500: {"model": ErrorEnvelope, "description": "Store error"},
}
NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorEnvelope, "description": "No row with this id"},
}

"""
Unified errors and a Result wrapper so pipelines can drop a failed navigation
by severity instead of tearing the session down.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, TypeVar, Union, cast


class ErrorSeverity(Enum):
    WARNING = "warning"      # request dropped, session continues
    ERROR = "error"          # collaborator failed
    CRITICAL = "critical"    # session must end


@dataclass
class NavRouterError(Exception):
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    code: str = "UNKNOWN"
    context: Dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


@dataclass
class APIError(NavRouterError):
    code: str = "API_ERROR"
    status: int | None = None


@dataclass
class ResourceNotFoundError(APIError):
    code: str = "NOT_FOUND"
    status: int | None = 404


@dataclass
class ValidationError(NavRouterError):
    severity: ErrorSeverity = ErrorSeverity.WARNING
    code: str = "VALIDATION_ERROR"


@dataclass
class MalformedRequestError(ValidationError):
    code: str = "MALFORMED_REQUEST"


@dataclass
class ChannelClosedError(NavRouterError):
    severity: ErrorSeverity = ErrorSeverity.WARNING
    code: str = "CHANNEL_CLOSED"


T = TypeVar("T")
E = TypeVar("E", bound=NavRouterError)


@dataclass
class Result(Generic[T, E]):
    """Functional result wrapper; avoids scattered `None`/exception checks."""

    _value: Union[T, E]
    _is_ok: bool

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(_value=value, _is_ok=True)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(_value=error, _is_ok=False)

    def is_ok(self) -> bool:
        return self._is_ok

    @property
    def error(self) -> E | None:
        return None if self._is_ok else cast(E, self._value)

    def unwrap_or(self, default: T) -> T:
        return cast(T, self._value) if self._is_ok else default

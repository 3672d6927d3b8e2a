"""
Unified error module.
"""

from .errors import (
    ErrorSeverity,
    NavRouterError,
    APIError,
    ResourceNotFoundError,
    ValidationError,
    MalformedRequestError,
    ChannelClosedError,
    Result,
)

__all__ = [
    "ErrorSeverity",
    "NavRouterError",
    "APIError",
    "ResourceNotFoundError",
    "ValidationError",
    "MalformedRequestError",
    "ChannelClosedError",
    "Result",
]

"""HTTP protocol schemas."""
from .messages import (
    ErrorCode,
    CardSchema,
    NewDeckResponse,
    OpenDeckResponse,
    DrawHandResponse,
    ErrorResponse,
    parse_bool,
    parse_count,
)

__all__ = [
    "ErrorCode",
    "CardSchema",
    "NewDeckResponse",
    "OpenDeckResponse",
    "DrawHandResponse",
    "ErrorResponse",
    "parse_bool",
    "parse_count",
]

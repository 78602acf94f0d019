"""The error object that accompanies a 4xx or 5xx response."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from scryfall_types.fields import (
    optional,
    parse_int,
    parse_object,
    parse_str,
    required,
    tuple_of,
)


@dataclass(frozen=True)
class Error:
    """A failed request as described by the API.

    This is returned data, not an exception. Transports decide how to surface
    it (see ``scryfall_types.transport.ApiError``).
    """

    status: int  # HTTP status code
    code: str  # computer-friendly status name, e.g. "not_found"
    details: str
    error_type: Optional[str] = None  # e.g. "ambiguous" for some 404s
    warnings: Optional[Tuple[str, ...]] = None


def parse_error(raw: Any) -> Error:
    """Parse an error body. The wire key for ``error_type`` is ``type``."""
    raw = parse_object(raw)
    return Error(
        status=required(raw, "status", parse_int),
        code=required(raw, "code", parse_str),
        details=required(raw, "details", parse_str),
        error_type=optional(raw, "type", parse_str),
        warnings=optional(raw, "warnings", tuple_of(parse_str)),
    )

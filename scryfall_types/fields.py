"""Field-level helpers shared by the record parsers.

Scalar parsers take one wire value and either return the typed value or raise
a leaf ``ValidationError``. ``required``/``optional`` read one key from a wire
object and attribute any failure to that key.
"""

from __future__ import annotations

import re
import uuid
from datetime import date
from typing import Any, Callable, Dict, FrozenSet, Optional, Tuple, TypeVar

from scryfall_types.errors import (
    InvalidValue,
    MissingRequiredField,
    ValidationError,
    attribute,
)

T = TypeVar("T")

Parser = Callable[[Any], T]

_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


# ------------------------------------------------------------------
# Scalars
# ------------------------------------------------------------------


def parse_str(raw: Any) -> str:
    if not isinstance(raw, str):
        raise InvalidValue(raw, "a string")
    return raw


def parse_bool(raw: Any) -> bool:
    if not isinstance(raw, bool):
        raise InvalidValue(raw, "a boolean")
    return raw


def parse_int(raw: Any) -> int:
    """Non-negative integer. JSON booleans are not integers here."""
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise InvalidValue(raw, "a non-negative integer")
    return raw


def parse_number(raw: Any) -> float:
    """Any finite JSON number (e.g. cmc, which can be fractional)."""
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise InvalidValue(raw, "a number")
    if raw != raw or raw in (float("inf"), float("-inf")):
        raise InvalidValue(raw, "a finite number")
    try:
        return float(raw)
    except OverflowError as exc:
        raise InvalidValue(raw, "a finite number") from exc


def parse_uuid(raw: Any) -> uuid.UUID:
    """UUID in canonical 8-4-4-4-12 hexadecimal form."""
    if not isinstance(raw, str) or not _UUID_RE.fullmatch(raw):
        raise InvalidValue(raw, "a UUID")
    return uuid.UUID(raw)


def parse_date(raw: Any) -> date:
    """Calendar date in YYYY-MM-DD form."""
    if not isinstance(raw, str) or not _DATE_RE.fullmatch(raw):
        raise InvalidValue(raw, "a YYYY-MM-DD date")
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidValue(raw, "a YYYY-MM-DD date") from exc


def parse_object(raw: Any) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise InvalidValue(raw, "a JSON object")
    return raw


# ------------------------------------------------------------------
# Collections
# ------------------------------------------------------------------


def tuple_of(parser: Parser[T]) -> Parser[Tuple[T, ...]]:
    """Build a parser for a JSON array, keeping element order."""

    def parse(raw: Any) -> Tuple[T, ...]:
        if not isinstance(raw, list):
            raise InvalidValue(raw, "an array")
        items = []
        for i, item in enumerate(raw):
            try:
                items.append(parser(item))
            except ValidationError as exc:
                raise attribute(exc, f"[{i}]") from exc
        return tuple(items)

    return parse


def frozenset_of(parser: Parser[T]) -> Parser[FrozenSet[T]]:
    """Build a parser for a JSON array treated as an unordered set."""
    parse_items = tuple_of(parser)

    def parse(raw: Any) -> FrozenSet[T]:
        return frozenset(parse_items(raw))

    return parse


# ------------------------------------------------------------------
# Record fields
# ------------------------------------------------------------------


def required(raw: Dict[str, Any], key: str, parser: Parser[T]) -> T:
    """Read a required key. Absent and null are both missing."""
    value = raw.get(key)
    if value is None:
        raise MissingRequiredField(key)
    try:
        return parser(value)
    except ValidationError as exc:
        raise attribute(exc, key) from exc


def optional(raw: Dict[str, Any], key: str, parser: Parser[T]) -> Optional[T]:
    """Read an optional key. A present but malformed value still fails."""
    value = raw.get(key)
    if value is None:
        return None
    try:
        return parser(value)
    except ValidationError as exc:
        raise attribute(exc, key) from exc

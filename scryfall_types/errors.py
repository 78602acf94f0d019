"""Validation error taxonomy.

Every failure raised while turning a wire record into a typed value is a
``ValidationError``. Leaf validators raise the specific leaf errors
(``InvalidPrice``, ``InvalidUri``, ``UnknownTag``, ``InvalidValue``); record
parsers attribute them to a field path by wrapping them in
``MalformedRecord`` or by raising ``MissingRequiredField``.
"""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Base class for all wire-data validation failures."""


class InvalidPrice(ValidationError):
    """A price string that is not a finite base-10 number."""

    def __init__(self, raw: Any) -> None:
        self.raw = raw
        super().__init__(f"Invalid price: {raw!r}")


class InvalidUri(ValidationError):
    """A string that is not a well-formed absolute URI."""

    def __init__(self, raw: Any) -> None:
        self.raw = raw
        super().__init__(f"Invalid URI: {raw!r}")


class UnknownTag(ValidationError):
    """A wire tag outside the closed vocabulary of an enumeration."""

    def __init__(self, field: str, raw: Any) -> None:
        self.field = field
        self.raw = raw
        super().__init__(f"Unknown {field} tag: {raw!r}")


class InvalidValue(ValidationError):
    """A wire value of the wrong JSON type or textual form."""

    def __init__(self, raw: Any, expected: str) -> None:
        self.raw = raw
        self.expected = expected
        super().__init__(f"Expected {expected}, got {raw!r}")


class MissingRequiredField(ValidationError):
    """A required field that is absent or null."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")


class MalformedRecord(ValidationError):
    """A field whose value failed validation.

    ``field`` is the full path from the outermost record being parsed
    (e.g. ``card_faces[1].colors[0]``) and ``cause`` is the leaf error.
    """

    def __init__(self, field: str, cause: ValidationError) -> None:
        self.field = field
        self.cause = cause
        super().__init__(f"Malformed field {field}: {cause}")


class MissingContinuation(ValidationError):
    """A list page that reports more results but carries no next_page link."""

    def __init__(self, page: Any) -> None:
        self.page = page
        super().__init__("List has_more is true but next_page is missing")


def join_path(outer: str, inner: str) -> str:
    """Join two field path segments, keeping index segments attached."""
    if not outer:
        return inner
    if inner.startswith("["):
        return f"{outer}{inner}"
    return f"{outer}.{inner}"


def attribute(exc: ValidationError, field: str) -> ValidationError:
    """Attribute a validation failure to ``field``.

    Errors that already carry a path are re-rooted under ``field``; leaf
    errors are wrapped in ``MalformedRecord``.
    """
    if isinstance(exc, MissingRequiredField):
        return MissingRequiredField(join_path(field, exc.field))
    if isinstance(exc, MalformedRecord):
        return MalformedRecord(join_path(field, exc.field), exc.cause)
    return MalformedRecord(field, exc)

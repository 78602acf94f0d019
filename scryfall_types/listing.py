"""Paginated List envelope, generic over the element type.

The same envelope logic serves card lists and set lists; callers inject the
per-element parser. Fetching ``next_page`` is left to a transport.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterator, Optional, Tuple, TypeVar

from scryfall_types.card import Card, parse_card
from scryfall_types.errors import InvalidValue, MissingContinuation, attribute
from scryfall_types.fields import (
    optional,
    parse_bool,
    parse_int,
    parse_object,
    parse_str,
    required,
    tuple_of,
)
from scryfall_types.sets import Set, parse_set
from scryfall_types.uri import Uri

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ListPage(Generic[T]):
    """One page of a List object.

    ``data`` keeps the server's order. ``total_cards`` is advisory and only
    sent for card lists. A page with ``has_more`` but no ``next_page`` is a
    protocol anomaly: it is kept as received and reported by
    ``continuation_missing``.
    """

    data: Tuple[T, ...]
    has_more: bool
    next_page: Optional[Uri] = None
    total_cards: Optional[int] = None
    warnings: Optional[Tuple[str, ...]] = None

    @property
    def continuation_missing(self) -> bool:
        return self.has_more and self.next_page is None

    def continuation(self) -> Optional[Uri]:
        """Return the next page URI, or None on the last page.

        Raises ``MissingContinuation`` for an anomalous page.
        """
        if self.continuation_missing:
            raise MissingContinuation(self)
        return self.next_page if self.has_more else None

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)


def parse_list(raw: Any, element_parser: Callable[[Any], T]) -> ListPage[T]:
    """Parse a List object, validating each element with ``element_parser``.

    One malformed element fails the whole page.
    """
    raw = parse_object(raw)
    page: ListPage[T] = ListPage(
        data=required(raw, "data", tuple_of(element_parser)),
        has_more=required(raw, "has_more", parse_bool),
        next_page=optional(raw, "next_page", Uri.parse),
        total_cards=optional(raw, "total_cards", parse_int),
        warnings=optional(raw, "warnings", tuple_of(parse_str)),
    )
    if page.continuation_missing:
        logger.warning(
            "List page reports has_more but has no next_page (%d items)",
            len(page.data),
        )
    return page


CardList = ListPage[Card]
SetList = ListPage[Set]


def parse_card_list(raw: Any) -> CardList:
    return parse_list(raw, parse_card)


def parse_set_list(raw: Any) -> SetList:
    return parse_list(raw, parse_set)


ELEMENT_PARSERS: Dict[str, Callable[[Any], Any]] = {
    "card": parse_card,
    "set": parse_set,
}


def parse_element(raw: Any) -> Any:
    """Parse one List element, choosing the parser from its ``object`` tag."""
    raw = parse_object(raw)
    kind = raw.get("object")
    parser = ELEMENT_PARSERS.get(kind) if isinstance(kind, str) else None
    if parser is None:
        raise attribute(InvalidValue(kind, "a 'card' or 'set' object"), "object")
    return parser(raw)


def parse_any_list(raw: Any) -> ListPage[Any]:
    """Parse a List whose element kind is read from each element."""
    return parse_list(raw, parse_element)

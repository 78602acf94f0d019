"""Set records."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from scryfall_types.enums import SetType
from scryfall_types.fields import (
    optional,
    parse_bool,
    parse_date,
    parse_int,
    parse_object,
    parse_str,
    parse_uuid,
    required,
)
from scryfall_types.uri import Uri


@dataclass(frozen=True)
class Set:
    """A release grouping of cards.

    ``parent_set_code`` is the code of the parent set (promo and token sets
    often have one). It is a key to look up, not a reference to a ``Set``.
    """

    id: uuid.UUID
    code: str  # unique three to five-letter code
    name: str
    set_type: SetType
    card_count: int
    digital: bool
    foil_only: bool
    scryfall_uri: Uri
    uri: Uri
    icon_svg_uri: Uri
    search_uri: Uri
    mtgo_code: Optional[str] = None
    tcgplayer_id: Optional[int] = None
    released_at: Optional[date] = None
    block_code: Optional[str] = None
    block: Optional[str] = None
    parent_set_code: Optional[str] = None


def parse_set(raw: Any) -> Set:
    """Parse a set object from the API into a ``Set``."""
    raw = parse_object(raw)
    return Set(
        id=required(raw, "id", parse_uuid),
        code=required(raw, "code", parse_str),
        name=required(raw, "name", parse_str),
        set_type=required(raw, "set_type", SetType.parse),
        card_count=required(raw, "card_count", parse_int),
        digital=required(raw, "digital", parse_bool),
        foil_only=required(raw, "foil_only", parse_bool),
        scryfall_uri=required(raw, "scryfall_uri", Uri.parse),
        uri=required(raw, "uri", Uri.parse),
        icon_svg_uri=required(raw, "icon_svg_uri", Uri.parse),
        search_uri=required(raw, "search_uri", Uri.parse),
        mtgo_code=optional(raw, "mtgo_code", parse_str),
        tcgplayer_id=optional(raw, "tcgplayer_id", parse_int),
        released_at=optional(raw, "released_at", parse_date),
        block_code=optional(raw, "block_code", parse_str),
        block=optional(raw, "block", parse_str),
        parent_set_code=optional(raw, "parent_set_code", parse_str),
    )

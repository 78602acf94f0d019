"""Typed, validated models for Scryfall API responses."""

from __future__ import annotations

from scryfall_types.api_error import Error, parse_error
from scryfall_types.card import (
    Card,
    CardFace,
    ImageUris,
    Legalities,
    Prices,
    PurchaseUris,
    RelatedCard,
    RelatedUris,
    parse_card,
    parse_card_face,
    parse_image_uris,
    parse_legalities,
    parse_prices,
    parse_purchase_uris,
    parse_related_card,
    parse_related_uris,
)
from scryfall_types.enums import (
    Color,
    Frame,
    FrameEffect,
    Game,
    Layout,
    Legality,
    Rarity,
    SetType,
)
from scryfall_types.errors import (
    InvalidPrice,
    InvalidUri,
    InvalidValue,
    MalformedRecord,
    MissingContinuation,
    MissingRequiredField,
    UnknownTag,
    ValidationError,
)
from scryfall_types.listing import (
    CardList,
    ListPage,
    SetList,
    parse_any_list,
    parse_card_list,
    parse_list,
    parse_set_list,
)
from scryfall_types.price import Price
from scryfall_types.sets import Set, parse_set
from scryfall_types.uri import Uri

__all__ = [
    "Card",
    "CardFace",
    "CardList",
    "Color",
    "Error",
    "Frame",
    "FrameEffect",
    "Game",
    "ImageUris",
    "InvalidPrice",
    "InvalidUri",
    "InvalidValue",
    "Layout",
    "Legalities",
    "Legality",
    "ListPage",
    "MalformedRecord",
    "MissingContinuation",
    "MissingRequiredField",
    "Price",
    "Prices",
    "PurchaseUris",
    "Rarity",
    "RelatedCard",
    "RelatedUris",
    "Set",
    "SetList",
    "SetType",
    "UnknownTag",
    "Uri",
    "ValidationError",
    "parse_any_list",
    "parse_card",
    "parse_card_face",
    "parse_card_list",
    "parse_error",
    "parse_image_uris",
    "parse_legalities",
    "parse_list",
    "parse_prices",
    "parse_purchase_uris",
    "parse_related_card",
    "parse_related_uris",
    "parse_set",
    "parse_set_list",
]

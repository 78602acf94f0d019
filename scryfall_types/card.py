"""Card records and their sub-records.

Each ``parse_*`` function validates a decoded JSON object field by field and
returns a frozen record. A record is returned whole or not at all: any
missing required field or malformed field (required or optional) raises a
``ValidationError`` naming the field path.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date
from typing import Any, FrozenSet, Optional, Tuple

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
from scryfall_types.fields import (
    frozenset_of,
    optional,
    parse_bool,
    parse_date,
    parse_int,
    parse_number,
    parse_object,
    parse_str,
    parse_uuid,
    required,
    tuple_of,
)
from scryfall_types.price import Price
from scryfall_types.uri import Uri

_colors = frozenset_of(Color.parse)
_strings = tuple_of(parse_str)


@dataclass(frozen=True)
class Legalities:
    """Legality of a card in each supported format. Always fully populated."""

    standard: Legality
    future: Legality
    modern: Legality
    legacy: Legality
    pauper: Legality
    vintage: Legality
    penny: Legality
    commander: Legality
    brawl: Legality
    duel: Legality
    oldschool: Legality


LEGALITY_FORMATS: Tuple[str, ...] = (
    "standard",
    "future",
    "modern",
    "legacy",
    "pauper",
    "vintage",
    "penny",
    "commander",
    "brawl",
    "duel",
    "oldschool",
)


@dataclass(frozen=True)
class ImageUris:
    """URIs for each kind of image the API stores."""

    small: Optional[Uri] = None
    normal: Optional[Uri] = None
    large: Optional[Uri] = None
    png: Optional[Uri] = None
    art_crop: Optional[Uri] = None
    border_crop: Optional[Uri] = None


@dataclass(frozen=True)
class Prices:
    """Daily prices in different markets."""

    usd: Optional[Price] = None
    usd_foil: Optional[Price] = None
    eur: Optional[Price] = None
    tix: Optional[Price] = None


@dataclass(frozen=True)
class PurchaseUris:
    """Listings on marketplaces where the card can be bought."""

    tcgplayer: Optional[Uri] = None
    cardmarket: Optional[Uri] = None
    cardhoarder: Optional[Uri] = None


@dataclass(frozen=True)
class RelatedUris:
    """Pages about the card on other resources."""

    tcgplayer_decks: Optional[Uri] = None
    edhrec: Optional[Uri] = None
    mtgtop8: Optional[Uri] = None


@dataclass(frozen=True)
class RelatedCard:
    """An entry of a card's ``all_parts``."""

    id: uuid.UUID
    component: str  # token, meld_part, meld_result or combo_piece
    name: str
    type_line: str
    uri: Uri


@dataclass(frozen=True)
class CardFace:
    """One face of a multi-faced card, an entry of ``card_faces``."""

    name: str
    artist: Optional[str] = None
    color_indicator: Optional[FrozenSet[Color]] = None
    colors: Optional[FrozenSet[Color]] = None
    flavor_text: Optional[str] = None
    illustration_id: Optional[uuid.UUID] = None
    image_uris: Optional[ImageUris] = None
    loyalty: Optional[str] = None
    mana_cost: Optional[str] = None
    oracle_text: Optional[str] = None
    power: Optional[str] = None
    printed_name: Optional[str] = None
    printed_text: Optional[str] = None
    printed_type_line: Optional[str] = None
    toughness: Optional[str] = None
    type_line: Optional[str] = None
    watermark: Optional[str] = None


@dataclass(frozen=True)
class Card:
    """The primary card object.

    When ``colors`` is absent on a multi-faced card, color data lives on each
    entry of ``card_faces`` instead. This is not checked while parsing.
    """

    # Required
    id: uuid.UUID
    name: str
    layout: Layout
    legalities: Legalities
    rarity: Rarity
    type_line: str
    released_at: date
    set: str

    # Core
    arena_id: Optional[int] = None
    lang: Optional[str] = None
    mtgo_id: Optional[int] = None
    mtgo_foil_id: Optional[int] = None
    multiverse_ids: Optional[Tuple[int, ...]] = None
    tcgplayer_id: Optional[int] = None
    oracle_id: Optional[uuid.UUID] = None
    prints_search_uri: Optional[Uri] = None
    rulings_uri: Optional[Uri] = None
    scryfall_uri: Optional[Uri] = None
    uri: Optional[Uri] = None

    # Gameplay
    all_parts: Optional[Tuple[RelatedCard, ...]] = None
    card_faces: Optional[Tuple[CardFace, ...]] = None
    cmc: Optional[float] = None
    colors: Optional[FrozenSet[Color]] = None
    color_identity: Optional[FrozenSet[Color]] = None
    color_indicator: Optional[FrozenSet[Color]] = None
    edhrec_rank: Optional[int] = None
    foil: Optional[bool] = None
    loyalty: Optional[str] = None
    mana_cost: Optional[str] = None
    nonfoil: Optional[bool] = None
    oracle_text: Optional[str] = None
    oversized: Optional[bool] = None
    power: Optional[str] = None
    reserved: Optional[bool] = None
    toughness: Optional[str] = None

    # Print
    artist: Optional[str] = None
    booster: Optional[bool] = None
    border_color: Optional[str] = None
    card_back_id: Optional[uuid.UUID] = None
    collector_number: Optional[str] = None
    digital: Optional[bool] = None
    flavor_text: Optional[str] = None
    frame_effect: Optional[FrameEffect] = None
    frame_effects: Optional[Tuple[FrameEffect, ...]] = None
    frame: Optional[Frame] = None
    full_art: Optional[bool] = None
    games: Optional[Tuple[Game, ...]] = None
    highres_image: Optional[bool] = None
    illustration_id: Optional[uuid.UUID] = None
    image_uris: Optional[ImageUris] = None
    prices: Optional[Prices] = None
    printed_name: Optional[str] = None
    printed_text: Optional[str] = None
    printed_type_line: Optional[str] = None
    promo: Optional[bool] = None
    promo_types: Optional[Tuple[str, ...]] = None
    purchase_uris: Optional[PurchaseUris] = None
    related_uris: Optional[RelatedUris] = None
    reprint: Optional[bool] = None
    scryfall_set_uri: Optional[Uri] = None
    set_name: Optional[str] = None
    set_search_uri: Optional[Uri] = None
    set_type: Optional[SetType] = None
    set_uri: Optional[Uri] = None
    story_spotlight: Optional[bool] = None
    textless: Optional[bool] = None
    variation: Optional[bool] = None
    variation_of: Optional[uuid.UUID] = None
    watermark: Optional[str] = None

    @property
    def is_multi_faced(self) -> bool:
        return bool(self.card_faces)


def parse_legalities(raw: Any) -> Legalities:
    raw = parse_object(raw)
    return Legalities(
        **{fmt: required(raw, fmt, Legality.parse) for fmt in LEGALITY_FORMATS}
    )


def parse_image_uris(raw: Any) -> ImageUris:
    raw = parse_object(raw)
    return ImageUris(
        small=optional(raw, "small", Uri.parse),
        normal=optional(raw, "normal", Uri.parse),
        large=optional(raw, "large", Uri.parse),
        png=optional(raw, "png", Uri.parse),
        art_crop=optional(raw, "art_crop", Uri.parse),
        border_crop=optional(raw, "border_crop", Uri.parse),
    )


def parse_prices(raw: Any) -> Prices:
    raw = parse_object(raw)
    return Prices(
        usd=optional(raw, "usd", Price.parse),
        usd_foil=optional(raw, "usd_foil", Price.parse),
        eur=optional(raw, "eur", Price.parse),
        tix=optional(raw, "tix", Price.parse),
    )


def parse_purchase_uris(raw: Any) -> PurchaseUris:
    raw = parse_object(raw)
    return PurchaseUris(
        tcgplayer=optional(raw, "tcgplayer", Uri.parse),
        cardmarket=optional(raw, "cardmarket", Uri.parse),
        cardhoarder=optional(raw, "cardhoarder", Uri.parse),
    )


def parse_related_uris(raw: Any) -> RelatedUris:
    raw = parse_object(raw)
    return RelatedUris(
        tcgplayer_decks=optional(raw, "tcgplayer_decks", Uri.parse),
        edhrec=optional(raw, "edhrec", Uri.parse),
        mtgtop8=optional(raw, "mtgtop8", Uri.parse),
    )


def parse_related_card(raw: Any) -> RelatedCard:
    raw = parse_object(raw)
    return RelatedCard(
        id=required(raw, "id", parse_uuid),
        component=required(raw, "component", parse_str),
        name=required(raw, "name", parse_str),
        type_line=required(raw, "type_line", parse_str),
        uri=required(raw, "uri", Uri.parse),
    )


def parse_card_face(raw: Any) -> CardFace:
    raw = parse_object(raw)
    return CardFace(
        name=required(raw, "name", parse_str),
        artist=optional(raw, "artist", parse_str),
        color_indicator=optional(raw, "color_indicator", _colors),
        colors=optional(raw, "colors", _colors),
        flavor_text=optional(raw, "flavor_text", parse_str),
        illustration_id=optional(raw, "illustration_id", parse_uuid),
        image_uris=optional(raw, "image_uris", parse_image_uris),
        loyalty=optional(raw, "loyalty", parse_str),
        mana_cost=optional(raw, "mana_cost", parse_str),
        oracle_text=optional(raw, "oracle_text", parse_str),
        power=optional(raw, "power", parse_str),
        printed_name=optional(raw, "printed_name", parse_str),
        printed_text=optional(raw, "printed_text", parse_str),
        printed_type_line=optional(raw, "printed_type_line", parse_str),
        toughness=optional(raw, "toughness", parse_str),
        type_line=optional(raw, "type_line", parse_str),
        watermark=optional(raw, "watermark", parse_str),
    )


def parse_card(raw: Any) -> Card:
    """Parse a card object from the API into a ``Card``."""
    raw = parse_object(raw)
    return Card(
        id=required(raw, "id", parse_uuid),
        name=required(raw, "name", parse_str),
        layout=required(raw, "layout", Layout.parse),
        legalities=required(raw, "legalities", parse_legalities),
        rarity=required(raw, "rarity", Rarity.parse),
        type_line=required(raw, "type_line", parse_str),
        released_at=required(raw, "released_at", parse_date),
        set=required(raw, "set", parse_str),
        arena_id=optional(raw, "arena_id", parse_int),
        lang=optional(raw, "lang", parse_str),
        mtgo_id=optional(raw, "mtgo_id", parse_int),
        mtgo_foil_id=optional(raw, "mtgo_foil_id", parse_int),
        multiverse_ids=optional(raw, "multiverse_ids", tuple_of(parse_int)),
        tcgplayer_id=optional(raw, "tcgplayer_id", parse_int),
        oracle_id=optional(raw, "oracle_id", parse_uuid),
        prints_search_uri=optional(raw, "prints_search_uri", Uri.parse),
        rulings_uri=optional(raw, "rulings_uri", Uri.parse),
        scryfall_uri=optional(raw, "scryfall_uri", Uri.parse),
        uri=optional(raw, "uri", Uri.parse),
        all_parts=optional(raw, "all_parts", tuple_of(parse_related_card)),
        card_faces=optional(raw, "card_faces", tuple_of(parse_card_face)),
        cmc=optional(raw, "cmc", parse_number),
        colors=optional(raw, "colors", _colors),
        color_identity=optional(raw, "color_identity", _colors),
        color_indicator=optional(raw, "color_indicator", _colors),
        edhrec_rank=optional(raw, "edhrec_rank", parse_int),
        foil=optional(raw, "foil", parse_bool),
        loyalty=optional(raw, "loyalty", parse_str),
        mana_cost=optional(raw, "mana_cost", parse_str),
        nonfoil=optional(raw, "nonfoil", parse_bool),
        oracle_text=optional(raw, "oracle_text", parse_str),
        oversized=optional(raw, "oversized", parse_bool),
        power=optional(raw, "power", parse_str),
        reserved=optional(raw, "reserved", parse_bool),
        toughness=optional(raw, "toughness", parse_str),
        artist=optional(raw, "artist", parse_str),
        booster=optional(raw, "booster", parse_bool),
        border_color=optional(raw, "border_color", parse_str),
        card_back_id=optional(raw, "card_back_id", parse_uuid),
        collector_number=optional(raw, "collector_number", parse_str),
        digital=optional(raw, "digital", parse_bool),
        flavor_text=optional(raw, "flavor_text", parse_str),
        frame_effect=optional(raw, "frame_effect", FrameEffect.parse),
        frame_effects=optional(raw, "frame_effects", tuple_of(FrameEffect.parse)),
        frame=optional(raw, "frame", Frame.parse),
        full_art=optional(raw, "full_art", parse_bool),
        games=optional(raw, "games", tuple_of(Game.parse)),
        highres_image=optional(raw, "highres_image", parse_bool),
        illustration_id=optional(raw, "illustration_id", parse_uuid),
        image_uris=optional(raw, "image_uris", parse_image_uris),
        prices=optional(raw, "prices", parse_prices),
        printed_name=optional(raw, "printed_name", parse_str),
        printed_text=optional(raw, "printed_text", parse_str),
        printed_type_line=optional(raw, "printed_type_line", parse_str),
        promo=optional(raw, "promo", parse_bool),
        promo_types=optional(raw, "promo_types", _strings),
        purchase_uris=optional(raw, "purchase_uris", parse_purchase_uris),
        related_uris=optional(raw, "related_uris", parse_related_uris),
        reprint=optional(raw, "reprint", parse_bool),
        scryfall_set_uri=optional(raw, "scryfall_set_uri", Uri.parse),
        set_name=optional(raw, "set_name", parse_str),
        set_search_uri=optional(raw, "set_search_uri", Uri.parse),
        set_type=optional(raw, "set_type", SetType.parse),
        set_uri=optional(raw, "set_uri", Uri.parse),
        story_spotlight=optional(raw, "story_spotlight", parse_bool),
        textless=optional(raw, "textless", parse_bool),
        variation=optional(raw, "variation", parse_bool),
        variation_of=optional(raw, "variation_of", parse_uuid),
        watermark=optional(raw, "watermark", parse_str),
    )

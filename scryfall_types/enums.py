"""Closed enumerations for compact wire tags.

Each enum's values are the exact tags the API sends. ``parse`` is a strict,
case-sensitive lookup: an unrecognized tag raises ``UnknownTag`` and is
never mapped to a fallback member.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from scryfall_types.errors import UnknownTag

E = TypeVar("E", bound="WireEnum")


class WireEnum(str, Enum):
    """Base for enums decoded from wire tags."""

    @classmethod
    def field_name(cls) -> str:
        return cls.__name__.lower()

    @classmethod
    def parse(cls: type[E], tag: Any) -> E:
        if not isinstance(tag, str):
            raise UnknownTag(cls.field_name(), tag)
        for member in cls:
            if member.value == tag:
                return member
        raise UnknownTag(cls.field_name(), tag)


class Color(WireEnum):
    """Card colors. A card with no colors is not automatically colorless."""

    WHITE = "W"
    BLUE = "U"
    BLACK = "B"
    RED = "R"
    GREEN = "G"


class Layout(WireEnum):
    NORMAL = "normal"
    SPLIT = "split"
    FLIP = "flip"
    TRANSFORM = "transform"
    MELD = "meld"
    LEVELER = "leveler"
    SAGA = "saga"
    PLANAR = "planar"
    SCHEME = "scheme"
    VANGUARD = "vanguard"
    TOKEN = "token"
    DOUBLE_FACED_TOKEN = "double_faced_token"
    EMBLEM = "emblem"
    AUGMENT = "augment"
    HOST = "host"


class FrameEffect(WireEnum):
    """Effects applied over the primary frame."""

    LEGENDARY = "legendary"
    MIRACLE = "miracle"
    NYX_TOUCHED = "nyxtouched"
    DRAFT = "draft"
    DEVOID = "devoid"
    TOMBSTONE = "tombstone"
    COLOR_SHIFTED = "colorshifted"
    SUN_MOON_DFC = "sunmoondfc"
    COMPASS_LAND_DFC = "compasslanddfc"
    ORIGIN_PW_DFC = "originpwdfc"
    MOON_ELDRAZI_DFC = "mooneldrazidfc"

    @classmethod
    def field_name(cls) -> str:
        return "frame_effect"


class Frame(WireEnum):
    """Main frame edition, by year."""

    YEAR_1993 = "1993"
    YEAR_1997 = "1997"
    YEAR_2003 = "2003"
    YEAR_2015 = "2015"
    FUTURE = "future"


class Game(WireEnum):
    PAPER = "paper"
    ARENA = "arena"
    MTGO = "mtgo"


class Rarity(WireEnum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    MYTHIC = "mythic"


class Legality(WireEnum):
    LEGAL = "legal"
    NOT_LEGAL = "not_legal"
    RESTRICTED = "restricted"
    BANNED = "banned"


class SetType(WireEnum):
    CORE = "core"
    EXPANSION = "expansion"
    MASTERS = "masters"
    MASTERPIECE = "masterpiece"
    FROM_THE_VAULT = "from_the_vault"
    SPELLBOOK = "spellbook"
    PREMIUM_DECK = "premium_deck"
    DUEL_DECK = "duel_deck"
    DRAFT_INNOVATION = "draft_innovation"
    TREASURE_CHEST = "treasure_chest"
    COMMANDER = "commander"
    PLANECHASE = "planechase"
    ARCHENEMY = "archenemy"
    VANGUARD = "vanguard"
    FUNNY = "funny"
    STARTER = "starter"
    BOX = "box"
    PROMO = "promo"
    TOKEN = "token"
    MEMORABILIA = "memorabilia"

    @classmethod
    def field_name(cls) -> str:
        return "set_type"

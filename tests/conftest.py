"""Sample wire objects shared across tests."""

import copy

import pytest

from scryfall_types.card import LEGALITY_FORMATS

BOLT_ID = "f29ba16f-c8fb-42fe-aabf-87089cb214a7"
DELVER_ID = "11bf83bb-c95b-4b4f-9a56-ce7a1816307a"
LEA_ID = "288bd996-960e-448b-a187-9504c1ffa60f"


def make_legalities(**overrides):
    legalities = {fmt: "legal" for fmt in LEGALITY_FORMATS}
    legalities.update(overrides)
    return legalities


LIGHTNING_BOLT = {
    "object": "card",
    "id": BOLT_ID,
    "oracle_id": "4457ed35-7c10-48c8-9776-456485fdf070",
    "multiverse_ids": [209],
    "mtgo_id": 0,
    "tcgplayer_id": 1040,
    "name": "Lightning Bolt",
    "lang": "en",
    "released_at": "1993-08-05",
    "uri": "https://api.scryfall.com/cards/f29ba16f-c8fb-42fe-aabf-87089cb214a7",
    "scryfall_uri": "https://scryfall.com/card/lea/161/lightning-bolt",
    "layout": "normal",
    "highres_image": True,
    "image_uris": {
        "small": "https://cards.scryfall.io/small/front/f/2/f29ba16f.jpg",
        "normal": "https://cards.scryfall.io/normal/front/f/2/f29ba16f.jpg",
        "large": "https://cards.scryfall.io/large/front/f/2/f29ba16f.jpg",
    },
    "mana_cost": "{R}",
    "cmc": 1.0,
    "type_line": "Instant",
    "oracle_text": "Lightning Bolt deals 3 damage to any target.",
    "colors": ["R"],
    "color_identity": ["R"],
    "legalities": make_legalities(standard="not_legal", future="not_legal", vintage="legal"),
    "games": ["paper"],
    "reserved": False,
    "foil": False,
    "nonfoil": True,
    "oversized": False,
    "promo": False,
    "reprint": False,
    "variation": False,
    "set": "lea",
    "set_name": "Limited Edition Alpha",
    "set_type": "core",
    "set_uri": "https://api.scryfall.com/sets/288bd996-960e-448b-a187-9504c1ffa60f",
    "set_search_uri": "https://api.scryfall.com/cards/search?order=set&q=e%3Alea&unique=prints",
    "scryfall_set_uri": "https://scryfall.com/sets/lea",
    "rulings_uri": "https://api.scryfall.com/cards/f29ba16f-c8fb-42fe-aabf-87089cb214a7/rulings",
    "prints_search_uri": "https://api.scryfall.com/cards/search?order=released&q=oracleid%3A4457ed35&unique=prints",
    "collector_number": "161",
    "digital": False,
    "rarity": "common",
    "card_back_id": "0aeebaf5-8c7d-4636-9e82-8c27447861f7",
    "artist": "Christopher Rush",
    "illustration_id": "6e6c7ee8-1a35-4b09-9b5c-ba4fc8b0b4a4",
    "border_color": "black",
    "frame": "1993",
    "full_art": False,
    "textless": False,
    "booster": True,
    "story_spotlight": False,
    "edhrec_rank": 12,
    "promo_types": [],
    "prices": {"usd": "1250.00", "usd_foil": None, "eur": "980.50", "tix": None},
    "related_uris": {
        "edhrec": "https://edhrec.com/route/?cc=Lightning+Bolt",
        "tcgplayer_decks": "https://decks.tcgplayer.com/magic/deck/search?contains=Lightning+Bolt",
    },
    "purchase_uris": {
        "tcgplayer": "https://www.tcgplayer.com/product/1040",
        "cardmarket": "https://www.cardmarket.com/en/Magic/Products/Singles/Alpha/Lightning-Bolt",
    },
}

DELVER = {
    "object": "card",
    "id": DELVER_ID,
    "name": "Delver of Secrets // Insectile Aberration",
    "released_at": "2011-09-30",
    "layout": "transform",
    "type_line": "Creature \u2014 Human Wizard // Creature \u2014 Human Insect",
    "color_identity": ["U"],
    "legalities": make_legalities(standard="not_legal", future="not_legal"),
    "set": "isd",
    "rarity": "common",
    "card_faces": [
        {
            "name": "Delver of Secrets",
            "mana_cost": "{U}",
            "type_line": "Creature \u2014 Human Wizard",
            "oracle_text": "At the beginning of your upkeep...",
            "colors": ["U"],
            "power": "1",
            "toughness": "1",
            "image_uris": {"normal": "https://cards.scryfall.io/normal/delver-front.jpg"},
        },
        {
            "name": "Insectile Aberration",
            "mana_cost": "",
            "type_line": "Creature \u2014 Human Insect",
            "oracle_text": "Flying",
            "colors": ["U"],
            "color_indicator": ["U"],
            "power": "3",
            "toughness": "2",
            "image_uris": {"normal": "https://cards.scryfall.io/normal/delver-back.jpg"},
        },
    ],
}

ALPHA = {
    "object": "set",
    "id": LEA_ID,
    "code": "lea",
    "name": "Limited Edition Alpha",
    "uri": "https://api.scryfall.com/sets/288bd996-960e-448b-a187-9504c1ffa60f",
    "scryfall_uri": "https://scryfall.com/sets/lea",
    "search_uri": "https://api.scryfall.com/cards/search?order=set&q=e%3Alea&unique=prints",
    "released_at": "1993-08-05",
    "set_type": "core",
    "card_count": 295,
    "digital": False,
    "nonfoil_only": True,
    "foil_only": False,
    "icon_svg_uri": "https://svgs.scryfall.io/sets/lea.svg",
}

ALPHA_TOKENS = {
    "object": "set",
    "id": "b5f8a9b0-4c3a-4a9e-9d7f-0f3c6f3c1d2e",
    "code": "tlea",
    "name": "Limited Edition Alpha Tokens",
    "uri": "https://api.scryfall.com/sets/tlea",
    "scryfall_uri": "https://scryfall.com/sets/tlea",
    "search_uri": "https://api.scryfall.com/cards/search?q=e%3Atlea",
    "set_type": "token",
    "card_count": 0,
    "parent_set_code": "lea",
    "block_code": "lea",
    "block": "Core Set",
    "digital": False,
    "foil_only": False,
    "icon_svg_uri": "https://svgs.scryfall.io/sets/lea.svg",
}


@pytest.fixture
def bolt_raw():
    return copy.deepcopy(LIGHTNING_BOLT)


@pytest.fixture
def delver_raw():
    return copy.deepcopy(DELVER)


@pytest.fixture
def alpha_raw():
    return copy.deepcopy(ALPHA)


@pytest.fixture
def alpha_tokens_raw():
    return copy.deepcopy(ALPHA_TOKENS)

"""Price scalar: a decimal amount sent on the wire as a string, e.g. "15.44"."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

from scryfall_types.errors import InvalidPrice

# Whole-string base-10 literal: optional sign, optional fraction, optional exponent.
# float() alone would also accept whitespace, underscores, "inf" and "nan".
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class Price:
    """A validated price amount. No currency or rounding is applied."""

    amount: float

    @classmethod
    def parse(cls, raw: Any) -> Price:
        """Parse a wire price string, raising ``InvalidPrice`` on bad input."""
        if not isinstance(raw, str) or not _DECIMAL_RE.fullmatch(raw):
            raise InvalidPrice(raw)
        amount = float(raw)
        if not math.isfinite(amount):
            raise InvalidPrice(raw)
        return cls(amount)

    def __float__(self) -> float:
        return self.amount

    def __str__(self) -> str:
        return repr(self.amount)

"""Name scoring — brevity, pronounceability and brandability of a domain.

Only the first label of the domain is scored ("acme" for "acme.com.au"),
with everything except ASCII letters and digits removed.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

_NON_ALNUM = re.compile(r"[^a-z0-9]", re.IGNORECASE | re.ASCII)
_VOWELS = re.compile(r"[aeiou]", re.IGNORECASE | re.ASCII)
_DOUBLE = re.compile(r"(.)\1")

MAX_SCORE = 10
SHORT_NAME_MAX = 10


@dataclass(frozen=True)
class NameScore:
    """Scores for one domain name, each nominally out of 10."""

    base: str
    length: int
    brevity: int
    pronounceability: int
    brandability: int


def base_label(name: str) -> str:
    """Return the first label of ``name`` stripped to ASCII alphanumerics."""
    return _NON_ALNUM.sub("", name.split(".", 1)[0])


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def score_name(name: str) -> NameScore:
    """Score a domain name.

    brevity = 12 - length, floored at 0. It has no upper clamp, so a
    one-character or empty base scores 11 or 12.
    """
    base = base_label(name)
    length = len(base)
    vowel_count = len(_VOWELS.findall(base))
    has_double = _DOUBLE.search(base.lower()) is not None

    brevity = max(0, 12 - length)
    pronounceability = min(MAX_SCORE, round_half_up((vowel_count / max(1, length)) * 20))
    brandability = min(
        MAX_SCORE,
        6 + (1 if has_double else 0) + (3 if length <= SHORT_NAME_MAX else 1),
    )

    return NameScore(
        base=base,
        length=length,
        brevity=brevity,
        pronounceability=pronounceability,
        brandability=brandability,
    )

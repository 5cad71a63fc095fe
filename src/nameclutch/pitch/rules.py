"""Copy rules — ordered (predicate, result) tables scanned first-match-wins.

Category rules match case-insensitively on a substring of the listing's
category. Each table keeps its own keyword order: the angle and vibe
tables check finance, design, ai, tech; the uses and taglines tables
check finance, design, digital, brand (and premium for uses).
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from nameclutch.pitch.scoring import SHORT_NAME_MAX, NameScore

T = TypeVar("T")

CategoryRule = tuple[Callable[[str], bool], T]


def category_has(keyword: str) -> Callable[[str], bool]:
    """Predicate: lowercased category contains ``keyword``."""
    def predicate(category: str) -> bool:
        return keyword in category.lower()
    return predicate


def first_match(rules: Sequence[CategoryRule], value: str, default: T) -> T:
    """Return the result of the first rule whose predicate accepts ``value``."""
    for predicate, result in rules:
        if predicate(value):
            return result
    return default


# ── Positioning angle ────────────────────────────────────────────────

ANGLE_RULES: list[CategoryRule] = [
    (category_has("finance"), "trust + authority"),
    (category_has("design"), "creative edge"),
    (category_has("ai"), "future-proof signal"),
    (category_has("tech"), "product-first credibility"),
]
DEFAULT_ANGLE = "brandable clarity"


# ── Suggested uses ───────────────────────────────────────────────────

USE_RULES: list[CategoryRule] = [
    (category_has("finance"), ("Fintech app", "Credit scoring", "Billing platform")),
    (category_has("design"), ("Studio site", "SaaS design system", "Agency rebrand")),
    (category_has("digital"), ("Digital agency", "Marketing consultancy", "Productized service")),
    (category_has("brand"), ("Consumer brand", "Creator brand", "Community project")),
    (category_has("premium"), ("Holding brand", "Marketplace", "Flagship product")),
]
DEFAULT_USES = ("Startup", "SaaS", "Newsletter")


# ── Vibe line ────────────────────────────────────────────────────────

VIBE_RULES: list[CategoryRule] = [
    (
        category_has("finance"),
        "It sounds established — the kind of name that signals trust on first impression.",
    ),
    (
        category_has("design"),
        "It feels modern and crafted — strong for a studio, product, or premium portfolio.",
    ),
    (
        category_has("ai"),
        "It reads “next-gen” without being gimmicky — great for AI products that need credibility.",
    ),
    (
        category_has("tech"),
        "It’s product-forward — short, clean, and easy to remember in a crowded space.",
    ),
]
DEFAULT_VIBE = "It’s brandable and flexible — you can grow it into almost any direction."


# ── Taglines ─────────────────────────────────────────────────────────

TAGLINE_RULES: list[CategoryRule] = [
    (category_has("finance"), ("Confidence in every click.", "Built for trust.", "Modern finance, clearer.")),
    (category_has("design"), ("Design that speaks.", "Make it unmistakable.", "Crafted for clarity.")),
    (category_has("digital"), ("Digital, but different.", "Launch louder.", "Growth with signal.")),
    (category_has("brand"), ("A name you can own.", "Simple. Memorable. Yours.", "Built to travel.")),
]
DEFAULT_TAGLINES = ("Launch fast. Look premium.", "A name with gravity.", "Short name, big future.")


# ── Hooks ────────────────────────────────────────────────────────────

# Predicates take (score, tld); every hook that fires is collected in order.
HookRule = tuple[Callable[[NameScore, str], bool], str]

HOOK_RULES: list[HookRule] = [
    (
        lambda score, tld: score.length <= SHORT_NAME_MAX,
        "Short enough for logos, app icons, and voice search.",
    ),
    (lambda score, tld: tld == ".com", "The .com gives instant legitimacy."),
    (lambda score, tld: tld == ".com.au", "Perfect for an AU-first brand with local trust."),
    (lambda score, tld: tld == ".work", "Modern + maker-friendly for a new-age brand."),
    (
        lambda score, tld: "ai" in score.base.lower(),
        "Contains “AI” for instant category recognition.",
    ),
]
MAX_HOOKS = 3


def angle_for(category: str) -> str:
    return first_match(ANGLE_RULES, category, DEFAULT_ANGLE)


def uses_for(category: str) -> list[str]:
    return list(first_match(USE_RULES, category, DEFAULT_USES))


def vibe_for(category: str) -> str:
    return first_match(VIBE_RULES, category, DEFAULT_VIBE)


def taglines_for(category: str) -> list[str]:
    return list(first_match(TAGLINE_RULES, category, DEFAULT_TAGLINES))


def matching_hooks(score: NameScore, tld: str) -> list[str]:
    """All hooks that apply, in table order (not yet capped)."""
    return [text for predicate, text in HOOK_RULES if predicate(score, tld)]

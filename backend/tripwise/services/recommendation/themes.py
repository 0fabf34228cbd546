"""Supported travel themes and spending tiers.

A theme is the high-level travel intent; a sub-theme is the spending tier.
Every (theme, sub-theme) pair maps to one recommendation profile.
"""

from enum import Enum


class Theme(str, Enum):
    BEACH = "beach"
    HILLSTATION = "hillstation"
    BUSINESS = "business"
    NATURE_WELLNESS = "nature_wellness"
    FAMILY = "family"


class SubTheme(str, Enum):
    BUDGET = "budget"
    DELUXE = "deluxe"
    LUXURIOUS = "luxurious"


def normalize(value: str | None) -> str:
    return (value or "").strip().lower()


def parse_theme(value: str | None) -> Theme | None:
    try:
        return Theme(normalize(value))
    except ValueError:
        return None


def parse_sub_theme(value: str | None) -> SubTheme | None:
    try:
        return SubTheme(normalize(value))
    except ValueError:
        return None


def theme_values() -> list[str]:
    return [t.value for t in Theme]


def sub_theme_values() -> list[str]:
    return [s.value for s in SubTheme]

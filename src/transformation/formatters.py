"""
Formatters - Display helpers for catalog fields
"""

import re
from typing import Optional

DEFAULT_PROFILE_TAG = "badge-no-profile"

# Labels are stored without commas; lookups strip commas from the input so
# "Sweet, Fruity & Mellow" and "Sweet Fruity & Mellow" share one entry.
PROFILE_TAGS = {
    "Young & Spritely": "badge-young-spritely",
    "Sweet Fruity & Mellow": "badge-sweet-fruity",
    "Spicy & Sweet": "badge-spicy-sweet",
    "Spicy & Dry": "badge-spicy-dry",
    "Deep Rich & Dried Fruits": "badge-deep-rich",
    "Old & Dignified": "badge-old-dignified",
    "Light & Delicate": "badge-light-delicate",
    "Juicy Oak & Vanilla": "badge-juicy-oak",
    "Oily & Coastal": "badge-oily-coastal",
    "Lightly Peated": "badge-lightly-peated",
    "Peated": "badge-peated",
    "Heavily Peated": "badge-heavily-peated",
}

_WHITESPACE = re.compile(r"\s+")


def format_price(price: str) -> str:
    """Insert a space after the first euro sign: "€120" -> "€ 120"."""
    return price.replace("€", "€ ", 1)


def normalize_profile(profile: Optional[str]) -> str:
    if not profile:
        return ""
    return _WHITESPACE.sub(" ", profile.replace(",", "")).strip()


def get_profile_color(profile: Optional[str]) -> str:
    """
    Map a tasting profile label to its badge tag

    Args:
        profile: Profile label as published, e.g. "Spicy & Dry"

    Returns:
        str: Badge tag, or DEFAULT_PROFILE_TAG for unknown labels
    """
    return PROFILE_TAGS.get(normalize_profile(profile), DEFAULT_PROFILE_TAG)

"""
Sorters - Client-side ordering of catalog records

sort_whiskies always returns a new list and leaves its input untouched.
Python's sort is stable, so ties keep their original relative order.
"""

import math
import re
import unicodedata
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from src.extract.schemas import Whiskey

SORT_KEYS = ("name", "price", "age", "distillery", "region", "newest")

# Leading numeric prefix, ignoring trailing text ("120.50 EUR" -> 120.5)
_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")


def parse_float_prefix(text: Any) -> float:
    match = _FLOAT_PREFIX.match(text) if isinstance(text, str) else None
    return float(match.group()) if match else math.nan


def parse_int_prefix(text: Any) -> float:
    match = _INT_PREFIX.match(text) if isinstance(text, str) else None
    return int(match.group()) if match else math.nan


def collation_key(text: Any) -> tuple:
    """Accent- and case-insensitive key; on ties lowercase sorts before uppercase."""
    if not isinstance(text, str):
        text = ""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (base.casefold(), text.swapcase())


def price_value(whiskey: Whiskey) -> float:
    price = whiskey.get("price")
    if not isinstance(price, str):
        return math.nan
    return parse_float_prefix(re.sub(r"[€,]", "", price))


def age_value(whiskey: Whiskey) -> float:
    age = whiskey.get("age")
    if not isinstance(age, str):
        return math.nan
    return parse_int_prefix(age.split(" ")[0])


def created_at_value(whiskey: Whiskey) -> float:
    """POSIX timestamp of created_at; naive timestamps are read as UTC."""
    created_at = whiskey.get("created_at")
    if not isinstance(created_at, str):
        return math.nan
    try:
        parsed = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
    except ValueError:
        return math.nan
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def _text_field(field: str) -> Callable[[Whiskey], tuple]:
    return lambda whiskey: collation_key(whiskey.get(field))


SORT_FUNCTIONS: Dict[str, Callable[[Whiskey], Any]] = {
    "name": _text_field("name"),
    "price": price_value,
    "age": age_value,
    "distillery": _text_field("distillery"),
    "region": _text_field("region"),
    # newest first
    "newest": lambda whiskey: -created_at_value(whiskey),
}


def sort_whiskies(whiskies: Sequence[Whiskey], sort_by: Optional[str]) -> List[Whiskey]:
    """
    Return a sorted copy of the catalog

    Args:
        whiskies: Catalog records
        sort_by: One of SORT_KEYS; anything else returns an unsorted copy

    Returns:
        List[Whiskey]: New list holding the same record objects
    """
    key = SORT_FUNCTIONS.get(sort_by) if sort_by else None
    if key is None:
        return list(whiskies)
    return sorted(whiskies, key=key)

"""
Extract Layer Schemas

Raw record shape for whisky entries coming from the SMWS catalog API.
"""

from typing import Optional, TypedDict

import polars as pl


class Whiskey(TypedDict):
    id: int
    name: str
    fullcode: str
    distillery_code: str
    cask_no: str
    price: str
    profile: str
    abv: Optional[str]
    age: str
    cask_type: str
    distillery: str
    region: str
    available: str
    url: str
    is_new: bool
    created_at: str
    updated_at: str


WHISKEY_SCHEMA = pl.Schema(
    [
        ("id", pl.Int64()),
        ("name", pl.String()),
        ("fullcode", pl.String()),
        ("distillery_code", pl.String()),
        ("cask_no", pl.String()),
        ("price", pl.String()),
        ("profile", pl.String()),
        ("abv", pl.String()),
        ("age", pl.String()),
        ("cask_type", pl.String()),
        ("distillery", pl.String()),
        ("region", pl.String()),
        ("available", pl.String()),
        ("url", pl.String()),
        ("is_new", pl.Boolean()),
        ("created_at", pl.String()),
        ("updated_at", pl.String()),
    ]
)

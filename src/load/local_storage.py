"""
Local Storage - Load Layer

Pure functions for writing catalog snapshots to disk.
Handles Parquet and JSON formats.
"""

import polars as pl
import json
import os
from datetime import date
from typing import List, Sequence
import logging

from src.coreutils.env import env_get
from src.extract.schemas import WHISKEY_SCHEMA, Whiskey

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = env_get("SMWS_OUTPUT_DIR", "output")
SNAPSHOT_FORMATS = ("parquet", "json")


def whiskies_to_dataframe(whiskies: Sequence[Whiskey]) -> pl.DataFrame:
    """
    Build a DataFrame from raw catalog records

    Unknown keys are dropped and missing ones become nulls; row order is kept.

    Args:
        whiskies: Catalog records

    Returns:
        pl.DataFrame: Records laid out with WHISKEY_SCHEMA
    """
    return pl.DataFrame(list(whiskies), schema=WHISKEY_SCHEMA, strict=False)


def _ensure_parent_dir(filepath: str) -> None:
    parent = os.path.dirname(filepath)
    if parent:
        os.makedirs(parent, exist_ok=True)


def save_parquet(df: pl.DataFrame, filepath: str) -> str:
    """
    Save DataFrame to Parquet file

    Args:
        df: DataFrame to save
        filepath: Path to save file

    Returns:
        str: Path to saved file
    """
    logger.info(f"Saving DataFrame to Parquet: {filepath}")

    _ensure_parent_dir(filepath)
    df.write_parquet(filepath)

    logger.info(f"Saved {df.height} records to {filepath}")
    return filepath


def save_json(df: pl.DataFrame, filepath: str) -> str:
    """
    Save DataFrame to JSON file

    Args:
        df: DataFrame to save
        filepath: Path to save file

    Returns:
        str: Path to saved file
    """
    logger.info(f"Saving DataFrame to JSON: {filepath}")

    _ensure_parent_dir(filepath)
    data = df.to_dicts()

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)

    logger.info(f"Saved {len(data)} records to {filepath}")
    return filepath


def load_parquet(filepath: str) -> pl.DataFrame:
    """Load DataFrame from Parquet file"""
    logger.info(f"Loading DataFrame from Parquet: {filepath}")

    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Parquet file not found: {filepath}")

    df = pl.read_parquet(filepath)

    logger.info(f"Loaded {df.height} records from {filepath}")
    return df


def load_json(filepath: str) -> pl.DataFrame:
    """Load a JSON snapshot back into a DataFrame with WHISKEY_SCHEMA"""
    logger.info(f"Loading DataFrame from JSON: {filepath}")

    if not os.path.exists(filepath):
        raise FileNotFoundError(f"JSON file not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    df = pl.DataFrame(data, schema=WHISKEY_SCHEMA, strict=False)

    logger.info(f"Loaded {df.height} records from {filepath}")
    return df


def save_whiskies_snapshot(
    whiskies: Sequence[Whiskey],
    fmt: str = "parquet",
    output_dir: str = DEFAULT_OUTPUT_DIR,
) -> str:
    """
    Save a catalog snapshot named after today's date

    Args:
        whiskies: Catalog records, already sorted if order matters
        fmt: "parquet" or "json"
        output_dir: Output directory

    Returns:
        str: Path to saved file
    """
    if fmt not in SNAPSHOT_FORMATS:
        raise ValueError(f"Unknown snapshot format: {fmt}")

    today = date.today().strftime("%Y-%m-%d")
    filepath = f"{output_dir}/whiskies_{today}.{fmt}"
    df = whiskies_to_dataframe(whiskies)

    if fmt == "parquet":
        return save_parquet(df, filepath)
    return save_json(df, filepath)


def load_whiskies_snapshot(filepath: str) -> List[Whiskey]:
    """Read a snapshot written by save_whiskies_snapshot back into records"""
    if filepath.endswith(".parquet"):
        df = load_parquet(filepath)
    elif filepath.endswith(".json"):
        df = load_json(filepath)
    else:
        raise ValueError(f"Unknown snapshot format: {filepath}")
    return df.to_dicts()

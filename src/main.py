"""
Main Entry Point - SMWS Catalog

Fetches the catalog, optionally sorts it, prints a short listing and can save
a dated snapshot to the output directory.
"""

import sys
import os
import logging
from typing import List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.extract.schemas import Whiskey
from src.extract.smws_api import ApiError, fetch_whiskies
from src.load.local_storage import (
    DEFAULT_OUTPUT_DIR,
    SNAPSHOT_FORMATS,
    save_whiskies_snapshot,
)
from src.transformation.formatters import format_price, get_profile_color
from src.transformation.sorters import SORT_KEYS, sort_whiskies
from src.coreutils.logging import setup_logging

logger = logging.getLogger(__name__)


def format_whiskey_line(whiskey: Whiskey) -> str:
    """One listing line: code, name, price, age and profile badge"""
    return " | ".join(
        [
            str(whiskey.get("fullcode") or "-"),
            str(whiskey.get("name") or "-"),
            format_price(whiskey.get("price") or ""),
            str(whiskey.get("age") or "-"),
            get_profile_color(whiskey.get("profile")),
        ]
    )


def run_fetch(
    sort_by: Optional[str] = None,
    limit: Optional[int] = None,
    save: Optional[str] = None,
    output_dir: str = DEFAULT_OUTPUT_DIR,
) -> dict:
    """
    Fetch the catalog and print it

    Args:
        sort_by: Sort key passed to sort_whiskies
        limit: Print only the first N records
        save: Snapshot format to write, or None
        output_dir: Snapshot directory

    Returns:
        dict: Record count and snapshot path
    """
    logger.info(f"🚀 Fetching catalog (sort_by={sort_by}, save={save})")

    whiskies: List[Whiskey] = sort_whiskies(fetch_whiskies(), sort_by)

    shown = whiskies if limit is None else whiskies[:limit]
    for whiskey in shown:
        print(format_whiskey_line(whiskey))

    snapshot = None
    if save:
        snapshot = save_whiskies_snapshot(whiskies, fmt=save, output_dir=output_dir)
        logger.info(f"✅ Saved snapshot to {snapshot}")

    return {"records": len(whiskies), "snapshot": snapshot}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="SMWS Whisky Catalog")
    parser.add_argument("command", choices=["fetch"], help="Command to run")
    parser.add_argument(
        "--sort",
        choices=SORT_KEYS,
        default=None,
        help="Sort the catalog before printing",
    )
    parser.add_argument(
        "--limit", type=int, default=None, help="Number of records to print"
    )
    parser.add_argument(
        "--save",
        choices=SNAPSHOT_FORMATS,
        default=None,
        help="Save a snapshot in the given format",
    )
    parser.add_argument(
        "--output-dir", default=DEFAULT_OUTPUT_DIR, help="Snapshot directory"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else None)

    try:
        result = run_fetch(args.sort, args.limit, args.save, args.output_dir)
    except ApiError as e:
        logger.error(f"❌ Fetch failed: {e}")
        return 1

    logger.info(f"Fetched {result['records']} whiskies")
    return 0


if __name__ == "__main__":
    sys.exit(main())

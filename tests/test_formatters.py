"""
Test Transform Layer - price and profile display helpers
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from src.transformation.formatters import (
    DEFAULT_PROFILE_TAG,
    format_price,
    get_profile_color,
)


class TestFormatPrice(unittest.TestCase):
    def test_space_inserted_after_euro(self):
        self.assertEqual(format_price("€120"), "€ 120")

    def test_only_first_euro_is_touched(self):
        self.assertEqual(format_price("€1,200 (was €1,500)"), "€ 1,200 (was €1,500)")

    def test_existing_space_is_not_collapsed(self):
        self.assertEqual(format_price("€ 120"), "€  120")

    def test_without_euro_is_unchanged(self):
        for price in ["", "120", "$120", "£ 99.50"]:
            self.assertEqual(format_price(price), price)


class TestGetProfileColor(unittest.TestCase):
    def test_known_profiles(self):
        expected = {
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
        for profile, tag in expected.items():
            self.assertEqual(get_profile_color(profile), tag, profile)

    def test_comma_variants_share_a_tag(self):
        self.assertEqual(get_profile_color("Sweet, Fruity & Mellow"), "badge-sweet-fruity")
        self.assertEqual(get_profile_color("Deep, Rich & Dried Fruits"), "badge-deep-rich")
        self.assertEqual(get_profile_color("Juicy, Oak & Vanilla"), "badge-juicy-oak")

    def test_surrounding_whitespace_is_ignored(self):
        self.assertEqual(get_profile_color("  Peated\n"), "badge-peated")
        self.assertEqual(get_profile_color("\tSpicy & Dry "), "badge-spicy-dry")

    def test_unknown_profiles_get_default(self):
        for profile in ["", "   ", "Smoky", "peated", "Peated & Salty", None]:
            self.assertEqual(get_profile_color(profile), DEFAULT_PROFILE_TAG)
        self.assertEqual(DEFAULT_PROFILE_TAG, "badge-no-profile")


if __name__ == "__main__":
    unittest.main()

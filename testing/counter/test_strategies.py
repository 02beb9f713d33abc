"""Tests for counter filter strategies."""

import unittest
from unittest.mock import MagicMock

from notion_counter.counter.exceptions import DetectionError
from notion_counter.counter.strategies import (
    AutoDetectStrategy,
    PrefixMatchStrategy,
    StaticOptionsStrategy,
    find_matching_option,
)
from notion_counter.notion.models import PropertySchema
from testing.counter.fixtures import STATUS_PROPERTY, make_schema


class TestFindMatchingOption(unittest.TestCase):
    """Tests for find_matching_option."""

    def test_first_property_in_schema_order_wins(self) -> None:
        """Test that the earliest qualifying property is chosen."""
        properties = [
            PropertySchema(name="Name", type="title"),
            PropertySchema(name="Shelf", type="select", options=["Finished reading"]),
            STATUS_PROPERTY,
        ]

        prop, option = find_matching_option(properties, "finished")

        self.assertEqual(prop.name, "Shelf")
        self.assertEqual(option, "Finished reading")

    def test_match_is_case_insensitive_substring(self) -> None:
        """Test that the keyword matches anywhere in the option, ignoring case."""
        properties = [PropertySchema(name="Tags", type="multi_select", options=["✅ FINISHED!"])]

        prop, option = find_matching_option(properties, "finished")

        self.assertEqual(prop.type, "multi_select")
        self.assertEqual(option, "✅ FINISHED!")

    def test_non_option_types_are_skipped(self) -> None:
        """Test that text properties never match even with matching options."""
        properties = [PropertySchema(name="Notes", type="rich_text", options=["finished"])]

        self.assertIsNone(find_matching_option(properties, "finished"))

    def test_no_match_returns_none(self) -> None:
        """Test that None is returned when nothing qualifies."""
        properties = [PropertySchema(name="Status", type="status", options=["Done"])]

        self.assertIsNone(find_matching_option(properties, "finished"))


class TestAutoDetectStrategy(unittest.TestCase):
    """Tests for AutoDetectStrategy."""

    def test_status_property_builds_status_filter(self) -> None:
        """Test the filter for a detected status property."""
        selection = AutoDetectStrategy().select(lambda: make_schema(STATUS_PROPERTY))

        self.assertEqual(
            selection.filter.to_notion(),
            {"property": "Status", "status": {"equals": "Finished"}},
        )
        self.assertEqual(selection.used_property, "Status")
        self.assertEqual(selection.used_type, "status")
        self.assertEqual(selection.used_option, "Finished")

    def test_select_property_builds_select_filter(self) -> None:
        """Test the filter for a detected select property."""
        schema = make_schema(PropertySchema(name="State", type="select", options=["Finished"]))

        selection = AutoDetectStrategy().select(lambda: schema)

        self.assertEqual(
            selection.filter.to_notion(),
            {"property": "State", "select": {"equals": "Finished"}},
        )

    def test_multi_select_property_builds_contains_filter(self) -> None:
        """Test the filter for a detected multi-select property."""
        schema = make_schema(
            PropertySchema(name="Tags", type="multi_select", options=["fav", "finished"])
        )

        selection = AutoDetectStrategy().select(lambda: schema)

        self.assertEqual(
            selection.filter.to_notion(),
            {"property": "Tags", "multi_select": {"contains": "finished"}},
        )

    def test_custom_keyword(self) -> None:
        """Test detection with a configured keyword."""
        schema = make_schema(PropertySchema(name="Status", type="status", options=["Done"]))

        selection = AutoDetectStrategy("done").select(lambda: schema)

        self.assertEqual(selection.used_option, "Done")

    def test_no_match_raises_detection_error(self) -> None:
        """Test that DetectionError is raised when nothing qualifies."""
        schema = make_schema(PropertySchema(name="Name", type="title"))

        with self.assertRaises(DetectionError) as context:
            AutoDetectStrategy().select(lambda: schema)

        self.assertIn("Finished", str(context.exception))


class TestStaticOptionsStrategy(unittest.TestCase):
    """Tests for StaticOptionsStrategy."""

    def test_builds_or_of_select_equals(self) -> None:
        """Test the OR filter across the configured literals."""
        load_schema = MagicMock()

        selection = StaticOptionsStrategy("Status", ["📘", "📘✨"]).select(load_schema)

        self.assertEqual(
            selection.filter.to_notion(),
            {
                "or": [
                    {"property": "Status", "select": {"equals": "📘"}},
                    {"property": "Status", "select": {"equals": "📘✨"}},
                ]
            },
        )
        self.assertEqual(selection.used_type, "select")
        self.assertEqual(selection.used_options, ["📘", "📘✨"])
        load_schema.assert_not_called()


class TestPrefixMatchStrategy(unittest.TestCase):
    """Tests for PrefixMatchStrategy."""

    def test_builds_rich_text_starts_with(self) -> None:
        """Test the starts-with filter on a rich_text property."""
        load_schema = MagicMock()

        selection = PrefixMatchStrategy("Marker", "📘").select(load_schema)

        self.assertEqual(
            selection.filter.to_notion(),
            {"property": "Marker", "rich_text": {"starts_with": "📘"}},
        )
        self.assertEqual(selection.used_prefix, "📘")
        load_schema.assert_not_called()

    def test_title_property_type(self) -> None:
        """Test the starts-with filter on a title property."""
        selection = PrefixMatchStrategy("Name", "Vol.", "title").select(MagicMock())

        self.assertEqual(
            selection.filter.to_notion(),
            {"property": "Name", "title": {"starts_with": "Vol."}},
        )
        self.assertEqual(selection.used_type, "title")


if __name__ == "__main__":
    unittest.main()

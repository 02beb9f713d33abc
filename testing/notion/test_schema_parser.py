"""Tests for Notion response parsing."""

import unittest

from notion_counter.notion.parser import UNTITLED, parse_database_schema, parse_query_page


class TestParseDatabaseSchema(unittest.TestCase):
    """Tests for parse_database_schema."""

    def test_properties_keep_response_order(self) -> None:
        """Test that property order follows the response."""
        data = {
            "title": [{"plain_text": "Reading "}, {"plain_text": "List"}],
            "properties": {
                "Name": {"type": "title", "title": {}},
                "Tags": {
                    "type": "multi_select",
                    "multi_select": {"options": [{"name": "fav"}, {"name": "finished"}]},
                },
                "Status": {
                    "type": "status",
                    "status": {"options": [{"name": "Reading"}, {"name": "Finished"}]},
                },
                "Shelf": {"type": "select", "select": {"options": []}},
            },
        }

        schema = parse_database_schema(data)

        self.assertEqual(schema.title, "Reading List")
        self.assertEqual([p.name for p in schema.properties], ["Name", "Tags", "Status", "Shelf"])
        self.assertEqual(schema.properties[0].options, [])
        self.assertEqual(schema.properties[1].options, ["fav", "finished"])
        self.assertEqual(schema.properties[2].options, ["Reading", "Finished"])

    def test_missing_title_and_properties(self) -> None:
        """Test an empty database object."""
        schema = parse_database_schema({})

        self.assertEqual(schema.title, UNTITLED)
        self.assertEqual(schema.properties, [])

    def test_option_property_without_config(self) -> None:
        """Test a select property whose options block is missing."""
        schema = parse_database_schema({"properties": {"Shelf": {"type": "select"}}})

        self.assertEqual(schema.properties[0].options, [])


class TestParseQueryPage(unittest.TestCase):
    """Tests for parse_query_page."""

    def test_last_page(self) -> None:
        """Test a final page."""
        page = parse_query_page({"results": [{}] * 37, "has_more": False, "next_cursor": None})

        self.assertEqual(page.result_count, 37)
        self.assertFalse(page.has_more)
        self.assertIsNone(page.next_cursor)

    def test_missing_results(self) -> None:
        """Test a response without a results array."""
        page = parse_query_page({"results": None})

        self.assertEqual(page.result_count, 0)
        self.assertFalse(page.has_more)


if __name__ == "__main__":
    unittest.main()

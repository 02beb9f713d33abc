"""Tests for the python -m notion_counter entry point."""

import unittest
from unittest.mock import MagicMock, patch

from notion_counter.__main__ import main


class TestMain(unittest.TestCase):
    """Tests for main."""

    @patch.dict("os.environ", {}, clear=True)
    @patch("notion_counter.__main__.uvicorn.run")
    def test_defaults(self, mock_run: MagicMock) -> None:
        """Test that the app is served on localhost:8000 by default."""
        main()

        mock_run.assert_called_once_with(
            "notion_counter.api.app:app", host="127.0.0.1", port=8000, log_config=None
        )

    @patch.dict("os.environ", {"HOST": "0.0.0.0", "PORT": "3000"}, clear=True)
    @patch("notion_counter.__main__.uvicorn.run")
    def test_host_and_port_from_environment(self, mock_run: MagicMock) -> None:
        """Test that HOST and PORT are honoured."""
        main()

        self.assertEqual(mock_run.call_args.kwargs["host"], "0.0.0.0")
        self.assertEqual(mock_run.call_args.kwargs["port"], 3000)


if __name__ == "__main__":
    unittest.main()

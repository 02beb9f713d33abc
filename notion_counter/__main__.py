"""Entry point for serving the counter locally.

Allows running with: python -m notion_counter
"""

import os

import uvicorn


def main() -> None:
    """Serve the API with uvicorn, using HOST and PORT from the environment."""
    uvicorn.run(
        "notion_counter.api.app:app",
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "8000")),
        # Logging is configured by the app itself
        log_config=None,
    )


if __name__ == "__main__":
    main()

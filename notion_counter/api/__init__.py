"""HTTP API for the finished counter."""

"""Command-line client for the software catalog API.

This package provides:
- A bearer-authenticated HTTP client that follows the API's pagination links
- Typed Publisher / Software views and plain-text rendering for the CLI

Note: the client returns plain JSON values; typing happens only for display.
"""

__all__ = ["auth", "client", "models", "display", "profiles", "cli"]

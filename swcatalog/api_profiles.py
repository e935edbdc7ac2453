"""API connection profiles.

This module defines the CONFIGURATION dict which maps profile names to the
settings used to build a CatalogClient. Select one with ``--profile``.

Keys:
    api_url:     versioned API root, without trailing slash
    api_url_env: environment variable that replaces api_url when set, read
                 each time the profile is resolved
    token_env:   environment variable holding the bearer token
    timeout:     request timeout in seconds (None: wait as long as requests does)
    max_pages:   ceiling on pages fetched per listing (None: follow every link)

Environment overrides:
    export CATALOG_API_URL=https://staging.example.org/v1
"""

from __future__ import annotations

from swcatalog.auth import BEARER_ENV_KEY

DEFAULT_API_URL = "https://api.developers.italia.it/v1"

CONFIGURATION = {
    # Public catalog API
    "default": {
        "api_url": DEFAULT_API_URL,
        "api_url_env": "CATALOG_API_URL",
        "token_env": BEARER_ENV_KEY,
        "timeout": None,
        "max_pages": None,
    },
    # API server running from a local checkout
    "local": {
        "__inherits__": "default",
        "api_url": "http://localhost:3000/v1",
        "api_url_env": None,
    },
}

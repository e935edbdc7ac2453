from __future__ import annotations

import logging
import os

from swcatalog.utils.env import load_env_file_if_present

logger = logging.getLogger(__name__)

BEARER_ENV_KEY = "API_BEARER_TOKEN"


def load_bearer_token(env_key: str = BEARER_ENV_KEY, dotenv: bool = True) -> str:
    """Return the API bearer token from environment or .env.

    A missing token is not an error here: an empty string is returned and the
    server gets to decide whether the request needs one.
    """
    if dotenv:
        load_env_file_if_present()
    token = os.getenv(env_key, "")
    if not token:
        logger.debug(f"{env_key} is not set; requests will carry an empty bearer token")
    return token


def build_auth_headers(token: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }

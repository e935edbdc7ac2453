"""Registry of named API profiles."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

from swcatalog.auth import BEARER_ENV_KEY
from swcatalog.errors import CatalogError
from swcatalog.utils.config import ConfigError, load_and_resolve_config

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "default"


class ProfileNotFoundError(CatalogError):
    """Raised when a profile name is not present in the configuration."""

    pass


@dataclass(frozen=True)
class ApiProfile:
    name: str
    api_url: str
    token_env: str = BEARER_ENV_KEY
    timeout: float | None = None
    max_pages: int | None = None


def _optional_number(name: str, key: str, value: Any, kind: type) -> Any:
    if value is None:
        return None
    try:
        number = kind(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Profile '{name}' has an invalid {key}: {value!r}") from e
    if number <= 0:
        raise ConfigError(f"Profile '{name}' has a non-positive {key}: {value!r}")
    return number


class ProfileRegistry:
    """Resolves profile names to ApiProfile settings.

    Examples:
        >>> registry = ProfileRegistry()
        >>> registry.get("local").api_url
        'http://localhost:3000/v1'
    """

    def __init__(self, configuration: dict[str, dict[str, Any]] | None = None):
        """Initialize the registry.

        Args:
            configuration: Profile configuration dict. If None, loads and resolves
                          CONFIGURATION from swcatalog.api_profiles
        """
        if configuration is None:
            configuration = load_and_resolve_config(
                "swcatalog.api_profiles",
                config_name="CONFIGURATION",
                default={},
            )
        self._config = configuration

    def names(self) -> list[str]:
        return sorted(self._config)

    def get(self, name: str = DEFAULT_PROFILE) -> ApiProfile:
        """Build the ApiProfile for `name`.

        Raises:
            ProfileNotFoundError: If `name` is not configured
            ConfigError: If the profile's settings are unusable
        """
        if name not in self._config:
            available = ", ".join(self.names()) or "none"
            raise ProfileNotFoundError(f"Unknown API profile '{name}' (available: {available})")

        config = self._config[name]
        url_env = config.get("api_url_env")
        api_url = (os.getenv(url_env) if url_env else None) or config.get("api_url")
        if not api_url:
            raise ConfigError(f"Profile '{name}' must specify 'api_url'")

        profile = ApiProfile(
            name=name,
            api_url=str(api_url).rstrip("/"),
            token_env=config.get("token_env") or BEARER_ENV_KEY,
            timeout=_optional_number(name, "timeout", config.get("timeout"), float),
            max_pages=_optional_number(name, "max_pages", config.get("max_pages"), int),
        )
        logger.debug(f"Using API profile '{name}' at {profile.api_url}")
        return profile

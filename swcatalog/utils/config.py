"""Configuration loading utilities using importlib.

Configuration lives in plain Python modules exposing a dict (by default named
``CONFIGURATION``) that maps names to settings dicts. Entries may extend one
another through the ``"__inherits__"`` key, e.g.::

    CONFIGURATION = {
        "default": {"api_url": "https://api.developers.italia.it/v1"},
        "slow": {"__inherits__": "default", "timeout": 120},
    }
"""

from __future__ import annotations

import importlib
import logging
from typing import Any

from swcatalog.errors import CatalogError

logger = logging.getLogger(__name__)

INHERITS_KEY = "__inherits__"


class ConfigError(CatalogError):
    """Raised when configuration loading or resolution fails."""

    pass


def load_config_from_module(
    module_path: str,
    config_name: str = "CONFIGURATION",
    default: Any | None = None,
) -> Any:
    """Import `module_path` and return its `config_name` attribute.

    Import failures and missing attributes are logged and answered with
    `default`, so a broken optional config module never stops the CLI.

    Examples:
        >>> profiles = load_config_from_module("swcatalog.api_profiles")
    """
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        logger.warning(f"Could not import module '{module_path}': {e}")
        return default

    if not hasattr(module, config_name):
        logger.warning(f"Module '{module_path}' does not have attribute '{config_name}'")
        return default

    logger.debug(f"Loaded configuration from {module_path}.{config_name}")
    return getattr(module, config_name)


def resolve_config_inheritance(config_dict: dict[str, dict[str, Any]]) -> dict[str, dict[str, Any]]:
    """Expand every ``__inherits__`` chain in `config_dict`.

    Child keys override parent keys; the ``__inherits__`` marker itself is
    dropped from the result. The input dict is left untouched.

    Raises:
        ConfigError: On circular inheritance or a reference to an unknown entry.

    Examples:
        >>> resolved = resolve_config_inheritance({
        ...     "default": {"api_url": "https://x/v1", "timeout": None},
        ...     "slow": {"__inherits__": "default", "timeout": 120},
        ... })
        >>> resolved["slow"]
        {'api_url': 'https://x/v1', 'timeout': 120}
    """
    resolved: dict[str, dict[str, Any]] = {}

    def _resolve(name: str, chain: list[str]) -> dict[str, Any]:
        if name in chain:
            cycle = " -> ".join([*chain, name])
            raise ConfigError(f"Circular inheritance detected: {cycle}")
        if name in resolved:
            return resolved[name]

        entry = config_dict[name]
        parent_name = entry.get(INHERITS_KEY)
        if parent_name is None:
            merged = dict(entry)
        else:
            if parent_name not in config_dict:
                raise ConfigError(
                    f"Configuration '{name}' inherits from '{parent_name}', "
                    f"but '{parent_name}' not found"
                )
            merged = dict(_resolve(parent_name, [*chain, name]))
            merged.update({k: v for k, v in entry.items() if k != INHERITS_KEY})
            logger.debug(f"Resolved inheritance for '{name}' from '{parent_name}'")

        resolved[name] = merged
        return merged

    for name in config_dict:
        _resolve(name, [])
    return resolved


def load_and_resolve_config(
    module_path: str,
    config_name: str = "CONFIGURATION",
    default: dict[str, dict[str, Any]] | None = None,
) -> dict[str, dict[str, Any]]:
    """Load a configuration dict from a module and resolve its inheritance.

    Falls back to `default` (or an empty dict) when the module cannot provide a
    dict. Inheritance errors are not swallowed.
    """
    raw_config = load_config_from_module(module_path, config_name, default)
    if not isinstance(raw_config, dict):
        logger.warning(f"Invalid configuration loaded from {module_path}, using default")
        return default or {}

    try:
        resolved = resolve_config_inheritance(raw_config)
    except ConfigError as e:
        logger.error(f"Failed to resolve configuration inheritance: {e}")
        raise
    logger.debug(f"Loaded and resolved {len(resolved)} configurations from {module_path}")
    return resolved

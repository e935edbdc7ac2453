from __future__ import annotations

import os
from pathlib import Path


def load_env_file_if_present(path: str | Path = ".env", override: bool = False) -> dict[str, str]:
    """Read KEY=VALUE pairs from a .env file into the process environment.

    Keeps the dependency footprint at zero for the one thing we need from
    python-dotenv: picking up API_BEARER_TOKEN / CATALOG_API_URL from a local
    `.env` during development.

    Blank lines and `#` comments are skipped, an optional leading `export ` is
    dropped and surrounding quotes are removed from values. Variables already
    present in the environment win unless `override` is set.

    Returns every pair parsed from the file, whether or not it was applied.
    """
    env_path = Path(path)
    if not env_path.exists():
        return {}

    parsed: dict[str, str] = {}
    for raw in env_path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export ") :]
        key, value = (part.strip() for part in line.split("=", 1))
        if not key:
            continue
        parsed[key] = value.strip('"').strip("'")

    for key, value in parsed.items():
        if override or key not in os.environ:
            os.environ[key] = value
    return parsed

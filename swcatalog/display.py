"""Human-readable rendering of catalog records."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

import pandas as pd

from .models import Publisher, Software


def _flag(value: bool) -> str:
    return "true" if value else "false"


def format_publisher(publisher: Publisher, api_url: str) -> str:
    return (
        f"{api_url}/publishers/{publisher.id}"
        f" alternativeId={publisher.alternative_id or ''}"
        f" description={publisher.description}"
        f" email={publisher.email or ''}"
        f" active={_flag(publisher.active)}"
    )


def format_software(software: Software, api_url: str) -> str:
    # Links use /software/<id>; earlier releases printed /publishers/<id> here.
    return (
        f"{api_url}/software/{software.id} ({software.url})"
        f" active={_flag(software.active)}"
        f" publiccodeYml={software.publiccode_yml}"
    )


def format_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def record_rows(records: list[Publisher] | list[Software]) -> list[dict[str, Any]]:
    return [asdict(record) for record in records]


def render_table(rows: list[Any], limit: int = 0) -> str:
    """Render rows as a text table, optionally only the first `limit` rows.

    Returns an empty string when there is nothing to show.
    """
    if not rows:
        return ""
    df = pd.DataFrame(rows)
    if limit:
        df = df.head(limit)
    return df.to_string(index=False)

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .api_profiles import DEFAULT_API_URL
from .auth import build_auth_headers, load_bearer_token
from .errors import MalformedInputError, PaginationLimitError, TransportError
from .profiles import DEFAULT_PROFILE, ProfileRegistry

logger = logging.getLogger(__name__)

PUBLISHERS = "publishers"
SOFTWARE = "software"
LOGS = "logs"

ALLOWED_METHODS = ("GET", "POST", "PATCH")
FIRST_PAGE_QUERY = "all=true"

_NO_BODY = object()


def _session_without_retries() -> requests.Session:
    # One attempt per request; failures go straight back to the caller.
    sess = requests.Session()
    adapter = HTTPAdapter(max_retries=Retry(total=0, read=False, raise_on_status=False))
    sess.mount("http://", adapter)
    sess.mount("https://", adapter)
    return sess


def parse_body(text: str) -> Any:
    """Decode a request body given on the command line.

    Raises MalformedInputError before anything touches the network.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Request body is not valid JSON: {e}") from e


@dataclass
class CatalogClient:
    bearer: str
    api_url: str = DEFAULT_API_URL
    timeout: float | None = None
    max_pages: int | None = None

    def __post_init__(self) -> None:
        self.api_url = self.api_url.rstrip("/")
        self.session = _session_without_retries()
        self.headers = build_auth_headers(self.bearer)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> CatalogClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @classmethod
    def from_env(
        cls,
        profile: str = DEFAULT_PROFILE,
        api_url: str | None = None,
        max_pages: int | None = None,
        registry: ProfileRegistry | None = None,
    ) -> CatalogClient:
        settings = (registry or ProfileRegistry()).get(profile)
        bearer = load_bearer_token(settings.token_env)
        return cls(
            bearer=bearer,
            api_url=api_url or settings.api_url,
            timeout=settings.timeout,
            max_pages=max_pages if max_pages is not None else settings.max_pages,
        )

    def send(self, resource: str, method: str = "GET", body: Any = _NO_BODY) -> Any:
        """Perform one request against `<api_url>/<resource>` and decode the JSON reply.

        The HTTP status is not inspected: error payloads come back as ordinary
        JSON values. Any `body` given, `None` included, is sent serialized as
        JSON; omit it to send no body. Raises TransportError when the request
        cannot complete or the reply is not JSON.
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported method {method!r}; expected one of {ALLOWED_METHODS}")

        url = f"{self.api_url}/{resource}"
        payload = None if body is _NO_BODY else json.dumps(body)
        logger.debug(f"{method} {url}")
        try:
            res = self.session.request(
                method, url, headers=self.headers, data=payload, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug(f"{method} {url} -> {res.status_code}")
        try:
            return res.json()
        except ValueError as e:
            raise TransportError(
                f"{method} {url} returned a non-JSON body (HTTP {res.status_code})"
            ) from e

    def get_paginated(self, resource: str) -> list[Any]:
        """Fetch every page of a collection, accumulating the `data` arrays.

        The first page is requested with `all=true`; each following page reuses
        the server's `links.next` query fragment verbatim, minus its leading `?`.
        Stops on the first page without a string `links.next`. Any error aborts
        the whole listing and nothing collected so far is returned.
        """
        items: list[Any] = []
        query = FIRST_PAGE_QUERY
        pages = 0
        while True:
            payload = self.send(f"{resource}?{query}")
            pages += 1
            envelope = payload if isinstance(payload, dict) else {}

            data = envelope.get("data")
            if isinstance(data, list):
                items.extend(data)
            logger.debug(f"{resource}: page {pages}, {len(items)} items so far")

            links = envelope.get("links")
            next_page = links.get("next") if isinstance(links, dict) else None
            if not isinstance(next_page, str):
                break
            if self.max_pages is not None and pages >= self.max_pages:
                raise PaginationLimitError(
                    f"{resource}: server still offers more pages after {pages} (max_pages={self.max_pages})"
                )
            query = next_page.lstrip("?")

        logger.info(f"Fetched {len(items)} {resource} items in {pages} page(s)")
        return items

    def create(self, collection: str, body: Any) -> Any:
        return self.send(collection, "POST", body)

    def update(self, collection: str, item_id: str, body: Any) -> Any:
        return self.send(f"{collection}/{item_id}", "PATCH", body)

    def fetch_by_id(self, collection: str, item_id: str) -> Any:
        return self.send(f"{collection}/{item_id}")

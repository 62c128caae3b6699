"""HTTP client for the public Jeopardy category service."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from jeopardy.backend.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from jeopardy.backend.errors import ProviderError
from jeopardy.backend.provider.base import (
    RawCategory,
    parse_category,
    parse_category_ids,
)

logger = logging.getLogger(__name__)


class HttpProvider:
    """Fetches categories over HTTP with ``requests``.

    Endpoints::

        GET {base_url}/categories?count=N   -> [{"id": 2, "title": ...}, ...]
        GET {base_url}/category?id=2        -> {"title": ..., "clues": [...]}
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def list_category_ids(self, sample_size: int) -> list[int]:
        return parse_category_ids(self._get("categories", {"count": sample_size}))

    def fetch_category(self, category_id: int) -> RawCategory:
        return parse_category(self._get("category", {"id": category_id}))

    # -- helpers --------------------------------------------------------------

    def _get(self, endpoint: str, params: dict[str, Any]) -> Any:
        url = f"{self.base_url}/{endpoint}"
        logger.debug("GET %s %s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise ProviderError(f"Request to {url} failed: {e}") from e
        try:
            return resp.json()
        except ValueError as e:
            raise ProviderError(f"Response from {url} is not JSON.") from e

"""Offline provider backed by a JSON file of categories."""

from __future__ import annotations

import json
from pathlib import Path

from jeopardy.backend.errors import ProviderError
from jeopardy.backend.provider.base import RawCategory, parse_category


class FileProvider:
    """Serves categories from a JSON list of ``{"id", "title", "clues"}``.

    The file is read once, on first use.
    """

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._categories: dict[int, RawCategory] | None = None

    def list_category_ids(self, sample_size: int) -> list[int]:
        return list(self._load())[:sample_size]

    def fetch_category(self, category_id: int) -> RawCategory:
        categories = self._load()
        if category_id not in categories:
            raise ProviderError(f"No category with id {category_id} in {self.filepath}.")
        return categories[category_id]

    # -- persistence ----------------------------------------------------------

    def _load(self) -> dict[int, RawCategory]:
        if self._categories is not None:
            return self._categories
        try:
            data = json.loads(self.filepath.read_text(encoding="utf-8"))
        except OSError as e:
            raise ProviderError(f"Cannot read {self.filepath}: {e}") from e
        except json.JSONDecodeError as e:
            raise ProviderError(f"{self.filepath} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise ProviderError(f"{self.filepath} must hold a list of categories.")
        categories: dict[int, RawCategory] = {}
        for entry in data:
            if not isinstance(entry, dict) or "id" not in entry:
                raise ProviderError(f"Category entry without an id in {self.filepath}.")
            categories[entry["id"]] = parse_category(entry)
        self._categories = categories
        return categories

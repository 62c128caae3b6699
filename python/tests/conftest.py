"""Shared fakes: an in-memory category provider and a recording renderer."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional

import pytest

from jeopardy.backend.engine.gameplay.sink import Cell, ClueRef
from jeopardy.backend.provider.base import RawCategory, RawClue

FIXTURE_PATH = Path(__file__).resolve().parent.parent.parent / "fixtures" / "categories.json"


def make_category(index: int, clue_count: int = 5) -> RawCategory:
    return RawCategory(
        title=f"category {index}",
        clues=[
            RawClue(question=f"q{index}-{n}", answer=f"a{index}-{n}")
            for n in range(clue_count)
        ],
    )


class FakeProvider:
    """Provider serving generated categories, with call counters.

    Set ``error`` to make the next calls raise it. Set ``gate`` to make
    ``list_category_ids`` block until the event is set.
    """

    def __init__(self, categories: dict[int, RawCategory]) -> None:
        self.categories = categories
        self.list_calls = 0
        self.fetch_calls: list[int] = []
        self.error: Optional[Exception] = None
        self.gate: Optional[threading.Event] = None

    @classmethod
    def with_categories(cls, count: int = 8, clue_count: int = 5) -> FakeProvider:
        return cls({i: make_category(i, clue_count) for i in range(1, count + 1)})

    def list_category_ids(self, sample_size: int) -> list[int]:
        self.list_calls += 1
        if self.gate is not None:
            self.gate.wait(5)
        if self.error is not None:
            raise self.error
        return list(self.categories)[:sample_size]

    def fetch_category(self, category_id: int) -> RawCategory:
        self.fetch_calls.append(category_id)
        if self.error is not None:
            raise self.error
        return self.categories[category_id]


class RecordingSink:
    """Renderer that just records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def render_empty_board(self) -> None:
        self.calls.append(("empty", None))

    def render_header(self, titles: Sequence[str]) -> None:
        self.calls.append(("header", list(titles)))

    def render_row(self, row_index: int, cells: Sequence[Cell]) -> None:
        self.calls.append(("row", (row_index, list(cells))))

    def set_cell_text(self, clue_ref: ClueRef, text: str) -> None:
        self.calls.append(("cell", (clue_ref, text)))

    def set_busy(self, busy: bool) -> None:
        self.calls.append(("busy", busy))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def of(self, name: str) -> list[Any]:
        return [arg for n, arg in self.calls if n == name]


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider.with_categories()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()

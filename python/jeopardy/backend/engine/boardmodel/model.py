"""Assembles categories into a Board and checks their shape."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from jeopardy.backend.errors import BoardShapeError, CategoryShapeError
from jeopardy.backend.models.board import (
    CATEGORY_COUNT,
    CLUES_PER_CATEGORY,
    Board,
    Category,
    Clue,
)
from jeopardy.backend.provider.base import RawClue


class BoardModel:
    """Collects categories for the next board.

    ``build`` wraps provider data into categories, ``finalize`` checks the
    collection and hands it over as a new Board, ``reset`` starts over.
    """

    def __init__(
        self,
        category_count: int = CATEGORY_COUNT,
        clues_per_category: int = CLUES_PER_CATEGORY,
    ) -> None:
        self.category_count = category_count
        self.clues_per_category = clues_per_category
        self._pending: list[Category] = []

    @property
    def categories(self) -> list[Category]:
        return list(self._pending)

    def build(
        self, title: str, raw_clues: Sequence[Union[RawClue, Mapping[str, Any]]]
    ) -> Category:
        """Wrap *raw_clues* as hidden clues under an upper-cased *title*."""
        if len(raw_clues) != self.clues_per_category:
            raise CategoryShapeError(
                f"Category {title!r} has {len(raw_clues)} clues, "
                f"expected {self.clues_per_category}."
            )
        category = Category(
            title=title.strip().upper(),
            clues=[_wrap_clue(c) for c in raw_clues],
        )
        self._pending.append(category)
        return category

    def reset(self) -> None:
        self._pending = []

    def finalize(self, categories: Optional[Sequence[Category]] = None) -> Board:
        """Validate and return a Board.

        Uses the pending categories when *categories* is omitted.
        """
        cats = list(self._pending if categories is None else categories)
        if len(cats) != self.category_count:
            raise BoardShapeError(
                f"Board has {len(cats)} categories, expected {self.category_count}."
            )
        for cat in cats:
            if not cat.is_complete(self.clues_per_category):
                raise BoardShapeError(
                    f"Category {cat.title!r} has {len(cat.clues)} clues, "
                    f"expected {self.clues_per_category}."
                )
        return Board(categories=cats)


def _wrap_clue(raw: Union[RawClue, Mapping[str, Any]]) -> Clue:
    """Make a hidden Clue from a RawClue or a ``{"question", "answer"}`` mapping."""
    if isinstance(raw, Mapping):
        question, answer = raw["question"], raw["answer"]
    else:
        question, answer = raw.question, raw.answer
    return Clue(question=str(question), answer=str(answer))

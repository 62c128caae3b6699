"""Board model for the trivia game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

CATEGORY_COUNT = 6
CLUES_PER_CATEGORY = 5
CATEGORY_POOL_SIZE = 100

HIDDEN_TEXT = "?"


class RevealState(StrEnum):
    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


@dataclass
class Clue:
    """One question/answer pair and how much of it is showing."""

    question: str
    answer: str
    reveal_state: RevealState = RevealState.HIDDEN

    @property
    def display_text(self) -> str:
        if self.reveal_state is RevealState.QUESTION:
            return self.question
        if self.reveal_state is RevealState.ANSWER:
            return self.answer
        return HIDDEN_TEXT


@dataclass
class Category:
    """A titled column of clues."""

    title: str
    clues: list[Clue] = field(default_factory=list)

    def is_complete(self, clues_per_category: int = CLUES_PER_CATEGORY) -> bool:
        return len(self.clues) == clues_per_category


@dataclass
class Board:
    """The full set of categories for one game.

    Category order is column order. A new game builds a new Board rather
    than editing this one; only ``Clue.reveal_state`` changes in place.
    """

    categories: list[Category]

    # -- queries --------------------------------------------------------------

    @property
    def titles(self) -> list[str]:
        return [cat.title for cat in self.categories]

    @property
    def row_count(self) -> int:
        if not self.categories:
            return 0
        return min(len(cat.clues) for cat in self.categories)

    def row(self, index: int) -> list[Clue]:
        """Return the clue at *index* from every category, in column order."""
        return [cat.clues[index] for cat in self.categories]

    def clue_at(self, row: int, col: int) -> Clue:
        return self.categories[col].clues[row]

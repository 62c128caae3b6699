from jeopardy.backend.models.board import (
    CATEGORY_COUNT,
    CATEGORY_POOL_SIZE,
    CLUES_PER_CATEGORY,
    Board,
    Category,
    Clue,
    RevealState,
)

__all__ = [
    "CATEGORY_COUNT",
    "CATEGORY_POOL_SIZE",
    "CLUES_PER_CATEGORY",
    "Board",
    "Category",
    "Clue",
    "RevealState",
]

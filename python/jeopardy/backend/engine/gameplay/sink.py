"""Interface between the game controller and whatever draws the board."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ClueRef:
    """Opaque handle for one board cell, handed back on clicks."""

    row: int
    col: int


@dataclass(frozen=True)
class Cell:
    display_text: str
    clue_ref: ClueRef


class RenderSink(Protocol):
    def render_empty_board(self) -> None: ...

    def render_header(self, titles: Sequence[str]) -> None: ...

    def render_row(self, row_index: int, cells: Sequence[Cell]) -> None: ...

    def set_cell_text(self, clue_ref: ClueRef, text: str) -> None: ...

    def set_busy(self, busy: bool) -> None: ...

"""In-memory board display shared by the terminal frontends.

``GridView`` receives render calls from the controller and keeps what a
screen would show, plus a cursor standing in for the mouse. Subclasses
only implement ``draw``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from jeopardy.backend.engine.gameplay.sink import Cell, ClueRef

_OFFSETS: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


class GridView:
    def __init__(self) -> None:
        self.titles: list[str] = []
        self.rows: list[list[Cell]] = []
        self.busy = False
        self.cursor: tuple[int, int] = (0, 0)
        self.message = ""
        self._positions: dict[ClueRef, tuple[int, int]] = {}

    # -- RenderSink -----------------------------------------------------------

    def render_empty_board(self) -> None:
        self.titles = []
        self.rows = []
        self._positions = {}
        self.cursor = (0, 0)

    def render_header(self, titles: Sequence[str]) -> None:
        self.titles = list(titles)

    def render_row(self, row_index: int, cells: Sequence[Cell]) -> None:
        while len(self.rows) <= row_index:
            self.rows.append([])
        self.rows[row_index] = list(cells)
        for c, cell in enumerate(cells):
            self._positions[cell.clue_ref] = (row_index, c)

    def set_cell_text(self, clue_ref: ClueRef, text: str) -> None:
        r, c = self._positions[clue_ref]
        self.rows[r][c] = Cell(display_text=text, clue_ref=clue_ref)

    def set_busy(self, busy: bool) -> None:
        self.busy = busy

    # -- cursor ---------------------------------------------------------------

    @property
    def column_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def move(self, direction: str) -> None:
        """Move the cursor one cell, stopping at the board edges."""
        if not self.rows or direction not in _OFFSETS:
            return
        dr, dc = _OFFSETS[direction]
        r, c = self.cursor
        r = min(max(r + dr, 0), len(self.rows) - 1)
        c = min(max(c + dc, 0), len(self.rows[r]) - 1)
        self.cursor = (r, c)

    def selected_ref(self) -> Optional[ClueRef]:
        r, c = self.cursor
        if r < len(self.rows) and c < len(self.rows[r]):
            return self.rows[r][c].clue_ref
        return None

    def draw(self) -> None:
        raise NotImplementedError

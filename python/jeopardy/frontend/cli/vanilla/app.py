"""Vanilla terminal frontend with no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import asyncio
import shutil
import sys
import textwrap

from jeopardy.backend.config import GameConfig
from jeopardy.backend.engine.gameplay import GameController
from jeopardy.backend.errors import LoadFailure
from jeopardy.backend.models.board import HIDDEN_TEXT
from jeopardy.backend.provider.base import CategoryProvider
from jeopardy.frontend.cli.grid import GridView
from jeopardy.frontend.cli.input_handler import get_key


# -- ANSI helpers -------------------------------------------------------------

_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_INV = "\033[7m"     # reverse video (cursor)
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _wrap(text: str, width: int) -> list[str]:
    return textwrap.wrap(text, width) or [""]


def _render_board(view: GridView, total_width: int) -> str:
    """Return an ANSI-coloured text table of the board."""
    cols = max(len(view.titles), view.column_count, 1)
    cell_w = max(8, (total_width - cols - 1) // cols - 2)
    sep = "+" + (("-" * (cell_w + 2) + "+") * cols)

    def _line(chunks: list[list[str]], styles: list[str]) -> list[str]:
        height = max((len(ch) for ch in chunks), default=0)
        out: list[str] = []
        for i in range(height):
            parts = []
            for ch, style in zip(chunks, styles):
                piece = ch[i] if i < len(ch) else ""
                parts.append(f"{style} {piece:^{cell_w}} {_R}")
            out.append("|" + "|".join(parts) + "|")
        return out

    lines = [sep]
    lines += _line([_wrap(t, cell_w) for t in view.titles], [_Y] * len(view.titles))
    lines.append(sep.replace("-", "="))
    for r, row in enumerate(view.rows):
        styles = []
        for c, cell in enumerate(row):
            style = _Y if cell.display_text == HIDDEN_TEXT else ""
            if (r, c) == view.cursor:
                style += _INV
            styles.append(style)
        lines += _line([_wrap(cell.display_text, cell_w) for cell in row], styles)
        lines.append(sep)
    return "\n".join(lines)


class VanillaBoardView(GridView):
    def set_busy(self, busy: bool) -> None:
        super().set_busy(busy)
        if busy:
            _clear()
            print(f"\n  {_C}J E O P A R D Y !{_R}\n")
            print(f"  {_DIM}Loading...{_R}")
            sys.stdout.flush()

    def draw(self) -> None:
        _clear()
        width = shutil.get_terminal_size((100, 30)).columns
        print(f"\n  {_C}J E O P A R D Y !{_R}\n")
        if self.rows:
            print(_render_board(self, width - 2))
        else:
            print(f"  {_DIM}No board yet.{_R}")
        if self.message:
            print(f"\n  {self.message}")
        print(
            f"\n  {_C}WASD/arrows{_R} move   {_C}Enter{_R} reveal   "
            f"{_C}R{_R} Start New Game   {_C}Q{_R} quit\n"
        )


# -- game loop ----------------------------------------------------------------


def _start_game(controller: GameController, view: GridView) -> None:
    try:
        asyncio.run(controller.start())
        view.message = ""
    except LoadFailure as e:
        view.message = f"{_RED}Could not load a new game:{_R} {e}"


def _game_loop(controller: GameController, view: GridView) -> None:
    _start_game(controller, view)

    while True:
        view.draw()
        key = get_key()

        if key in ("up", "down", "left", "right"):
            view.move(key)
        elif key == "reveal":
            ref = view.selected_ref()
            if ref is not None:
                controller.on_cell_clicked(ref)
        elif key == "restart":
            _start_game(controller, view)
        elif key == "quit":
            _clear()
            print(f"\n  {_C}Goodbye!{_R}\n")
            return


# -- public entry point -------------------------------------------------------


def run(provider: CategoryProvider, config: GameConfig) -> None:
    """Launch the vanilla CLI and start the first game."""
    view = VanillaBoardView()
    controller = GameController(provider, view, config)
    _game_loop(controller, view)

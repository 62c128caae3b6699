"""Rich terminal frontend: styled board table, spinner while loading.

Uses the ``rich`` library for output and the shared keypress reader for
input. The cursor stands in for the mouse: Enter clicks the cell under
it.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.status import Status
from rich.table import Table
from rich.text import Text

from jeopardy.backend.config import GameConfig
from jeopardy.backend.engine.gameplay import GameController
from jeopardy.backend.errors import LoadFailure
from jeopardy.backend.models.board import HIDDEN_TEXT
from jeopardy.backend.provider.base import CategoryProvider
from jeopardy.frontend.cli.grid import GridView
from jeopardy.frontend.cli.input_handler import get_key

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(view: GridView) -> Table:
    """Return a Rich Table representing the clue grid."""
    table = Table(
        show_header=True,
        show_lines=True,
        expand=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        header_style="bold yellow",
        padding=(0, 1),
    )
    for title in view.titles:
        table.add_column(escape(title), justify="center", ratio=1, overflow="fold")

    for r, row in enumerate(view.rows):
        cells: list[Text] = []
        for c, cell in enumerate(row):
            style = "bold yellow" if cell.display_text == HIDDEN_TEXT else "white"
            if (r, c) == view.cursor:
                style += " reverse"
            cells.append(Text(cell.display_text, style=style))
        table.add_row(*cells)

    return table


class RichBoardView(GridView):
    """GridView that draws with Rich and shows a spinner while busy."""

    def __init__(self) -> None:
        super().__init__()
        self._status: Optional[Status] = None

    def set_busy(self, busy: bool) -> None:
        super().set_busy(busy)
        if busy and self._status is None:
            self.draw()
            self._status = console.status(
                "[bold cyan]Loading...[/bold cyan]", spinner="dots"
            )
            self._status.start()
        elif not busy and self._status is not None:
            self._status.stop()
            self._status = None

    def draw(self) -> None:
        console.clear()

        if self.rows:
            body = _render_board(self)
        else:
            body = Text("No board yet.", style="dim")

        controls = Text()
        controls.append("  ↑↓←→", style="bold cyan")
        controls.append(" / ", style="dim")
        controls.append("WASD", style="bold cyan")
        controls.append("  move   ", style="dim")
        controls.append("Enter", style="bold cyan")
        controls.append("  reveal   ", style="dim")
        if self.busy:
            controls.append("R  Loading...   ", style="dim")
        else:
            controls.append("R", style="bold cyan")
            controls.append("  Start New Game   ", style="dim")
        controls.append("Q", style="bold cyan")
        controls.append("  quit", style="dim")

        parts = [body]
        if self.message:
            parts.append(Align.center(Text.from_markup(f"\n{self.message}")))

        panel = Panel(
            Group(*parts),
            title="[bold yellow]Jeopardy![/bold yellow]",
            border_style="bright_blue",
            padding=(1, 2),
        )

        console.print()
        console.print(panel)
        console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _start_game(controller: GameController, view: GridView) -> None:
    try:
        asyncio.run(controller.start())
        view.message = ""
    except LoadFailure as e:
        view.message = f"[red]Could not load a new game:[/red] {escape(str(e))}"


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
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(provider: CategoryProvider, config: GameConfig) -> None:
    """Launch the Rich CLI and start the first game."""
    view = RichBoardView()
    controller = GameController(provider, view, config)
    _game_loop(controller, view)

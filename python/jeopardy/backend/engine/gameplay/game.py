"""Game lifecycle: loading a board and handling clicks on it."""

from __future__ import annotations

import asyncio
import logging
import random
from enum import StrEnum
from typing import Optional

from jeopardy.backend.config import GameConfig
from jeopardy.backend.engine.boardmodel import BoardModel
from jeopardy.backend.engine.cluestate import ClueStateMachine, RevealResult
from jeopardy.backend.engine.gameplay.sink import Cell, ClueRef, RenderSink
from jeopardy.backend.engine.selector import CategorySelector
from jeopardy.backend.errors import JeopardyError, LoadFailure
from jeopardy.backend.models.board import Board, Clue
from jeopardy.backend.provider.base import CategoryProvider

logger = logging.getLogger(__name__)


class GamePhase(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"


class GameController:
    """Owns the current Board and drives one renderer.

    ``start`` is the only coroutine; it suspends while categories are
    fetched in a worker thread. Everything else runs synchronously on
    the caller's event loop.
    """

    def __init__(
        self,
        provider: CategoryProvider,
        sink: RenderSink,
        config: Optional[GameConfig] = None,
        selector: Optional[CategorySelector] = None,
    ) -> None:
        self.provider = provider
        self.sink = sink
        self.config = config or GameConfig()
        self.selector = selector or CategorySelector(random.Random(self.config.seed))
        self.model = BoardModel(
            category_count=self.config.category_count,
            clues_per_category=self.config.clues_per_category,
        )
        self.phase = GamePhase.IDLE
        self.board: Optional[Board] = None
        self._refs: dict[ClueRef, Clue] = {}

    @property
    def refs(self) -> dict[ClueRef, Clue]:
        return dict(self._refs)

    # -- lifecycle ------------------------------------------------------------

    async def start(self) -> Optional[Board]:
        """Load a fresh board and render it.

        Returns the new Board, or ``None`` if a load is already running.
        Raises ``LoadFailure`` if the board could not be built; the
        previous board stays in place and is drawn again.
        """
        if self.phase is GamePhase.LOADING:
            logger.info("Start ignored: a game is already loading.")
            return None

        previous_phase = self.phase
        self.phase = GamePhase.LOADING
        logger.debug("Phase %s -> %s", previous_phase, self.phase)
        self.sink.render_empty_board()
        self.sink.set_busy(True)
        self.model.reset()

        try:
            await asyncio.to_thread(self._load_categories)
            board = self.model.finalize()
        except JeopardyError as e:
            logger.warning("Loading a new game failed: %s", e)
            self._abort(previous_phase)
            raise LoadFailure(str(e)) from e
        except Exception:
            self._abort(previous_phase)
            raise

        self._data_arrived(board)
        return board

    def _load_categories(self) -> None:
        ids = self.provider.list_category_ids(self.config.pool_size)
        chosen = self.selector.choose_category_ids(ids, self.config.category_count)
        for category_id in chosen:
            raw = self.provider.fetch_category(category_id)
            clues = self.selector.choose_clues(raw.clues, self.config.clues_per_category)
            self.model.build(raw.title, clues)

    def _data_arrived(self, board: Board) -> None:
        self.board = board
        self._refs = {
            ClueRef(row=r, col=c): clue
            for r in range(board.row_count)
            for c, clue in enumerate(board.row(r))
        }
        self.phase = GamePhase.READY
        logger.debug("Phase %s -> %s", GamePhase.LOADING, self.phase)
        self.sink.set_busy(False)
        self._render(board)

    def _abort(self, previous_phase: GamePhase) -> None:
        self.model.reset()
        self.phase = previous_phase
        self.sink.set_busy(False)
        if self.board is not None:
            self._render(self.board)

    def _render(self, board: Board) -> None:
        self.sink.render_header(board.titles)
        for r in range(board.row_count):
            cells = [
                Cell(display_text=clue.display_text, clue_ref=ClueRef(row=r, col=c))
                for c, clue in enumerate(board.row(r))
            ]
            self.sink.render_row(r, cells)

    # -- clicks ---------------------------------------------------------------

    def on_cell_clicked(self, clue_ref: ClueRef) -> Optional[RevealResult]:
        """Advance the clicked clue and update its cell if anything changed.

        Clicks while a new board is loading, and refs that were never
        handed out, are logged and ignored.
        """
        if self.phase is GamePhase.LOADING:
            logger.info("Click on %s ignored: a game is loading.", clue_ref)
            return None

        clue = self._refs.get(clue_ref)
        if clue is None:
            logger.warning("Click on unknown cell %s ignored.", clue_ref)
            return None

        result = ClueStateMachine.reveal(clue)
        if result.state_changed and result.text is not None:
            self.sink.set_cell_text(clue_ref, result.text)
        return result

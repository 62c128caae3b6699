"""Per-clue reveal progression: hidden, then question, then answer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from jeopardy.backend.models.board import Clue, RevealState


@dataclass(frozen=True)
class RevealResult:
    text: Optional[str]
    state_changed: bool


_UNCHANGED = RevealResult(text=None, state_changed=False)


class ClueStateMachine:
    """Stateless transition logic; all methods are static."""

    @staticmethod
    def reveal(clue: Clue) -> RevealResult:
        """Advance *clue* by one step and return the text to show.

        Once the answer is showing, further calls change nothing and
        return ``state_changed=False``.
        """
        if clue.reveal_state is RevealState.HIDDEN:
            clue.reveal_state = RevealState.QUESTION
            return RevealResult(text=clue.question, state_changed=True)
        if clue.reveal_state is RevealState.QUESTION:
            clue.reveal_state = RevealState.ANSWER
            return RevealResult(text=clue.answer, state_changed=True)
        return _UNCHANGED

from jeopardy.backend.engine.gameplay.game import GameController, GamePhase
from jeopardy.backend.engine.gameplay.sink import Cell, ClueRef, RenderSink

__all__ = ["Cell", "ClueRef", "GameController", "GamePhase", "RenderSink"]

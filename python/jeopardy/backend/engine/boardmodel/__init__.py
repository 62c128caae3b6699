from jeopardy.backend.engine.boardmodel.model import BoardModel

__all__ = ["BoardModel"]

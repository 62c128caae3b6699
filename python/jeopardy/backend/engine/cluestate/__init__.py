from jeopardy.backend.engine.cluestate.state import ClueStateMachine, RevealResult

__all__ = ["ClueStateMachine", "RevealResult"]

from jeopardy.backend.engine.selector.selector import (
    CategorySelector,
    sample_without_replacement,
)

__all__ = ["CategorySelector", "sample_without_replacement"]

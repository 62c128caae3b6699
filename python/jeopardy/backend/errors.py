"""Error types raised while loading a game."""

from __future__ import annotations


class JeopardyError(Exception):
    """Base class for every error the backend raises on purpose."""


class ProviderError(JeopardyError):
    """The category service failed or sent something we cannot use."""


class InsufficientPoolError(JeopardyError):
    """Fewer distinct items were available than the board needs."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"Need {required} distinct items but only {available} available."
        )
        self.required = required
        self.available = available


class ShapeError(JeopardyError):
    pass


class CategoryShapeError(ShapeError):
    """A category does not hold exactly the configured number of clues."""


class BoardShapeError(ShapeError):
    """A board does not hold exactly the configured number of categories."""


class LoadFailure(JeopardyError):
    """Starting a game failed; ``__cause__`` holds the underlying error."""

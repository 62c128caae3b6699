"""Runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from jeopardy.backend.models.board import (
    CATEGORY_COUNT,
    CATEGORY_POOL_SIZE,
    CLUES_PER_CATEGORY,
)

DEFAULT_API_URL = "https://rithm-jeopardy.herokuapp.com/api"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class GameConfig:
    category_count: int = CATEGORY_COUNT
    clues_per_category: int = CLUES_PER_CATEGORY
    pool_size: int = CATEGORY_POOL_SIZE
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> GameConfig:
        """Build a config from ``JEOPARDY_*`` environment variables.

        Unset variables keep their defaults. Malformed numbers raise
        ``ValueError``.
        """
        seed = os.getenv("JEOPARDY_SEED")
        return cls(
            api_url=os.getenv("JEOPARDY_API_URL", DEFAULT_API_URL).rstrip("/"),
            timeout=float(os.getenv("JEOPARDY_TIMEOUT", DEFAULT_TIMEOUT)),
            seed=int(seed) if seed else None,
        )

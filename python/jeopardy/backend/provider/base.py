"""Category data as it arrives from a provider, before it becomes a Board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from jeopardy.backend.errors import ProviderError


@dataclass(frozen=True)
class RawClue:
    question: str
    answer: str


@dataclass(frozen=True)
class RawCategory:
    title: str
    clues: list[RawClue] = field(default_factory=list)


class CategoryProvider(Protocol):
    """Source of categories. Any failure surfaces as ``ProviderError``."""

    def list_category_ids(self, sample_size: int) -> list[int]: ...

    def fetch_category(self, category_id: int) -> RawCategory: ...


# -- payload parsing ----------------------------------------------------------


def parse_category_ids(payload: Any) -> list[int]:
    """Extract ids from a ``[{"id": ...}, ...]`` listing."""
    if not isinstance(payload, list):
        raise ProviderError(f"Expected a list of categories, got {type(payload).__name__}.")
    ids: list[int] = []
    for entry in payload:
        if not isinstance(entry, dict) or "id" not in entry:
            raise ProviderError(f"Category entry without an id: {entry!r}")
        ids.append(entry["id"])
    return ids


def parse_category(payload: Any) -> RawCategory:
    """Turn a ``{"title": ..., "clues": [...]}`` object into a RawCategory.

    Answers are coerced to ``str``; the public service sends some of
    them as numbers.
    """
    if not isinstance(payload, dict):
        raise ProviderError(f"Expected a category object, got {type(payload).__name__}.")
    title = payload.get("title")
    clues = payload.get("clues")
    if not isinstance(title, str) or not isinstance(clues, list):
        raise ProviderError(f"Category payload missing title or clues: {payload!r}")

    raw: list[RawClue] = []
    for clue in clues:
        if not isinstance(clue, dict):
            raise ProviderError(f"Malformed clue in {title!r}: {clue!r}")
        question = clue.get("question")
        answer = clue.get("answer")
        if (
            not isinstance(question, str)
            or not isinstance(answer, (str, int, float))
            or isinstance(answer, bool)
        ):
            raise ProviderError(f"Malformed clue in {title!r}: {clue!r}")
        raw.append(RawClue(question=question, answer=str(answer)))
    return RawCategory(title=title, clues=raw)

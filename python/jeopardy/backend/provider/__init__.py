from jeopardy.backend.provider.base import CategoryProvider, RawCategory, RawClue
from jeopardy.backend.provider.file import FileProvider
from jeopardy.backend.provider.http import HttpProvider

__all__ = [
    "CategoryProvider",
    "FileProvider",
    "HttpProvider",
    "RawCategory",
    "RawClue",
]

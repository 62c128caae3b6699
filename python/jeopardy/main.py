"""Jeopardy trivia board.

Usage::

    jeopardy                      # Rich terminal, live categories
    jeopardy -f vanilla           # plain ANSI terminal
    jeopardy --source file        # offline, bundled categories
    jeopardy --seed 7 -v          # reproducible board, debug logging
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from jeopardy.backend.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, GameConfig
from jeopardy.backend.provider import FileProvider, HttpProvider
from jeopardy.backend.provider.base import CategoryProvider

ROOT = Path(__file__).resolve().parent  # python/jeopardy/
PROJECT_ROOT = ROOT.parent.parent
DEFAULT_FIXTURE = PROJECT_ROOT / "fixtures" / "categories.json"


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class Source(StrEnum):
    api = "api"
    file = "file"


_RUNNERS = {
    Frontend.vanilla: "jeopardy.frontend.cli.vanilla.app",
    Frontend.rich: "jeopardy.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_provider(source: Source, config: GameConfig, fixture: Path) -> CategoryProvider:
    if source is Source.file:
        return FileProvider(fixture)
    return HttpProvider(base_url=config.api_url, timeout=config.timeout)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    source: Source = typer.Option(
        Source.api, "--source",
        envvar="JEOPARDY_SOURCE",
        help="Where categories come from.",
    ),
    api_url: str = typer.Option(
        DEFAULT_API_URL, "--api-url",
        envvar="JEOPARDY_API_URL",
        help="Base URL of the category service.",
    ),
    fixture: Path = typer.Option(
        DEFAULT_FIXTURE, "--fixture",
        envvar="JEOPARDY_FIXTURE",
        help="JSON file used with --source file.",
    ),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT, "--timeout",
        envvar="JEOPARDY_TIMEOUT",
        min=0.1,
        help="HTTP timeout in seconds.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="JEOPARDY_SEED",
        help="Seed for category and clue selection.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log debug output.",
    ),
) -> None:
    """Jeopardy trivia board."""
    _configure_logging(verbose)

    config = GameConfig(api_url=api_url.rstrip("/"), timeout=timeout, seed=seed)
    provider = build_provider(source, config, fixture)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(provider=provider, config=config)


if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""Refresh the offline category fixture from the live service.

Run from the project root after ``pip install -e .``::

    python private/scripts/snapshot_categories.py            # 20 categories
    python private/scripts/snapshot_categories.py --count 40

Writes ``<project_root>/fixtures/categories.json`` in the format
``FileProvider`` reads. Categories with fewer clues than a board column
needs are skipped. Honours ``JEOPARDY_API_URL``, ``JEOPARDY_TIMEOUT`` and
``JEOPARDY_SEED``.
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path

from jeopardy.backend.config import GameConfig
from jeopardy.backend.engine.selector import CategorySelector
from jeopardy.backend.errors import JeopardyError
from jeopardy.backend.provider import HttpProvider

# Resolve paths: this script lives in <project_root>/private/scripts/
SCRIPT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = SCRIPT_DIR.parent.parent
FIXTURE_PATH = PROJECT_ROOT / "fixtures" / "categories.json"

logger = logging.getLogger("snapshot")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--count", type=int, default=20)
    parser.add_argument("--out", type=Path, default=FIXTURE_PATH)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    config = GameConfig.from_env()
    provider = HttpProvider(base_url=config.api_url, timeout=config.timeout)
    selector = CategorySelector(random.Random(config.seed))

    try:
        ids = provider.list_category_ids(config.pool_size)
        chosen = selector.choose_category_ids(ids, min(args.count, len(set(ids))))
        entries = []
        for category_id in chosen:
            raw = provider.fetch_category(category_id)
            if len(raw.clues) < config.clues_per_category:
                logger.info("Skipping %r: only %d clues", raw.title, len(raw.clues))
                continue
            entries.append({
                "id": category_id,
                "title": raw.title,
                "clues": [{"question": c.question, "answer": c.answer} for c in raw.clues],
            })
    except JeopardyError as e:
        logger.error("Snapshot failed: %s", e)
        return 1

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(json.dumps(entries, indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote %d categories to %s", len(entries), args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())

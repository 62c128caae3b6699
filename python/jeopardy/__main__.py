"""Allow ``python -m jeopardy``."""

from jeopardy.main import app

app()

"""HTTP and file providers, payload parsing, and environment config."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import pytest
import requests

from conftest import FIXTURE_PATH
from jeopardy.backend.config import DEFAULT_API_URL, GameConfig
from jeopardy.backend.errors import ProviderError
from jeopardy.backend.provider import FileProvider, HttpProvider, RawCategory, RawClue
from jeopardy.backend.provider.base import parse_category, parse_category_ids

BASE = "https://trivia.example/api"


class _FakeResponse:
    def __init__(self, payload: Any, status: int = 200, bad_json: bool = False) -> None:
        self.payload = payload
        self.status_code = status
        self.bad_json = bad_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self) -> Any:
        if self.bad_json:
            raise ValueError("not json")
        return self.payload


class _FakeSession:
    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = routes
        self.calls: list[tuple[str, Optional[dict], Optional[float]]] = []

    def get(self, url: str, params: Optional[dict] = None, timeout: Optional[float] = None):
        self.calls.append((url, params, timeout))
        route = self.routes[url]
        if isinstance(route, Exception):
            raise route
        return route


# -- payload parsing ----------------------------------------------------------


def test_parse_category_coerces_answers() -> None:
    raw = parse_category({
        "title": "math",
        "clues_count": 2,
        "clues": [
            {"question": "2+2", "answer": 4, "value": 200},
            {"question": "1+1", "answer": "2"},
        ],
    })

    assert raw == RawCategory(
        title="math",
        clues=[RawClue(question="2+2", answer="4"), RawClue(question="1+1", answer="2")],
    )


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"clues": []},
        {"title": "x"},
        {"title": "x", "clues": "nope"},
        {"title": "x", "clues": [{"question": "q"}]},
        {"title": "x", "clues": ["q"]},
        {"title": "x", "clues": [{"question": None, "answer": None}]},
        {"title": "x", "clues": [{"question": "q", "answer": None}]},
        {"title": "x", "clues": [{"question": None, "answer": "a"}]},
        {"title": "x", "clues": [{"question": 12, "answer": "a"}]},
        {"title": "x", "clues": [{"question": "q", "answer": True}]},
    ],
)
def test_parse_category_rejects_malformed(payload: Any) -> None:
    with pytest.raises(ProviderError):
        parse_category(payload)


def test_parse_category_ids() -> None:
    assert parse_category_ids([{"id": 2, "title": "a"}, {"id": 3}]) == [2, 3]
    with pytest.raises(ProviderError):
        parse_category_ids({"id": 2})
    with pytest.raises(ProviderError):
        parse_category_ids([{"title": "no id"}])


# -- HttpProvider -------------------------------------------------------------


def test_http_lists_ids_with_count_param() -> None:
    session = _FakeSession({f"{BASE}/categories": _FakeResponse([{"id": 11}, {"id": 12}])})
    provider = HttpProvider(BASE + "/", timeout=3.0, session=session)

    assert provider.list_category_ids(100) == [11, 12]
    assert session.calls == [(f"{BASE}/categories", {"count": 100}, 3.0)]


def test_http_fetches_category_by_id() -> None:
    payload = {"id": 11, "title": "music", "clues": [{"question": "q", "answer": "a"}]}
    session = _FakeSession({f"{BASE}/category": _FakeResponse(payload)})
    provider = HttpProvider(BASE, session=session)

    raw = provider.fetch_category(11)

    assert raw.title == "music"
    assert raw.clues == [RawClue("q", "a")]
    assert session.calls[0][1] == {"id": 11}


def test_http_status_error_becomes_provider_error() -> None:
    session = _FakeSession({f"{BASE}/category": _FakeResponse({}, status=404)})

    with pytest.raises(ProviderError):
        HttpProvider(BASE, session=session).fetch_category(1)


def test_http_transport_error_becomes_provider_error() -> None:
    session = _FakeSession({f"{BASE}/categories": requests.ConnectionError("refused")})

    with pytest.raises(ProviderError) as exc:
        HttpProvider(BASE, session=session).list_category_ids(100)
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_http_non_json_becomes_provider_error() -> None:
    session = _FakeSession({f"{BASE}/categories": _FakeResponse(None, bad_json=True)})

    with pytest.raises(ProviderError):
        HttpProvider(BASE, session=session).list_category_ids(100)


def test_http_default_base_url() -> None:
    assert HttpProvider().base_url == DEFAULT_API_URL


# -- FileProvider -------------------------------------------------------------


def test_file_provider_reads_bundled_fixture() -> None:
    provider = FileProvider(FIXTURE_PATH)

    ids = provider.list_category_ids(100)

    assert len(ids) >= 6
    assert len(set(ids)) == len(ids)
    for category_id in ids:
        assert len(provider.fetch_category(category_id).clues) >= 5


def test_file_provider_respects_sample_size(tmp_path: Path) -> None:
    path = tmp_path / "cats.json"
    path.write_text(json.dumps([
        {"id": i, "title": f"t{i}", "clues": []} for i in range(10)
    ]))

    assert FileProvider(path).list_category_ids(3) == [0, 1, 2]


def test_file_provider_unknown_id(tmp_path: Path) -> None:
    path = tmp_path / "cats.json"
    path.write_text(json.dumps([{"id": 1, "title": "t", "clues": []}]))

    with pytest.raises(ProviderError):
        FileProvider(path).fetch_category(2)


@pytest.mark.parametrize("content", ["not json", '{"id": 1}', '[{"title": "no id", "clues": []}]'])
def test_file_provider_bad_file(tmp_path: Path, content: str) -> None:
    path = tmp_path / "cats.json"
    path.write_text(content)

    with pytest.raises(ProviderError):
        FileProvider(path).list_category_ids(100)


def test_file_provider_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ProviderError):
        FileProvider(tmp_path / "missing.json").list_category_ids(100)


# -- config -------------------------------------------------------------------


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JEOPARDY_API_URL", "http://localhost:5000/api/")
    monkeypatch.setenv("JEOPARDY_TIMEOUT", "2.5")
    monkeypatch.setenv("JEOPARDY_SEED", "17")

    config = GameConfig.from_env()

    assert config.api_url == "http://localhost:5000/api"
    assert config.timeout == 2.5
    assert config.seed == 17
    assert (config.category_count, config.clues_per_category, config.pool_size) == (6, 5, 100)


def test_config_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("JEOPARDY_API_URL", "JEOPARDY_TIMEOUT", "JEOPARDY_SEED"):
        monkeypatch.delenv(name, raising=False)

    assert GameConfig.from_env() == GameConfig()

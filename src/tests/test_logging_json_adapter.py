from __future__ import annotations

import json
import logging
from io import StringIO

import pytest

import app_logging
from adapters import get_adapter
from exceptions import UpstreamError
from fakes import make_response


def _capture_json_logs(monkeypatch) -> StringIO:
    monkeypatch.setenv("LOOKUP_JSON_LOGS", "1")
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    app_logging._LOGGER_INITIALIZED = False
    app_logging.init_logging(force=True)
    handler.setFormatter(app_logging._JsonFormatter())
    logging.getLogger().handlers = [handler]
    return stream


def _json_lines(stream: StringIO) -> list[dict]:
    raw_lines = stream.getvalue().strip().splitlines()
    assert raw_lines, "no logs captured"
    return [json.loads(line) for line in raw_lines]


def test_adapter_emits_json_logs(monkeypatch, pikachu_body):
    stream = _capture_json_logs(monkeypatch)

    def fake_http(url, headers=None, timeout=None):
        return make_response(200, pikachu_body)

    adapter = get_adapter("pokeapi", http=fake_http)
    out = adapter.fetch("pikachu")
    assert out.name == "pikachu"

    lines = _json_lines(stream)
    fetched = [j for j in lines if j.get("msg") == "fetched"]
    assert fetched, f"no fetched event: {lines}"
    assert fetched[0]["status"] == "ok"
    assert fetched[0]["url"].endswith("/pokemon/pikachu")
    assert fetched[0]["name"] == "lookup_proxy.adapters.pokeapi"


def test_failure_detail_is_logged(monkeypatch):
    stream = _capture_json_logs(monkeypatch)

    def fake_http(url, headers=None, timeout=None):
        raise ConnectionError("name resolution failed")

    adapter = get_adapter("openlibrary", http=fake_http)
    with pytest.raises(UpstreamError):
        adapter.fetch("0451526538")

    lines = _json_lines(stream)
    failed = [j for j in lines if j.get("msg") == "fetch_failed"]
    assert failed and failed[0]["level"] == "error"
    assert "name resolution failed" in failed[0]["error"]

from config import get_settings


def test_defaults(monkeypatch):
    for var in ("LOOKUP_API_TIMEOUT", "LOOKUP_STRICT_NAMES", "LOOKUP_CORS_ORIGINS", "LOOKUP_PORT"):
        monkeypatch.delenv(var, raising=False)
    s = get_settings()
    assert s.api_timeout == 10.0
    assert s.strict_names is True
    assert s.cors_origins == ("*",)
    assert s.port == 8000
    assert s.pokeapi_base_url == "https://pokeapi.co/api/v2"


def test_overrides(monkeypatch):
    monkeypatch.setenv("LOOKUP_API_TIMEOUT", "3")
    monkeypatch.setenv("LOOKUP_STRICT_NAMES", "false")
    monkeypatch.setenv("LOOKUP_CORS_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("LOOKUP_OPENLIBRARY_BASE_URL", "http://books.local/")
    s = get_settings()
    assert s.api_timeout == 3.0
    assert s.strict_names is False
    assert s.cors_origins == ("https://a.example", "https://b.example")
    assert s.openlibrary_base_url == "http://books.local"


def test_per_adapter_timeout(monkeypatch):
    monkeypatch.setenv("LOOKUP_API_TIMEOUT", "4")
    monkeypatch.setenv("LOOKUP_OPENLIBRARY_TIMEOUT", "8")
    s = get_settings()
    assert s.timeout_for("openlibrary") == 8.0
    assert s.timeout_for("pokeapi") == 4.0


def test_malformed_timeouts_fall_back(monkeypatch):
    monkeypatch.setenv("LOOKUP_API_TIMEOUT", "soon")
    monkeypatch.setenv("LOOKUP_POKEAPI_TIMEOUT", "abc")
    monkeypatch.setenv("LOOKUP_OPENLIBRARY_TIMEOUT", "-1")
    s = get_settings()
    assert s.api_timeout == 10.0
    assert s.timeout_for("pokeapi") == 10.0
    assert s.timeout_for("openlibrary") == 10.0

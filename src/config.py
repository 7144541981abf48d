import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _env_timeout(name: str, default: float | None) -> float | None:
    """Positive float from ``name``; unset, malformed or non-positive values yield ``default``."""
    raw = os.getenv(name)
    if raw:
        try:
            value = float(raw)
        except ValueError:
            return default
        if value > 0:
            return value
    return default


@dataclass(frozen=True)
class _Settings:
    api_timeout: float = 10.0
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"
    openlibrary_base_url: str = "https://openlibrary.org"
    strict_names: bool = True
    cors_origins: tuple[str, ...] = ("*",)
    host: str = "0.0.0.0"
    port: int = 8000

    def timeout_for(self, adapter: str) -> float:
        """Per-adapter override (``LOOKUP_<NAME>_TIMEOUT``) falling back to the global deadline."""
        return _env_timeout(f"LOOKUP_{adapter.upper()}_TIMEOUT", self.api_timeout)


def get_settings() -> _Settings:
    return _Settings(
        api_timeout=_env_timeout("LOOKUP_API_TIMEOUT", 10.0),
        pokeapi_base_url=os.getenv("LOOKUP_POKEAPI_BASE_URL", "https://pokeapi.co/api/v2").rstrip("/"),
        openlibrary_base_url=os.getenv("LOOKUP_OPENLIBRARY_BASE_URL", "https://openlibrary.org").rstrip("/"),
        strict_names=_env_flag("LOOKUP_STRICT_NAMES", "1"),
        cors_origins=tuple(o.strip() for o in os.getenv("LOOKUP_CORS_ORIGINS", "*").split(",") if o.strip()),
        host=os.getenv("LOOKUP_HOST", "0.0.0.0"),
        port=int(os.getenv("LOOKUP_PORT", "8000")),
    )


__all__ = ["get_settings", "_Settings"]

"""Base API adapter for upstream lookup providers.

One thin, testable abstraction for "lookup one entity upstream":
 - Pulls configuration (base URL, timeout) via `get_settings()`
 - Uses structured logging (`get_logger`)
 - Normalizes error handling into `NotFoundError` / `UpstreamError`

Concrete adapters implement `_build_request`, `_is_missing` and `_normalize`
only. Runtime HTTP callable is injectable for deterministic tests.
"""
from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from time import monotonic
from typing import Any, Protocol

import requests
from pydantic import BaseModel
from pydantic import ValidationError as PayloadError

from app_logging import get_logger
from config import _Settings, get_settings
from exceptions import NotFoundError, UpstreamError


class HTTPResponse(Protocol):
    status_code: int

    def json(self) -> Any:  # noqa: D401
        ...


@dataclass(frozen=True)
class BufferedResponse:
    """Fully read upstream response."""

    status_code: int
    content: bytes

    def json(self) -> Any:
        return json.loads(self.content)


class HTTPClient(Protocol):
    def __call__(self, url: str, headers: dict[str, str] | None = None, timeout: float | None = None) -> HTTPResponse:  # noqa: D401,E501
        ...


class APIAdapter(ABC):
    """Abstract base adapter.

    Subclasses describe one upstream: how to build the URL, how to recognise a
    "no match" body and how to map the body onto the response model. The
    public `.fetch()` method provides unified logging + exception discipline.
    """

    name: str = "base"
    base_url: str = ""
    # _Settings attribute holding the configured base URL
    base_url_setting: str | None = None
    # query parameter and labels used in client-facing error messages
    param: str = ""
    entity: str = ""
    upstream: str = ""

    def __init__(self, http: HTTPClient | None = None, *, timeout: float | None = None, settings: _Settings | None = None):
        self._settings = settings or get_settings()
        self._http = http or self._default_http
        self._timeout = timeout if timeout is not None else self._settings.timeout_for(self.name)
        if self.base_url_setting:
            self.base_url = getattr(self._settings, self.base_url_setting, self.base_url)
        self._log = get_logger(f"lookup_proxy.adapters.{self.name}")

    # ----------------- Public API -----------------
    def fetch(self, value: str) -> BaseModel:
        """Look up ``value`` upstream; return the response model.

        Raises:
            NotFoundError: upstream 404 or a body that does not describe a match.
            UpstreamError: transport failure, timeout, unexpected status or body.
        """
        url, headers = self._build_request(value)
        self._log.debug("request", extra={"url": url})
        try:
            response = self._http(url, headers=headers, timeout=self._timeout)
        except Exception as e:  # broad catch to wrap network errors
            self._log.error("fetch_failed", extra={"url": url, "error": str(e)})
            raise UpstreamError(self.name, self.upstream, f"request failed: {e}") from e

        status = response.status_code
        if status == 404:
            self._log.info("not_found", extra={"url": url, "upstream_status": status})
            raise NotFoundError(self.name, self.entity, "upstream returned 404")
        if not 200 <= status < 300:
            self._log.error("fetch_failed", extra={"url": url, "upstream_status": status})
            raise UpstreamError(self.name, self.upstream, f"unexpected status {status}")

        try:
            raw = response.json()
        except ValueError as e:
            self._log.error("fetch_failed", extra={"url": url, "error": f"invalid JSON: {e}"})
            raise UpstreamError(self.name, self.upstream, f"invalid JSON body: {e}") from e
        if not isinstance(raw, dict):
            self._log.error("fetch_failed", extra={"url": url, "error": f"payload type {type(raw).__name__}"})
            raise UpstreamError(self.name, self.upstream, f"unexpected payload type: {type(raw)}")

        if self._is_missing(raw, value):
            self._log.info("not_found", extra={"url": url, "upstream_status": status})
            raise NotFoundError(self.name, self.entity, "no match in upstream body")

        try:
            result = self._normalize(raw, value)
        except PayloadError as e:
            self._log.error("fetch_failed", extra={"url": url, "error": f"malformed payload: {e.error_count()} errors"})
            raise UpstreamError(self.name, self.upstream, f"malformed payload: {e}") from e
        self._log.info("fetched", extra={"url": url, "status": "ok"})
        return result

    # ----------------- Overridables -----------------
    @abstractmethod
    def _build_request(self, value: str) -> tuple[str, dict[str, str] | None]:
        """Return (url, headers). The value is substituted into the URL as-is."""

    @abstractmethod
    def _is_missing(self, raw: dict[str, Any], value: str) -> bool:
        """True when a successful body describes no match."""

    @abstractmethod
    def _normalize(self, raw: dict[str, Any], value: str) -> BaseModel:
        """Map the upstream body onto the response model, applying defaults."""

    # Default HTTP client using requests. The requests timeout bounds each
    # connect/read; the body is streamed so the whole exchange is bounded too.
    def _default_http(self, url: str, headers: dict[str, str] | None = None, timeout: float | None = None) -> BufferedResponse:  # noqa: D401,E501
        deadline = monotonic() + timeout if timeout else None
        with requests.get(url, headers=headers, timeout=timeout, stream=True) as r:
            content = bytearray()
            for chunk in r.iter_content(chunk_size=8192):
                content.extend(chunk)
                if deadline is not None and monotonic() > deadline:
                    raise requests.Timeout(f"deadline of {timeout}s exceeded reading {url}")
            return BufferedResponse(status_code=r.status_code, content=bytes(content))


__all__ = ["APIAdapter", "BufferedResponse", "HTTPClient", "HTTPResponse"]

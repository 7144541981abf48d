"""Open Library Books API adapter: book lookup by ISBN.

Endpoint: GET {base_url}/api/books?bibkeys=ISBN:{isbn}&format=json&jscmd=data

The API answers 200 with ``{}`` when nothing matches, and otherwise keys the
record by the bibkey exactly as requested (``ISBN:<isbn>``).

Env vars: LOOKUP_OPENLIBRARY_BASE_URL, LOOKUP_OPENLIBRARY_TIMEOUT
"""
from __future__ import annotations

from typing import Any

from models.schemas import BookInfo, BookPayload

from .base import APIAdapter


class OpenLibraryAdapter(APIAdapter):
    name = "openlibrary"
    base_url = "https://openlibrary.org"
    base_url_setting = "openlibrary_base_url"
    param = "isbn"
    entity = "Book"
    upstream = "Open Library"

    @staticmethod
    def bibkey(isbn: str) -> str:
        return f"ISBN:{isbn}"

    def _build_request(self, value: str):  # noqa: D401
        url = f"{self.base_url}/api/books?bibkeys={self.bibkey(value)}&format=json&jscmd=data"
        return url, {"Accept": "application/json"}

    def _is_missing(self, raw: dict[str, Any], value: str) -> bool:
        entry = raw.get(self.bibkey(value))
        if entry is None:
            return True
        # non-object entries fall through to _normalize and surface as malformed
        return isinstance(entry, dict) and entry.get("title") in (None, "")

    def _normalize(self, raw: dict[str, Any], value: str) -> BookInfo:  # noqa: D401
        payload = BookPayload.model_validate(raw[self.bibkey(value)])

        author = "Unknown"
        if payload.authors and payload.authors[0].name is not None:
            author = payload.authors[0].name

        return BookInfo(
            title=payload.title,
            author=author,
            # 0 pages reported upstream is kept as 0, not treated as absent
            pages=payload.number_of_pages if payload.number_of_pages is not None else 0,
            publish_date=payload.publish_date if payload.publish_date is not None else "Unknown",
        )


__all__ = ["OpenLibraryAdapter"]

"""
Lookup routes: validate one query parameter, fetch once upstream, reshape.

Both routes run the same pipeline; what differs is the adapter, which carries
the URL template, the not-found predicate and the field mapping.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from adapters import APIAdapter, get_adapter
from config import get_settings
from models.schemas import BookInfo, ErrorResponse, PokemonInfo
from validation import validate_param

router = APIRouter(tags=["lookup"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed or missing parameter"},
    404: {"model": ErrorResponse, "description": "No match upstream"},
    502: {"model": ErrorResponse, "description": "Upstream unreachable or invalid"},
}


def get_pokeapi_adapter() -> APIAdapter:
    return get_adapter("pokeapi")


def get_openlibrary_adapter() -> APIAdapter:
    return get_adapter("openlibrary")


async def lookup(adapter: APIAdapter, raw: Optional[str]) -> BaseModel:
    """Run validate -> fetch -> transform for one request.

    Errors propagate as ``LookupServiceError`` subclasses and are rendered by
    the application's exception handler.
    """
    value = validate_param(adapter.param, raw, strict=get_settings().strict_names)
    # the single suspension point of the request
    return await run_in_threadpool(adapter.fetch, value)


@router.get("/pokemon-info", response_model=PokemonInfo, responses=_ERROR_RESPONSES)
async def pokemon_info(
    name: Optional[str] = Query(None, description="Pokémon name (letters, digits, hyphen)"),
    adapter: APIAdapter = Depends(get_pokeapi_adapter),
):
    """Summarize a Pokémon from PokéAPI."""
    return await lookup(adapter, name)


@router.get("/book-info", response_model=BookInfo, responses=_ERROR_RESPONSES)
async def book_info(
    isbn: Optional[str] = Query(None, description="ISBN-10 or ISBN-13, optional trailing X"),
    adapter: APIAdapter = Depends(get_openlibrary_adapter),
):
    """Summarize a book from Open Library."""
    return await lookup(adapter, isbn)

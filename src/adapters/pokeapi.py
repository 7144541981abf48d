"""PokéAPI adapter: Pokémon lookup by name.

Endpoint: GET {base_url}/pokemon/{name}
Env vars: LOOKUP_POKEAPI_BASE_URL, LOOKUP_POKEAPI_TIMEOUT (no API key required)
"""
from __future__ import annotations

from typing import Any

from models.schemas import PokemonInfo, PokemonPayload

from .base import APIAdapter

UNKNOWN = "unknown"


class PokeAPIAdapter(APIAdapter):
    name = "pokeapi"
    base_url = "https://pokeapi.co/api/v2"
    base_url_setting = "pokeapi_base_url"
    param = "name"
    entity = "Pokemon"
    upstream = "PokéAPI"

    def _build_request(self, value: str):  # noqa: D401
        return f"{self.base_url}/pokemon/{value}", {"Accept": "application/json"}

    def _is_missing(self, raw: dict[str, Any], value: str) -> bool:
        return not raw or raw.get("name") in (None, "")

    def _normalize(self, raw: dict[str, Any], value: str) -> PokemonInfo:  # noqa: D401
        payload = PokemonPayload.model_validate(raw)

        # first slot only; a slot without its nested resource counts as absent
        pokemon_type = UNKNOWN
        if payload.types:
            slot = payload.types[0].type
            if slot is not None and slot.name is not None:
                pokemon_type = slot.name

        first_ability = UNKNOWN
        if payload.abilities:
            slot = payload.abilities[0].ability
            if slot is not None and slot.name is not None:
                first_ability = slot.name

        return PokemonInfo(
            name=payload.name,
            type=pokemon_type,
            height=payload.height if payload.height is not None else 0,
            weight=payload.weight if payload.weight is not None else 0,
            first_ability=first_ability,
        )


__all__ = ["PokeAPIAdapter"]

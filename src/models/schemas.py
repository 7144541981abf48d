"""Pydantic schemas for upstream payloads and the service's response bodies."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Upstream(BaseModel):
	"""Typed view of an upstream body; unknown keys are ignored."""
	model_config = ConfigDict(extra="ignore")


# ----------------- PokéAPI -----------------
class NamedResource(_Upstream):
	name: Optional[str] = None


class TypeSlot(_Upstream):
	type: Optional[NamedResource] = None


class AbilitySlot(_Upstream):
	ability: Optional[NamedResource] = None


class PokemonPayload(_Upstream):
	name: Optional[str] = None
	height: Optional[Union[int, float]] = None
	weight: Optional[Union[int, float]] = None
	types: Optional[List[TypeSlot]] = None
	abilities: Optional[List[AbilitySlot]] = None


# ----------------- Open Library -----------------
class BookAuthor(_Upstream):
	name: Optional[str] = None


class BookPayload(_Upstream):
	title: Optional[str] = None
	authors: Optional[List[BookAuthor]] = None
	number_of_pages: Optional[int] = None
	publish_date: Optional[str] = None


# ----------------- Responses -----------------
class PokemonInfo(BaseModel):
	"""Pokémon summary returned by ``GET /pokemon-info``."""
	model_config = ConfigDict(frozen=True)

	name: str
	type: str = "unknown"
	height: Union[int, float] = 0
	weight: Union[int, float] = 0
	first_ability: str = "unknown"


class BookInfo(BaseModel):
	"""Book summary returned by ``GET /book-info``."""
	model_config = ConfigDict(frozen=True)

	title: str
	author: str = "Unknown"
	pages: int = 0
	publish_date: str = "Unknown"


class HealthResponse(BaseModel):
	status: str = "ok"


class ErrorResponse(BaseModel):
	error: str = Field(..., description="Fixed message per error kind")


__all__ = [
	"AbilitySlot",
	"BookAuthor",
	"BookInfo",
	"BookPayload",
	"ErrorResponse",
	"HealthResponse",
	"NamedResource",
	"PokemonInfo",
	"PokemonPayload",
	"TypeSlot",
]

"""
Upstream payload and response models
"""

from .schemas import BookInfo, BookPayload, ErrorResponse, HealthResponse, PokemonInfo, PokemonPayload

__all__ = ["BookInfo", "BookPayload", "ErrorResponse", "HealthResponse", "PokemonInfo", "PokemonPayload"]

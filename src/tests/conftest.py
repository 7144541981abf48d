"""Shared fixtures: canned upstream bodies."""
from __future__ import annotations

import pytest


@pytest.fixture
def pikachu_body():
    return {
        "id": 25,
        "name": "pikachu",
        "height": 4,
        "weight": 60,
        "base_experience": 112,
        "types": [{"slot": 1, "type": {"name": "electric", "url": "https://pokeapi.co/api/v2/type/13/"}}],
        "abilities": [
            {"ability": {"name": "static", "url": "https://pokeapi.co/api/v2/ability/9/"}, "is_hidden": False, "slot": 1},
            {"ability": {"name": "lightning-rod", "url": "https://pokeapi.co/api/v2/ability/31/"}, "is_hidden": True, "slot": 3},
        ],
    }


@pytest.fixture
def book_body():
    return {
        "ISBN:0451526538": {
            "url": "https://openlibrary.org/books/OL1017798M/The_adventures_of_Tom_Sawyer",
            "key": "/books/OL1017798M",
            "title": "The adventures of Tom Sawyer",
            "authors": [{"url": "https://openlibrary.org/authors/OL18319A/Mark_Twain", "name": "Mark Twain"}],
            "number_of_pages": 216,
            "publish_date": "1997",
        }
    }

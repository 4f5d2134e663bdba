"""
api/schemas.py
--------------
Request and response bodies for the HTTP API.
"""

from typing import List

from pydantic import BaseModel, Field, StrictInt, StrictStr

from models.pokemon import Pokemon


class PokemonCreate(BaseModel):
    # Strict types: "25" or 25.0 are rejected instead of coerced.
    number: StrictInt = Field(..., description="Catalog number, 1 to 898.")
    name: StrictStr = Field(..., description="Non-empty display name.")
    types: List[StrictStr] = Field(..., description="One or more known types, e.g. ['Electric'].")


class PokemonRead(BaseModel):
    number: int
    name: str
    types: List[str]

    @classmethod
    def from_domain(cls, pokemon: Pokemon) -> "PokemonRead":
        return cls(**pokemon.to_dict())

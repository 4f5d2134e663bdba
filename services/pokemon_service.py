"""
services/pokemon_service.py
---------------------------
Use cases for the pokedex: create, fetch, list and delete.
Raw primitives are validated here before any repository call.
"""

from models.pokemon import Pokemon, PokemonName, PokemonNumber, PokemonTypes
from repositories.pokemon_repo import PokemonRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class PokemonService:
    """
    Thin orchestration over a PokemonRepository.

    Raises `models.pokemon.ValidationError` for bad input and lets the
    repository exceptions propagate unchanged.
    """

    def __init__(self, repo: PokemonRepository):
        self.repo = repo

    def create(self, number: int, name: str, types: list[str]) -> Pokemon:
        """Validate the three fields, then store the pokemon."""
        parsed_number = PokemonNumber.parse(number)
        parsed_name = PokemonName.parse(name)
        parsed_types = PokemonTypes.parse(types)
        return self.repo.insert(parsed_number, parsed_name, parsed_types)

    def fetch(self, number: int) -> Pokemon:
        return self.repo.fetch_one(PokemonNumber.parse(number))

    def fetch_all(self) -> list[Pokemon]:
        return self.repo.fetch_all()

    def delete(self, number: int) -> None:
        self.repo.delete(PokemonNumber.parse(number))

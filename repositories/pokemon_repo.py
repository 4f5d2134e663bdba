"""
repositories/pokemon_repo.py
----------------------------
The storage contract shared by the in-memory and SQL repositories.
"""

from abc import ABC, abstractmethod

from models.pokemon import Pokemon, PokemonName, PokemonNumber, PokemonTypes


class PokemonRepository(ABC):
    """
    Stores pokemons keyed by number.

    Implementations must be safe to share between threads. Every method
    either returns its documented value or raises one of the exceptions
    from `repositories.errors`.
    """

    @abstractmethod
    def insert(self, number: PokemonNumber, name: PokemonName, types: PokemonTypes) -> Pokemon:
        """
        Store a new pokemon.

        Returns:
            The stored Pokemon.

        Raises:
            ConflictError: If the number is already stored.
            UnknownError: On any storage failure.
        """

    @abstractmethod
    def fetch_all(self) -> list[Pokemon]:
        """
        Return every stored pokemon, ordered by ascending number.

        Raises:
            UnknownError: On any storage failure.
        """

    @abstractmethod
    def fetch_one(self, number: PokemonNumber) -> Pokemon:
        """
        Raises:
            NotFoundError: If no pokemon has this number.
            UnknownError: On any storage failure.
        """

    @abstractmethod
    def delete(self, number: PokemonNumber) -> None:
        """
        Raises:
            NotFoundError: If no pokemon has this number.
            UnknownError: On any storage failure.
        """

"""
repositories/memory_repo.py
---------------------------
Non-persistent repository backed by a lock-guarded list.
Used as the default backend and in tests.
"""

import threading
from contextlib import contextmanager
from typing import Optional

from config import LOCK_TIMEOUT_SECONDS
from models.pokemon import Pokemon, PokemonName, PokemonNumber, PokemonTypes
from repositories.errors import ConflictError, NotFoundError, RepositoryError, UnknownError
from repositories.pokemon_repo import PokemonRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class InMemoryPokemonRepository(PokemonRepository):
    """
    Keeps pokemons in insertion order behind a single exclusive lock.

    A repository built with `with_error()` fails every call with
    UnknownError and never touches its data.
    """

    def __init__(self, lock_timeout: Optional[float] = None, error: bool = False):
        self._data: list[Pokemon] = []
        self._lock = threading.Lock()
        self._lock_timeout = LOCK_TIMEOUT_SECONDS if lock_timeout is None else lock_timeout
        self._error = error

    @classmethod
    def with_error(cls, lock_timeout: Optional[float] = None) -> "InMemoryPokemonRepository":
        """Build a repository whose every operation raises UnknownError."""
        return cls(lock_timeout=lock_timeout, error=True)

    @contextmanager
    def _locked(self):
        """Hold the data lock, turning acquisition or internal failures into UnknownError."""
        if self._error:
            raise UnknownError("Repository is in error mode")
        if not self._lock.acquire(timeout=self._lock_timeout):
            logger.error("Timed out waiting for the in-memory repository lock")
            raise UnknownError("Could not acquire repository lock")
        try:
            yield self._data
        except RepositoryError:
            raise
        except Exception as e:
            logger.error(f"In-memory repository failure: {e}")
            raise UnknownError(str(e)) from e
        finally:
            self._lock.release()

    # ── CREATE ────────────────────────────────────────────

    def insert(self, number: PokemonNumber, name: PokemonName, types: PokemonTypes) -> Pokemon:
        with self._locked() as data:
            if any(p.number == number for p in data):
                raise ConflictError(f"Pokemon #{number.value} already exists")
            pokemon = Pokemon(number=number, name=name, types=types)
            data.append(pokemon)
        logger.info(f"Inserted pokemon #{number.value}")
        return pokemon

    # ── READ ──────────────────────────────────────────────

    def fetch_all(self) -> list[Pokemon]:
        with self._locked() as data:
            snapshot = list(data)
        return sorted(snapshot, key=lambda p: p.number.value)

    def fetch_one(self, number: PokemonNumber) -> Pokemon:
        with self._locked() as data:
            for pokemon in data:
                if pokemon.number == number:
                    return pokemon
        raise NotFoundError(f"Pokemon #{number.value} does not exist")

    # ── DELETE ────────────────────────────────────────────

    def delete(self, number: PokemonNumber) -> None:
        with self._locked() as data:
            for index, pokemon in enumerate(data):
                if pokemon.number == number:
                    del data[index]
                    break
            else:
                raise NotFoundError(f"Pokemon #{number.value} does not exist")
        logger.info(f"Deleted pokemon #{number.value}")

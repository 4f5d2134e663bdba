"""Unit tests specific to InMemoryPokemonRepository."""

import pytest

from models.pokemon import PokemonNumber
from repositories.errors import ConflictError, UnknownError
from repositories.memory_repo import InMemoryPokemonRepository
from repositories.pokemon_repo import PokemonRepository


class TestInMemoryRepositoryProtocol:
    """Tests for contract compliance."""

    def test_implements_contract(self) -> None:
        assert isinstance(InMemoryPokemonRepository(), PokemonRepository)


class TestErrorMode:
    """A repository built with with_error() fails every call."""

    @pytest.fixture
    def broken(self) -> InMemoryPokemonRepository:
        return InMemoryPokemonRepository.with_error()

    def test_insert_fails(self, broken, pikachu) -> None:
        with pytest.raises(UnknownError):
            broken.insert(*pikachu)

    def test_fetch_all_fails(self, broken) -> None:
        with pytest.raises(UnknownError):
            broken.fetch_all()

    def test_fetch_one_fails(self, broken) -> None:
        with pytest.raises(UnknownError):
            broken.fetch_one(PokemonNumber.parse(25))

    def test_delete_fails(self, broken) -> None:
        with pytest.raises(UnknownError):
            broken.delete(PokemonNumber.parse(25))

    def test_never_mutates_state(self, broken, pikachu) -> None:
        with pytest.raises(UnknownError):
            broken.insert(*pikachu)

        assert broken._data == []


class TestLockFailure:
    """Lock acquisition failures are reported, not raised as crashes."""

    def test_lock_timeout_raises_unknown(self, pikachu) -> None:
        repo = InMemoryPokemonRepository(lock_timeout=0.01)
        repo._lock.acquire()
        try:
            with pytest.raises(UnknownError):
                repo.insert(*pikachu)
        finally:
            repo._lock.release()

        assert repo.fetch_all() == []

    def test_lock_is_released_after_errors(self, pikachu) -> None:
        repo = InMemoryPokemonRepository(lock_timeout=0.01)
        repo.insert(*pikachu)

        with pytest.raises(ConflictError):
            repo.insert(*pikachu)

        assert len(repo.fetch_all()) == 1


class TestFetchAllOrdering:
    """fetch_all sorts a copy and leaves stored order untouched."""

    def test_stored_order_is_untouched(self, memory_repo, pikachu, charmander) -> None:
        memory_repo.insert(*pikachu)
        memory_repo.insert(*charmander)

        memory_repo.fetch_all()

        assert [p.number.value for p in memory_repo._data] == [25, 4]

    def test_returned_list_is_a_copy(self, memory_repo, pikachu) -> None:
        memory_repo.insert(*pikachu)

        memory_repo.fetch_all().clear()

        assert len(memory_repo.fetch_all()) == 1

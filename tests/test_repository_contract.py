"""Behaviour every PokemonRepository must share (in-memory and SQLite)."""

import threading

import pytest

from models.pokemon import PokemonName, PokemonNumber, PokemonTypes
from repositories.errors import ConflictError, NotFoundError
from repositories.pokemon_repo import PokemonRepository


class TestInsert:
    """Tests for insert."""

    def test_insert_returns_stored_pokemon(self, repo: PokemonRepository, pikachu) -> None:
        stored = repo.insert(*pikachu)
        assert stored.to_dict() == {"number": 25, "name": "Pikachu", "types": ["Electric"]}

    def test_duplicate_number_conflicts_and_keeps_first(self, repo: PokemonRepository, pikachu) -> None:
        repo.insert(*pikachu)

        with pytest.raises(ConflictError):
            repo.insert(pikachu[0], PokemonName.parse("Raichu"), PokemonTypes.parse(["Fire"]))

        assert repo.fetch_one(pikachu[0]).name.value == "Pikachu"
        assert len(repo.fetch_all()) == 1


class TestFetch:
    """Tests for fetch_one and fetch_all."""

    def test_round_trip(self, repo: PokemonRepository, pikachu) -> None:
        repo.insert(*pikachu)

        fetched = repo.fetch_one(PokemonNumber.parse(25))

        assert fetched.name == pikachu[1]
        assert fetched.types == pikachu[2]

    def test_round_trip_keeps_type_order(self, repo: PokemonRepository) -> None:
        number = PokemonNumber.parse(6)
        repo.insert(number, PokemonName.parse("Charizard"), PokemonTypes.parse(["Fire", "Electric"]))

        assert repo.fetch_one(number).types.names() == ["Fire", "Electric"]

    def test_fetch_one_missing_raises_not_found(self, repo: PokemonRepository) -> None:
        with pytest.raises(NotFoundError):
            repo.fetch_one(PokemonNumber.parse(25))

    def test_fetch_all_empty_store(self, repo: PokemonRepository) -> None:
        assert repo.fetch_all() == []

    def test_fetch_all_orders_by_number(self, repo: PokemonRepository, pikachu, charmander) -> None:
        repo.insert(*pikachu)
        repo.insert(*charmander)

        assert [p.number.value for p in repo.fetch_all()] == [4, 25]


class TestDelete:
    """Tests for delete."""

    def test_delete_missing_raises_not_found(self, repo: PokemonRepository) -> None:
        with pytest.raises(NotFoundError):
            repo.delete(PokemonNumber.parse(25))

    def test_delete_removes_pokemon(self, repo: PokemonRepository, pikachu, charmander) -> None:
        repo.insert(*pikachu)
        repo.insert(*charmander)

        repo.delete(pikachu[0])

        with pytest.raises(NotFoundError):
            repo.fetch_one(pikachu[0])
        assert [p.number.value for p in repo.fetch_all()] == [4]

    def test_number_can_be_reused_after_delete(self, repo: PokemonRepository, pikachu) -> None:
        repo.insert(*pikachu)
        repo.delete(pikachu[0])

        stored = repo.insert(pikachu[0], PokemonName.parse("Pichu"), pikachu[2])

        assert repo.fetch_one(pikachu[0]) == stored


class TestConcurrency:
    """Concurrent callers share one instance safely."""

    def test_concurrent_inserts_of_distinct_numbers(self, repo: PokemonRepository) -> None:
        errors = []

        def worker(n: int) -> None:
            try:
                repo.insert(
                    PokemonNumber.parse(n),
                    PokemonName.parse(f"Pokemon {n}"),
                    PokemonTypes.parse(["Electric"]),
                )
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(1, 41)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert [p.number.value for p in repo.fetch_all()] == list(range(1, 41))

    def test_concurrent_inserts_of_same_number_admit_one(self, repo: PokemonRepository, pikachu) -> None:
        outcomes = []
        lock = threading.Lock()

        def worker() -> None:
            try:
                repo.insert(*pikachu)
                result = "ok"
            except ConflictError:
                result = "conflict"
            with lock:
                outcomes.append(result)

        threads = [threading.Thread(target=worker) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes.count("ok") == 1
        assert outcomes.count("conflict") == 9

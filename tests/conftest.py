"""Shared fixtures for the pokedex test suite."""

import pytest

from db.connection import open_sqlite
from db.init_db import create_tables
from models.pokemon import PokemonName, PokemonNumber, PokemonTypes
from repositories.memory_repo import InMemoryPokemonRepository
from repositories.sql_repo import SqlPokemonRepository


@pytest.fixture
def pikachu() -> tuple[PokemonNumber, PokemonName, PokemonTypes]:
    return (
        PokemonNumber.parse(25),
        PokemonName.parse("Pikachu"),
        PokemonTypes.parse(["Electric"]),
    )


@pytest.fixture
def charmander() -> tuple[PokemonNumber, PokemonName, PokemonTypes]:
    return (
        PokemonNumber.parse(4),
        PokemonName.parse("Charmander"),
        PokemonTypes.parse(["Fire"]),
    )


@pytest.fixture
def memory_repo() -> InMemoryPokemonRepository:
    return InMemoryPokemonRepository()


@pytest.fixture
def sqlite_db(tmp_path):
    db = open_sqlite(str(tmp_path / "pokedex.sqlite"))
    create_tables(db)
    yield db
    db.close()


@pytest.fixture
def sql_repo(sqlite_db) -> SqlPokemonRepository:
    return SqlPokemonRepository(sqlite_db)


@pytest.fixture(params=["memory", "sqlite"])
def repo(request, tmp_path):
    """Each contract test runs against both implementations."""
    if request.param == "memory":
        yield InMemoryPokemonRepository()
        return
    db = open_sqlite(str(tmp_path / "contract.sqlite"))
    create_tables(db)
    yield SqlPokemonRepository(db)
    db.close()

"""
repositories/sql_repo.py
------------------------
Relational repository over the `pokemons` and `types` tables.
Works on both SQLite and PostgreSQL through `db.connection.Database`.
"""

import threading
from contextlib import contextmanager
from typing import Optional

from config import LOCK_TIMEOUT_SECONDS
from db.connection import Database, transaction
from models.pokemon import (
    Pokemon,
    PokemonName,
    PokemonNumber,
    PokemonTypes,
    ValidationError,
)
from repositories.errors import ConflictError, NotFoundError, UnknownError
from repositories.pokemon_repo import PokemonRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class SqlPokemonRepository(PokemonRepository):
    """
    Stores pokemons in two related tables.

    The connection is shared between callers and guarded by one lock;
    every call holds it for its full duration, including the insert
    transaction.
    """

    def __init__(self, db: Database, lock_timeout: Optional[float] = None):
        self.db = db
        self._lock = threading.Lock()
        self._lock_timeout = LOCK_TIMEOUT_SECONDS if lock_timeout is None else lock_timeout

    @contextmanager
    def _connection(self):
        if not self._lock.acquire(timeout=self._lock_timeout):
            logger.error("Timed out waiting for the database connection lock")
            raise UnknownError("Could not acquire database lock")
        try:
            yield self.db
        finally:
            self._lock.release()

    # ── CREATE ────────────────────────────────────────────

    def insert(self, number: PokemonNumber, name: PokemonName, types: PokemonTypes) -> Pokemon:
        """Insert the pokemon row and its type rows in one transaction."""
        with self._connection() as db:
            try:
                with transaction(db) as cur:
                    try:
                        cur.execute(
                            db.sql("INSERT INTO pokemons (number, name) VALUES (%s, %s);"),
                            (number.value, name.value),
                        )
                    except db.errors as e:
                        if db.is_unique_violation(e):
                            raise ConflictError(f"Pokemon #{number.value} already exists") from e
                        raise
                    for position, pokemon_type in enumerate(types):
                        cur.execute(
                            db.sql(
                                "INSERT INTO types (pokemon_number, position, name) "
                                "VALUES (%s, %s, %s);"
                            ),
                            (number.value, position, pokemon_type.value),
                        )
            except db.errors as e:
                logger.error(f"Failed to insert pokemon #{number.value}: {e}")
                raise UnknownError(str(e)) from e
        logger.info(f"Inserted pokemon #{number.value}")
        return Pokemon(number=number, name=name, types=types)

    # ── READ ──────────────────────────────────────────────

    def fetch_all(self) -> list[Pokemon]:
        return self._fetch()

    def fetch_one(self, number: PokemonNumber) -> Pokemon:
        pokemons = self._fetch(number)
        if not pokemons:
            raise NotFoundError(f"Pokemon #{number.value} does not exist")
        return pokemons[0]

    def _fetch(self, number: Optional[PokemonNumber] = None) -> list[Pokemon]:
        """Load pokemon rows (optionally one number) and their types."""
        sql = "SELECT number, name FROM pokemons"
        params: tuple = ()
        if number is not None:
            sql += " WHERE number = %s"
            params = (number.value,)
        sql += " ORDER BY number;"

        with self._connection() as db:
            try:
                with transaction(db) as cur:
                    cur.execute(db.sql(sql), params)
                    rows = cur.fetchall()
                    result = []
                    for row in rows:
                        cur.execute(
                            db.sql(
                                "SELECT name FROM types WHERE pokemon_number = %s "
                                "ORDER BY position;"
                            ),
                            (row[0],),
                        )
                        type_names = [r[0] for r in cur.fetchall()]
                        result.append(self._row_to_pokemon(row, type_names))
                    return result
            except db.errors as e:
                logger.error(f"Failed to fetch pokemons: {e}")
                raise UnknownError(str(e)) from e

    # ── DELETE ────────────────────────────────────────────

    def delete(self, number: PokemonNumber) -> None:
        """Delete one pokemon; its type rows go through ON DELETE CASCADE."""
        with self._connection() as db:
            try:
                with transaction(db) as cur:
                    cur.execute(db.sql("DELETE FROM pokemons WHERE number = %s;"), (number.value,))
                    deleted = cur.rowcount > 0
            except db.errors as e:
                logger.error(f"Failed to delete pokemon #{number.value}: {e}")
                raise UnknownError(str(e)) from e
        if not deleted:
            raise NotFoundError(f"Pokemon #{number.value} does not exist")
        logger.info(f"Deleted pokemon #{number.value}")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_pokemon(row: tuple, type_names: list[str]) -> Pokemon:
        """Re-validate a stored row; invalid stored data is a storage fault."""
        try:
            return Pokemon(
                number=PokemonNumber.parse(row[0]),
                name=PokemonName.parse(row[1]),
                types=PokemonTypes.parse(type_names),
            )
        except ValidationError as e:
            logger.error(f"Stored pokemon #{row[0]} failed validation: {e}")
            raise UnknownError(f"Malformed stored pokemon #{row[0]}") from e

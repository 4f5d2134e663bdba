"""
db/init_db.py
-------------
Creates the pokedex schema if it does not already exist.
Run this module directly to initialize a fresh SQLite file:
    python -m db.init_db [path]
"""

from db.connection import Database, transaction
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_STATEMENTS = (
    # One row per pokemon
    """
    CREATE TABLE IF NOT EXISTS pokemons (
        number          INTEGER PRIMARY KEY,
        name            TEXT NOT NULL
    )
    """,
    # One row per (pokemon, type); position keeps the declared order
    """
    CREATE TABLE IF NOT EXISTS types (
        pokemon_number  INTEGER NOT NULL REFERENCES pokemons(number) ON DELETE CASCADE,
        position        INTEGER NOT NULL,
        name            TEXT NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_types_pokemon ON types(pokemon_number)",
)


def create_tables(db: Database) -> None:
    """
    Execute the schema statements.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        with transaction(db) as cur:
            for statement in SCHEMA_STATEMENTS:
                cur.execute(statement)
        logger.info("Database schema initialized successfully.")
    except db.errors as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    import sys

    from config import SQLITE_PATH
    from db.connection import open_sqlite

    database = open_sqlite(sys.argv[1] if len(sys.argv) > 1 else SQLITE_PATH)
    create_tables(database)
    database.close()
    print("Database schema created successfully.")

"""
main.py
-------
Entry point for the pokedex backend.

Responsibilities:
    - Build the one repository instance shared by every caller.
    - Serve the HTTP API (default) or run the Telegram bot (--bot).
"""

import argparse

import uvicorn
from telegram import BotCommand
from telegram.ext import Application, CommandHandler

from config import (
    API_HOST,
    API_PORT,
    DATABASE_URL,
    REPOSITORY_BACKEND,
    SQLITE_PATH,
    TELEGRAM_BOT_TOKEN,
)
from api.app import create_app
from db.connection import open_postgres, open_sqlite
from db.init_db import create_tables
from handlers.pokemon_handler import (
    SERVICE_KEY,
    all_command,
    create_command,
    delete_command,
    fetch_command,
)
from handlers.start_handler import help_command, start_command
from repositories.memory_repo import InMemoryPokemonRepository
from repositories.pokemon_repo import PokemonRepository
from repositories.sql_repo import SqlPokemonRepository
from services.pokemon_service import PokemonService
from utils.logger import get_logger

logger = get_logger(__name__)


def build_repository(backend: str, sqlite_path: str = SQLITE_PATH,
                     database_url: str = DATABASE_URL) -> PokemonRepository:
    """
    Create the repository for a backend name (memory, sqlite or postgres).

    SQL backends get their schema created before use.
    """
    if backend == "sqlite":
        db = open_sqlite(sqlite_path)
    elif backend == "postgres":
        db = open_postgres(database_url)
    elif backend == "memory":
        logger.info("Using the in-memory repository.")
        return InMemoryPokemonRepository()
    else:
        raise ValueError(f"Unknown repository backend: {backend!r}")

    create_tables(db)
    return SqlPokemonRepository(db)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("start", "Start the bot"),
        BotCommand("help", "Show the commands"),
        BotCommand("create", "Add a pokemon"),
        BotCommand("fetch", "Show a pokemon"),
        BotCommand("all", "List every pokemon"),
        BotCommand("delete", "Remove a pokemon"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


def run_bot(repo: PokemonRepository) -> None:
    """Run the Telegram bot until interrupted."""
    app = Application.builder().token(TELEGRAM_BOT_TOKEN).post_init(set_bot_commands).build()
    app.bot_data[SERVICE_KEY] = PokemonService(repo)

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(CommandHandler("create", create_command))
    app.add_handler(CommandHandler("fetch", fetch_command))
    app.add_handler(CommandHandler("all", all_command))
    app.add_handler(CommandHandler("delete", delete_command))

    logger.info("Pokedex bot is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message"])


def run_api(repo: PokemonRepository) -> None:
    """Serve the HTTP API until interrupted."""
    logger.info(f"Serving the HTTP API on {API_HOST}:{API_PORT}")
    uvicorn.run(create_app(repo), host=API_HOST, port=API_PORT)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pokedex", description="Pokedex backend")
    parser.add_argument("--bot", action="store_true", help="Run the Telegram bot instead of the HTTP API")
    storage = parser.add_mutually_exclusive_group()
    storage.add_argument("--sqlite", metavar="PATH", help="Store pokemons in an SQLite file")
    storage.add_argument("--postgres", metavar="URL", help="Store pokemons in PostgreSQL")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """Build the repository and start the chosen front end."""
    args = parse_args(argv)

    if args.sqlite:
        repo = build_repository("sqlite", sqlite_path=args.sqlite)
    elif args.postgres:
        repo = build_repository("postgres", database_url=args.postgres)
    else:
        repo = build_repository(REPOSITORY_BACKEND)

    if args.bot:
        run_bot(repo)
    else:
        run_api(repo)


if __name__ == "__main__":
    main()

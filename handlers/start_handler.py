"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
"""

from telegram import Update
from telegram.ext import ContextTypes

from models.pokemon import PokemonType
from utils.logger import get_logger

logger = get_logger(__name__)

HELP_TEXT = (
    "Pokedex bot\n\n"
    "Commands:\n"
    "/create <number> <name> <type> [<type> ...] - add a pokemon\n"
    "/fetch <number> - show a pokemon\n"
    "/all - list every pokemon\n"
    "/delete <number> - remove a pokemon\n"
    "/help - show this message\n\n"
    "Known types: " + ", ".join(t.value for t in PokemonType)
)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - greet the user and show the commands."""
    user = update.effective_user
    logger.info(f"User {user.id} ({user.first_name}) started the bot.")
    await update.message.reply_text(f"Hello {user.first_name}!\n\n{HELP_TEXT}")


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show all available commands."""
    await update.message.reply_text(HELP_TEXT)

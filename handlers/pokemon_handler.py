"""
handlers/pokemon_handler.py
---------------------------
Handles the pokedex commands: /create, /fetch, /all and /delete.
Delegates all logic to the PokemonService stored in ``bot_data``.
"""

from telegram import Update
from telegram.ext import ContextTypes

from models.pokemon import ValidationError
from repositories.errors import ConflictError, NotFoundError, UnknownError
from services.pokemon_service import PokemonService
from utils.logger import get_logger

logger = get_logger(__name__)

SERVICE_KEY = "pokemon_service"

INVALID_REQUEST = "The request is invalid"
ALREADY_EXISTS = "The Pokemon already exists"
DOES_NOT_EXIST = "The Pokemon does not exist"
UNKNOWN_ERROR = "An unknown error occurred"
DELETED = "The pokemon has been deleted"
EMPTY_POKEDEX = "The pokedex is empty"


def _service(context: ContextTypes.DEFAULT_TYPE) -> PokemonService:
    return context.bot_data[SERVICE_KEY]


def _parse_number(args: list[str]) -> int:
    """Read the leading number argument; raises ValidationError if missing or not an int."""
    if not args:
        raise ValidationError("Missing pokemon number")
    try:
        return int(args[0])
    except ValueError:
        raise ValidationError(f"Not a number: {args[0]!r}") from None


async def create_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /create - store a new pokemon.

    Usage:
        /create 25 Pikachu Electric
    """
    args = context.args or []
    try:
        number = _parse_number(args)
        if len(args) < 3:
            raise ValidationError("Expected a name and at least one type")
        pokemon = _service(context).create(number, args[1], args[2:])
    except ValidationError:
        await update.message.reply_text(INVALID_REQUEST)
        return
    except ConflictError:
        await update.message.reply_text(ALREADY_EXISTS)
        return
    except UnknownError:
        await update.message.reply_text(UNKNOWN_ERROR)
        return

    logger.info(f"User {update.effective_user.id} created pokemon #{pokemon.number.value}")
    await update.message.reply_text(f"Created {pokemon}")


async def fetch_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /fetch <number> - show one pokemon."""
    try:
        pokemon = _service(context).fetch(_parse_number(context.args or []))
    except ValidationError:
        await update.message.reply_text(INVALID_REQUEST)
        return
    except NotFoundError:
        await update.message.reply_text(DOES_NOT_EXIST)
        return
    except UnknownError:
        await update.message.reply_text(UNKNOWN_ERROR)
        return

    await update.message.reply_text(str(pokemon))


async def all_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /all - list every pokemon by number."""
    try:
        pokemons = _service(context).fetch_all()
    except UnknownError:
        await update.message.reply_text(UNKNOWN_ERROR)
        return

    if not pokemons:
        await update.message.reply_text(EMPTY_POKEDEX)
        return
    await update.message.reply_text("\n".join(str(p) for p in pokemons))


async def delete_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /delete <number> - remove a pokemon."""
    try:
        _service(context).delete(_parse_number(context.args or []))
    except ValidationError:
        await update.message.reply_text(INVALID_REQUEST)
        return
    except NotFoundError:
        await update.message.reply_text(DOES_NOT_EXIST)
        return
    except UnknownError:
        await update.message.reply_text(UNKNOWN_ERROR)
        return

    await update.message.reply_text(DELETED)

"""
api/app.py
----------
HTTP API for the pokedex.

Intended usage (see main.py):
    uvicorn.run(create_app(repo), host=API_HOST, port=API_PORT)
"""

from typing import List

from fastapi import APIRouter, Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.schemas import PokemonCreate, PokemonRead
from models.pokemon import ValidationError
from repositories.errors import ConflictError, NotFoundError, UnknownError
from repositories.pokemon_repo import PokemonRepository
from services.pokemon_service import PokemonService
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["pokemons"])


def get_pokemon_service(request: Request) -> PokemonService:
    """Dependency returning the service bound to this app instance."""
    return request.app.state.pokemon_service


@router.get("/health", summary="Health check")
def health() -> str:
    return "Gotta catch them all!"


@router.post("/", response_model=PokemonRead, summary="Create a pokemon")
def create_pokemon(
    payload: PokemonCreate,
    service: PokemonService = Depends(get_pokemon_service),
) -> PokemonRead:
    pokemon = service.create(payload.number, payload.name, payload.types)
    return PokemonRead.from_domain(pokemon)


@router.get("/", response_model=List[PokemonRead], summary="List pokemons")
def fetch_all_pokemons(
    service: PokemonService = Depends(get_pokemon_service),
) -> List[PokemonRead]:
    return [PokemonRead.from_domain(p) for p in service.fetch_all()]


@router.get("/{number}", response_model=PokemonRead, summary="Get a single pokemon")
def fetch_pokemon(
    number: int,
    service: PokemonService = Depends(get_pokemon_service),
) -> PokemonRead:
    return PokemonRead.from_domain(service.fetch(number))


@router.delete("/{number}", summary="Delete a pokemon")
def delete_pokemon(
    number: int,
    service: PokemonService = Depends(get_pokemon_service),
) -> Response:
    service.delete(number)
    return Response(status_code=status.HTTP_200_OK)


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------

_STATUS_BY_ERROR = {
    RequestValidationError: status.HTTP_400_BAD_REQUEST,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    UnknownError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_handler(status_code: int):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    return handler


def create_app(repo: PokemonRepository) -> FastAPI:
    """
    Build the FastAPI application around one shared repository.
    """
    app = FastAPI(title="Pokedex HTTP API", version="0.1.0")
    app.state.pokemon_service = PokemonService(repo)
    app.include_router(router)
    for error, status_code in _STATUS_BY_ERROR.items():
        app.add_exception_handler(error, _error_handler(status_code))
    return app

"""
repositories/errors.py
----------------------
Exceptions raised by every PokemonRepository implementation.
Callers map these onto their own boundary (HTTP status, bot reply).
"""


class RepositoryError(Exception):
    """Base class for repository failures."""


class ConflictError(RepositoryError):
    """Raised by insert when the number is already stored."""


class NotFoundError(RepositoryError):
    """Raised by fetch_one and delete when the number is absent."""


class UnknownError(RepositoryError):
    """Raised on storage malfunction, lock failure or malformed stored data."""


__all__ = [
    "RepositoryError",
    "ConflictError",
    "NotFoundError",
    "UnknownError",
]

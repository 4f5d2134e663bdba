"""
models/pokemon.py
-----------------
Domain model for the pokedex: validated value objects and the Pokemon entity.

Value objects can only be built through their `parse` constructors, which
reject invalid primitives with a `ValidationError` subclass.
"""

from dataclasses import dataclass
from enum import Enum


class ValidationError(ValueError):
    """Base class for primitives rejected by a value object."""


class InvalidRangeError(ValidationError):
    """Raised when a pokemon number falls outside 1..898."""


class EmptyValueError(ValidationError):
    """Raised when a name or a type list is empty."""


class UnknownTypeError(ValidationError):
    """Raised when a type string is not part of the known catalog."""


# Valid numbers are strictly between these bounds.
_MIN_NUMBER = 0
_MAX_NUMBER = 899


@dataclass(frozen=True)
class PokemonNumber:
    value: int

    @classmethod
    def parse(cls, value) -> "PokemonNumber":
        """
        Build a number from a raw integer.

        Raises:
            InvalidRangeError: Unless ``0 < value < 899``.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidRangeError(f"Pokemon number must be an integer, got {value!r}")
        if not _MIN_NUMBER < value < _MAX_NUMBER:
            raise InvalidRangeError(f"Pokemon number {value} is out of range")
        return cls(value)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class PokemonName:
    value: str

    @classmethod
    def parse(cls, value) -> "PokemonName":
        """
        Build a name from a raw string.

        Raises:
            EmptyValueError: If the value is not a string or has zero length.
        """
        if not isinstance(value, str):
            raise EmptyValueError(f"Pokemon name must be a string, got {type(value).__name__}")
        if not value:
            raise EmptyValueError("Pokemon name cannot be empty")
        return cls(value)

    def __str__(self) -> str:
        return self.value


class PokemonType(Enum):
    """Closed catalog of pokemon types. The value is the wire name."""

    ELECTRIC = "Electric"
    FIRE = "Fire"

    @classmethod
    def parse(cls, value) -> "PokemonType":
        try:
            return cls(value)
        except ValueError:
            raise UnknownTypeError(f"Unknown pokemon type {value!r}") from None


@dataclass(frozen=True)
class PokemonTypes:
    values: tuple[PokemonType, ...]

    @classmethod
    def parse(cls, values) -> "PokemonTypes":
        """
        Build an ordered, non-empty type list from raw strings.

        Raises:
            EmptyValueError: If the list is empty.
            UnknownTypeError: If any element is not a known type.
        """
        if not values:
            raise EmptyValueError("A pokemon needs at least one type")
        return cls(tuple(PokemonType.parse(v) for v in values))

    def names(self) -> list[str]:
        """Return the types as wire strings, in their original order."""
        return [t.value for t in self.values]

    def __iter__(self):
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class Pokemon:
    """
    A stored pokemon.

    Attributes:
        number: Catalog number, unique within a repository.
        name: Display name.
        types: One or more types, in insertion order.
    """
    number: PokemonNumber
    name: PokemonName
    types: PokemonTypes

    def to_dict(self) -> dict:
        """Serialize to primitives for the API and bot layers."""
        return {
            "number": self.number.value,
            "name": self.name.value,
            "types": self.types.names(),
        }

    def __str__(self) -> str:
        return f"#{self.number.value} {self.name.value} ({', '.join(self.types.names())})"

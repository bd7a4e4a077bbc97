"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, Iterable
from uuid import UUID

from discuss.domain.error import ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_uuid(value: str, field: str) -> UUID:
    """Parse an identifier received as a string.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}: {value!r}")


def parse_uuids(values: Iterable[str], field: str) -> list[UUID]:
    """Parse a list of identifiers received as strings."""
    return [parse_uuid(value, field) for value in values]

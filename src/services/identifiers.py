"""Record identifier parsing."""

from uuid import UUID

from src.services.errors import InvalidIdentifierError


def parse_identifier(value: str) -> str:
    """Return the canonical form of a record id or raise InvalidIdentifierError."""
    try:
        return str(UUID(str(value)))
    except ValueError as e:
        raise InvalidIdentifierError(value) from e


def try_parse_identifier(value: str | None) -> str | None:
    """Like parse_identifier, but None for values that cannot be record ids."""
    if not value:
        return None
    try:
        return parse_identifier(value)
    except InvalidIdentifierError:
        return None

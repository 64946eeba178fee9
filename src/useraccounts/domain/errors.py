"""
Domain failures - Expected, caller-recoverable outcomes as values.

Account operations return one of these instead of raising, so callers
branch on the failure kind (``isinstance``) to choose a response.
Unexpected faults are not modelled here; they propagate as exceptions.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmptyField:
    """A required input was missing or empty."""

    field: str

    @property
    def message(self) -> str:
        return f"{self.field.capitalize()} cannot be empty"


@dataclass(frozen=True)
class Conflict:
    """A username or email is already taken."""

    field: str

    @property
    def message(self) -> str:
        return f"{self.field.capitalize()} already exists"


@dataclass(frozen=True)
class InvalidFormat:
    """A field failed structural validation."""

    field: str
    details: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        if not self.details:
            return f"{self.field.capitalize()} format is invalid"
        return f"{self.field.capitalize()} must have: " + "; ".join(self.details)


@dataclass(frozen=True)
class NotFound:
    """No account exists with the requested identifier."""

    account_id: int

    @property
    def message(self) -> str:
        return f"User not found with ID: {self.account_id}"


ValidationFailure = EmptyField | Conflict | InvalidFormat
AccountFailure = EmptyField | Conflict | InvalidFormat | NotFound

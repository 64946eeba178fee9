"""
Account entity.

The sole persisted record of the domain. Identifier and creation date are
assigned by the store; an unsaved account carries ``None`` for both.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Account:
    """A registered user account."""

    username: str
    email: str
    password_hash: str = field(repr=False)
    id: int | None = None
    created_at: datetime | None = None

    @property
    def is_persisted(self) -> bool:
        """True once the store has assigned an identifier."""
        return self.id is not None

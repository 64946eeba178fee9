"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .account import Account


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    def exists_by_username(self, username: str) -> bool:
        """Return True if an account holds this username."""
        ...

    def exists_by_email(self, email: str) -> bool:
        """Return True if an account holds this email."""
        ...

    def exists_by_id(self, account_id: int) -> bool:
        """Return True if an account with this identifier exists."""
        ...

    def find_all(self) -> list[Account]:
        """Return every persisted account, ordered by the store."""
        ...

    def find_by_id(self, account_id: int) -> Account | None:
        """Return the account with this identifier, or None."""
        ...

    def find_by_username(self, username: str) -> Account | None:
        """Return the account holding this username, or None."""
        ...

    def save(self, account: Account) -> Account:
        """
        Persist a new account.

        The store assigns ``id`` and ``created_at``. Identifiers are never
        reused, even after deletion.

        Args:
            account: Unsaved account carrying a password hash

        Returns:
            The persisted account including generated fields

        Raises:
            DuplicateAccount: If username or email is already taken at
                write time (concurrent creation)
        """
        ...

    def delete_by_id(self, account_id: int) -> None:
        """Permanently remove the account with this identifier."""
        ...


class PasswordHasher(Protocol):
    """Port interface for credential hashing."""

    def hash(self, password: str) -> str:
        """Return a salted, irreversible digest of the password."""
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True iff password produced password_hash."""
        ...

    def dummy_hash(self) -> str:
        """Return a digest of a throwaway password at this hasher's cost."""
        ...

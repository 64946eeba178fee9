"""
Authentication domain service.

Decides whether a username/password pair identifies an account.
Unknown usernames and wrong passwords are both plain negative results,
never errors, so callers cannot tell them apart.

Timing: when the username is unknown the password is still checked
against a dummy digest of the same cost, so both negative branches run
exactly one bcrypt comparison.
"""

import logging
from dataclasses import dataclass

from .account import Account
from .ports import AccountRepository, PasswordHasher

logger = logging.getLogger(__name__)


@dataclass
class AuthenticationService:
    """Password-based authentication against the account store."""

    repository: AccountRepository
    hasher: PasswordHasher

    def authenticate(self, username: str, password: str) -> bool:
        """Return True iff username exists and password matches."""
        return self.login(username, password) is not None

    def login(self, username: str, password: str) -> Account | None:
        """
        Authenticate and return the matching account.

        Returns:
            The account on success, None for unknown user or wrong password
        """
        account = self.repository.find_by_username(username)
        stored_hash = account.password_hash if account is not None else self.hasher.dummy_hash()

        password_valid = self.hasher.verify(password, stored_hash)

        if account is None or not password_valid:
            logger.debug("Authentication failed for username=%s", username)
            return None
        return account

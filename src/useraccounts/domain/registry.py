"""
Account registry domain service.

Orchestrates the account lifecycle: validation, uniqueness checks,
password hashing and persistence on creation; lookup; hard deletion.

Expected failures are returned as values from ``errors``. Only
unexpected faults (e.g. the store being unreachable) raise.
"""

import logging
from dataclasses import dataclass

from .account import Account
from .errors import Conflict, NotFound, ValidationFailure
from .exceptions import DuplicateAccount
from .ports import AccountRepository, PasswordHasher
from .validation import AccountValidator

logger = logging.getLogger(__name__)


@dataclass
class AccountRegistry:
    """
    Domain service for account management.

    Uniqueness is checked before persistence; a concurrent creation that
    slips past the check is caught by the store and reported as Conflict.
    """

    repository: AccountRepository
    hasher: PasswordHasher

    def create(
        self, username: str | None, email: str | None, password: str | None
    ) -> Account | ValidationFailure:
        """
        Create a new account.

        Args:
            username: Requested username
            email: Requested email address
            password: Plaintext password (hashed before storage)

        Returns:
            The persisted account, or the first validation failure.
            Nothing is written when a failure is returned.
        """
        failure = AccountValidator(self.repository).validate(username, email, password)
        if failure is not None:
            logger.info("Account creation rejected: %s", failure.message)
            return failure

        account = Account(username=username, email=email, password_hash=self.hasher.hash(password))
        try:
            saved = self.repository.save(account)
        except DuplicateAccount as e:
            logger.info("Account creation lost uniqueness race on %s", e.field)
            return Conflict(e.field)

        logger.info("Account created: id=%s username=%s", saved.id, saved.username)
        return saved

    def get_all(self) -> list[Account]:
        """Return every account in store order."""
        return self.repository.find_all()

    def get_by_id(self, account_id: int) -> Account | NotFound:
        """Return the account with this identifier, or NotFound."""
        account = self.repository.find_by_id(account_id)
        if account is None:
            return NotFound(account_id)
        return account

    def get_by_username(self, username: str) -> Account | None:
        """Look up an account by username; absence is not a failure."""
        return self.repository.find_by_username(username)

    def delete(self, account_id: int) -> NotFound | None:
        """
        Permanently delete an account.

        Returns:
            None on success, NotFound if no such account exists
        """
        if not self.repository.exists_by_id(account_id):
            return NotFound(account_id)
        self.repository.delete_by_id(account_id)
        logger.info("Account deleted: id=%s", account_id)
        return None

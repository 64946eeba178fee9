"""
In-memory repository adapter - Implements AccountRepository protocol.

Process-local store used for development and tests. Uniqueness is
enforced inside save() under a lock, mirroring the database UNIQUE
constraints of the PostgreSQL adapter.
"""

import itertools
import threading
from dataclasses import replace
from datetime import datetime, timezone

from useraccounts.domain.account import Account
from useraccounts.domain.exceptions import DuplicateAccount


class InMemoryAccountRepository:
    """
    Implements AccountRepository protocol with a dict keyed by id.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Identifiers come from a monotonic counter and are never reused.
    """

    def __init__(self) -> None:
        self._accounts: dict[int, Account] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def exists_by_username(self, username: str) -> bool:
        return self.find_by_username(username) is not None

    def exists_by_email(self, email: str) -> bool:
        with self._lock:
            return any(a.email == email for a in self._accounts.values())

    def exists_by_id(self, account_id: int) -> bool:
        with self._lock:
            return account_id in self._accounts

    def find_all(self) -> list[Account]:
        with self._lock:
            return [self._accounts[key] for key in sorted(self._accounts)]

    def find_by_id(self, account_id: int) -> Account | None:
        with self._lock:
            return self._accounts.get(account_id)

    def find_by_username(self, username: str) -> Account | None:
        with self._lock:
            return next((a for a in self._accounts.values() if a.username == username), None)

    def save(self, account: Account) -> Account:
        """
        Persist a new account, assigning id and creation time.

        Raises:
            DuplicateAccount: If username or email is already stored
        """
        with self._lock:
            stored = self._accounts.values()
            if any(existing.username == account.username for existing in stored):
                raise DuplicateAccount("username")
            if any(existing.email == account.email for existing in stored):
                raise DuplicateAccount("email")

            saved = replace(
                account,
                id=next(self._ids),
                created_at=datetime.now(timezone.utc),
            )
            self._accounts[saved.id] = saved
            return saved

    def delete_by_id(self, account_id: int) -> None:
        with self._lock:
            self._accounts.pop(account_id, None)

"""
Domain exceptions - Errors raised by store adapters.

Expected validation outcomes are returned as values (see ``errors``);
these exceptions cover what a store signals while writing.
"""


class AccountStoreError(Exception):
    """Base class for account store errors."""

    pass


class DuplicateAccount(AccountStoreError):
    """A write violated the username or email uniqueness constraint."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Duplicate value for {field}")
        self.field = field

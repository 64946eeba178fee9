"""
Domain layer - Pure business logic with zero framework imports.

This package contains the account management rules: validation,
credential hashing policy, and the authentication decision. It defines
its own port interfaces for infrastructure abstraction.
"""

from .account import Account
from .authentication import AuthenticationService
from .errors import AccountFailure, Conflict, EmptyField, InvalidFormat, NotFound, ValidationFailure
from .exceptions import AccountStoreError, DuplicateAccount
from .hashing import BcryptHasher
from .ports import AccountRepository, PasswordHasher
from .registry import AccountRegistry
from .validation import AccountValidator

__all__ = [
    "Account",
    "AccountFailure",
    "AccountRegistry",
    "AccountRepository",
    "AccountStoreError",
    "AccountValidator",
    "AuthenticationService",
    "BcryptHasher",
    "Conflict",
    "DuplicateAccount",
    "EmptyField",
    "InvalidFormat",
    "NotFound",
    "PasswordHasher",
    "ValidationFailure",
]

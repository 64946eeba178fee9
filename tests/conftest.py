"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fast bcrypt hasher (minimum work factor)
- In-memory account store
- Domain services wired to both
"""

import pytest

from useraccounts.adapters.repository.memory import InMemoryAccountRepository
from useraccounts.domain.authentication import AuthenticationService
from useraccounts.domain.hashing import BcryptHasher
from useraccounts.domain.registry import AccountRegistry


@pytest.fixture
def hasher() -> BcryptHasher:
    """bcrypt hasher at the lowest cost bcrypt accepts."""
    return BcryptHasher(rounds=4)


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    """Fresh in-memory store for each test."""
    return InMemoryAccountRepository()


@pytest.fixture
def registry(repository: InMemoryAccountRepository, hasher: BcryptHasher) -> AccountRegistry:
    return AccountRegistry(repository=repository, hasher=hasher)


@pytest.fixture
def auth_service(
    repository: InMemoryAccountRepository, hasher: BcryptHasher
) -> AuthenticationService:
    return AuthenticationService(repository=repository, hasher=hasher)

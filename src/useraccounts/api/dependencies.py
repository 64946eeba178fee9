"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Depends, Request

from useraccounts.config.settings import get_settings
from useraccounts.domain.authentication import AuthenticationService
from useraccounts.domain.hashing import BcryptHasher
from useraccounts.domain.ports import AccountRepository
from useraccounts.domain.registry import AccountRegistry


def get_repository(request: Request) -> AccountRepository:
    """
    Get the account store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.repository


def get_hasher() -> BcryptHasher:
    """Build the bcrypt hasher from the configured work factor."""
    return BcryptHasher(rounds=get_settings().bcrypt_cost)


def get_account_registry(
    repository: AccountRepository = Depends(get_repository),
    hasher: BcryptHasher = Depends(get_hasher),
) -> AccountRegistry:
    """Create account registry with injected dependencies."""
    return AccountRegistry(repository=repository, hasher=hasher)


def get_authentication_service(
    repository: AccountRepository = Depends(get_repository),
    hasher: BcryptHasher = Depends(get_hasher),
) -> AuthenticationService:
    """Create authentication service with injected dependencies."""
    return AuthenticationService(repository=repository, hasher=hasher)

"""
API v1 routes.

Defines REST endpoints for account management and login. Domain
failures are mapped onto HTTP status codes here; the domain itself
never raises for expected outcomes.
"""

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, status

from useraccounts.api.dependencies import get_account_registry, get_authentication_service
from useraccounts.api.models import (
    AccountListResponse,
    AccountResponse,
    AccountView,
    CreateAccountRequest,
    CreateAccountResponse,
    ErrorResponse,
    LoginAccountView,
    LoginRequest,
    LoginResponse,
    MessageResponse,
)
from useraccounts.domain.authentication import AuthenticationService
from useraccounts.domain.errors import AccountFailure, Conflict, EmptyField, InvalidFormat, NotFound
from useraccounts.domain.registry import AccountRegistry
from useraccounts.domain.validation import check_required

router = APIRouter(prefix="/users", tags=["v1"])

_FAILURE_STATUS = {
    EmptyField: status.HTTP_400_BAD_REQUEST,
    InvalidFormat: status.HTTP_400_BAD_REQUEST,
    Conflict: status.HTTP_409_CONFLICT,
    NotFound: status.HTTP_404_NOT_FOUND,
}


def _raise_failure(failure: AccountFailure) -> NoReturn:
    raise HTTPException(status_code=_FAILURE_STATUS[type(failure)], detail=failure.message)


@router.post(
    "",
    response_model=CreateAccountResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Empty field or invalid format"},
        409: {"model": ErrorResponse, "description": "Username or email already exists"},
    },
    summary="Create a new account",
)
def create_account(
    request_data: CreateAccountRequest,
    registry: AccountRegistry = Depends(get_account_registry),
) -> CreateAccountResponse:
    """
    Create an account.

    - **username**: Unique username
    - **email**: Unique email address
    - **password**: At least 8 characters with upper, lower, digit and one of @$!%*?&
    """
    result = registry.create(request_data.username, request_data.email, request_data.password)
    if isinstance(result, (EmptyField, Conflict, InvalidFormat)):
        _raise_failure(result)
    return CreateAccountResponse(
        message="User created successfully",
        user=AccountView.from_account(result),
    )


@router.get("", response_model=AccountListResponse, summary="List all accounts")
def list_accounts(
    registry: AccountRegistry = Depends(get_account_registry),
) -> AccountListResponse:
    accounts = registry.get_all()
    return AccountListResponse(
        count=len(accounts),
        users=[AccountView.from_account(account) for account in accounts],
    )


@router.get(
    "/{account_id}",
    response_model=AccountResponse,
    responses={404: {"model": ErrorResponse, "description": "Account not found"}},
    summary="Get an account by id",
)
def get_account(
    account_id: int,
    registry: AccountRegistry = Depends(get_account_registry),
) -> AccountResponse:
    result = registry.get_by_id(account_id)
    if isinstance(result, NotFound):
        _raise_failure(result)
    return AccountResponse(user=AccountView.from_account(result))


@router.delete(
    "/{account_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse, "description": "Account not found"}},
    summary="Delete an account by id",
)
def delete_account(
    account_id: int,
    registry: AccountRegistry = Depends(get_account_registry),
) -> MessageResponse:
    failure = registry.delete(account_id)
    if failure is not None:
        _raise_failure(failure)
    return MessageResponse(message="User deleted successfully")


@router.post(
    "/auth/login",
    response_model=LoginResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Empty username or password"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
    summary="Log in with username and password",
)
def login(
    request_data: LoginRequest,
    service: AuthenticationService = Depends(get_authentication_service),
) -> LoginResponse:
    """
    Authenticate with username and password.

    Unknown usernames and wrong passwords produce the same 401 response.
    """
    empty = check_required(username=request_data.username, password=request_data.password)
    if empty is not None:
        _raise_failure(empty)

    account = service.login(request_data.username, request_data.password)
    if account is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    return LoginResponse(message="Login successful", user=LoginAccountView.from_account(account))

"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Request fields are optional strings: missing or empty values are reported
by the domain as EmptyField rather than rejected here.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from useraccounts.domain.account import Account


class CreateAccountRequest(BaseModel):
    """Request model for account creation."""

    username: str | None = None
    email: str | None = None
    password: str | None = Field(default=None, description="Plaintext password")


class LoginRequest(BaseModel):
    """Request model for username/password login."""

    username: str | None = None
    password: str | None = None


class AccountView(BaseModel):
    """Public representation of an account (no credentials)."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    username: str
    email: str
    creation_date: datetime = Field(alias="creationDate")

    @classmethod
    def from_account(cls, account: Account) -> "AccountView":
        return cls(
            id=account.id,
            username=account.username,
            email=account.email,
            creation_date=account.created_at,
        )


class LoginAccountView(BaseModel):
    """Account representation returned after a successful login."""

    id: int
    username: str
    email: str

    @classmethod
    def from_account(cls, account: Account) -> "LoginAccountView":
        return cls(id=account.id, username=account.username, email=account.email)


class CreateAccountResponse(BaseModel):
    """Response model for successful account creation."""

    success: bool = True
    message: str
    user: AccountView


class AccountResponse(BaseModel):
    """Response model for a single account lookup."""

    success: bool = True
    user: AccountView


class AccountListResponse(BaseModel):
    """Response model for listing accounts."""

    success: bool = True
    count: int
    users: list[AccountView]


class LoginResponse(BaseModel):
    """Response model for successful login."""

    success: bool = True
    message: str
    user: LoginAccountView


class MessageResponse(BaseModel):
    """Response model carrying only a confirmation message."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str

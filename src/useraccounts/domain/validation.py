"""
Validation engine - Ordered, fail-fast checks for new accounts.

Rules are evaluated in a fixed order and the first failing rule
determines the reported failure:

1. username present        -> EmptyField("username")
2. email present           -> EmptyField("email")
3. password present        -> EmptyField("password")
4. username not taken      -> Conflict("username")
5. email not taken         -> Conflict("email")
6. email well-formed       -> InvalidFormat("email")
7. password strong enough  -> InvalidFormat("password", details)

Rules 4 and 5 query the repository; everything else is a pure string check.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from .errors import Conflict, EmptyField, InvalidFormat, ValidationFailure
from .ports import AccountRepository

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@(.+)$")

PASSWORD_MIN_LENGTH = 8

# Each rule is a matcher that must succeed. Character classes are spelled
# out in ASCII; whole-string rules use fullmatch so a trailing newline fails.
_PASSWORD_RULES: tuple[tuple[Callable[[str], re.Match[str] | None], str], ...] = (
    (re.compile(r".{%d,}" % PASSWORD_MIN_LENGTH, re.DOTALL).fullmatch, "Minimum 8 characters"),
    (re.compile(r"[A-Z]").search, "At least 1 uppercase letter"),
    (re.compile(r"[a-z]").search, "At least 1 lowercase letter"),
    (re.compile(r"[0-9]").search, "At least 1 number"),
    (re.compile(r"[@$!%*?&]").search, "At least 1 special character (@$!%*?&)"),
    (
        re.compile(r"[A-Za-z0-9@$!%*?&]*").fullmatch,
        "Only letters, numbers and special characters (@$!%*?&)",
    ),
)


def check_required(**fields: str | None) -> EmptyField | None:
    """Return EmptyField for the first missing or empty keyword argument."""
    for name, value in fields.items():
        if not value:
            return EmptyField(name)
    return None


def check_email_format(email: str) -> InvalidFormat | None:
    """Return InvalidFormat if email does not look like local@domain."""
    if EMAIL_PATTERN.fullmatch(email) is None:
        return InvalidFormat("email")
    return None


def unmet_password_requirements(password: str) -> list[str]:
    """List every password requirement the candidate does not meet."""
    return [requirement for matches, requirement in _PASSWORD_RULES if not matches(password)]


def check_password_strength(password: str) -> InvalidFormat | None:
    """Return InvalidFormat enumerating unmet requirements, if any."""
    unmet = unmet_password_requirements(password)
    if unmet:
        return InvalidFormat("password", tuple(unmet))
    return None


@dataclass
class AccountValidator:
    """Runs the full rule chain for a prospective account."""

    repository: AccountRepository

    def validate(
        self, username: str | None, email: str | None, password: str | None
    ) -> ValidationFailure | None:
        """
        Validate account creation input.

        Args:
            username: Requested username
            email: Requested email address
            password: Plaintext password

        Returns:
            The first failure encountered, or None if the input is acceptable
        """
        empty = check_required(username=username, email=email, password=password)
        if empty is not None:
            return empty

        if self.repository.exists_by_username(username):
            return Conflict("username")
        if self.repository.exists_by_email(email):
            return Conflict("email")

        return check_email_format(email) or check_password_strength(password)

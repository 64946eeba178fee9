"""
Unit tests for AccountRegistry domain logic.

Tests verify:
- Account creation with hashing and store-assigned fields
- Validation failures leave the store untouched
- Uniqueness conflicts, including store-level races
- Lookup and deletion outcomes
"""

from unittest.mock import Mock

from useraccounts.adapters.repository.memory import InMemoryAccountRepository
from useraccounts.domain.account import Account
from useraccounts.domain.errors import Conflict, EmptyField, InvalidFormat, NotFound
from useraccounts.domain.exceptions import DuplicateAccount
from useraccounts.domain.hashing import BcryptHasher
from useraccounts.domain.registry import AccountRegistry

VALID_PASSWORD = "Str0ng!Pw"


class TestCreate:
    """Tests for create()."""

    def test_create_returns_persisted_account(self, registry: AccountRegistry) -> None:
        """Created account carries a generated id and creation date."""
        account = registry.create("alice", "alice@example.com", VALID_PASSWORD)

        assert isinstance(account, Account)
        assert account.id is not None
        assert account.created_at is not None
        assert account.username == "alice"
        assert account.email == "alice@example.com"

    def test_create_hashes_password(
        self, registry: AccountRegistry, hasher: BcryptHasher
    ) -> None:
        """Stored credential is a digest of the password, not the password."""
        account = registry.create("alice", "alice@example.com", VALID_PASSWORD)

        assert account.password_hash != VALID_PASSWORD
        assert hasher.verify(VALID_PASSWORD, account.password_hash)

    def test_create_assigns_distinct_ids(self, registry: AccountRegistry) -> None:
        first = registry.create("alice", "alice@example.com", VALID_PASSWORD)
        second = registry.create("bob", "bob@example.com", VALID_PASSWORD)

        assert first.id != second.id

    def test_duplicate_username_conflicts(self, registry: AccountRegistry) -> None:
        """Second account with the same username is rejected regardless of email."""
        registry.create("alice", "alice@example.com", VALID_PASSWORD)

        result = registry.create("alice", "other@example.com", VALID_PASSWORD)

        assert result == Conflict("username")

    def test_duplicate_email_conflicts(self, registry: AccountRegistry) -> None:
        registry.create("alice", "alice@example.com", VALID_PASSWORD)

        result = registry.create("alicia", "alice@example.com", VALID_PASSWORD)

        assert result == Conflict("email")

    def test_validation_failure_does_not_touch_store(self) -> None:
        """No hashing and no save when validation fails."""
        repo = Mock()
        repo.exists_by_username.return_value = False
        repo.exists_by_email.return_value = False
        hasher = Mock()

        registry = AccountRegistry(repository=repo, hasher=hasher)
        result = registry.create("alice", "not-an-email", VALID_PASSWORD)

        assert result == InvalidFormat("email")
        hasher.hash.assert_not_called()
        repo.save.assert_not_called()

    def test_empty_field_failure(self, registry: AccountRegistry) -> None:
        assert registry.create(None, "a@b.c", VALID_PASSWORD) == EmptyField("username")

    def test_weak_password_failure(
        self, registry: AccountRegistry, repository: InMemoryAccountRepository
    ) -> None:
        result = registry.create("alice", "alice@example.com", "abc123")

        assert isinstance(result, InvalidFormat)
        assert result.field == "password"
        assert repository.find_all() == []

    def test_store_race_maps_to_conflict(self, hasher: BcryptHasher) -> None:
        """A uniqueness violation raised at save time becomes Conflict."""
        repo = Mock()
        repo.exists_by_username.return_value = False
        repo.exists_by_email.return_value = False
        repo.save.side_effect = DuplicateAccount("email")

        registry = AccountRegistry(repository=repo, hasher=hasher)
        result = registry.create("alice", "alice@example.com", VALID_PASSWORD)

        assert result == Conflict("email")


class TestLookup:
    """Tests for get_all(), get_by_id() and get_by_username()."""

    def test_get_all_empty(self, registry: AccountRegistry) -> None:
        assert registry.get_all() == []

    def test_get_all_returns_every_account(self, registry: AccountRegistry) -> None:
        registry.create("alice", "alice@example.com", VALID_PASSWORD)
        registry.create("bob", "bob@example.com", VALID_PASSWORD)

        assert [a.username for a in registry.get_all()] == ["alice", "bob"]

    def test_get_by_id_found(self, registry: AccountRegistry) -> None:
        created = registry.create("alice", "alice@example.com", VALID_PASSWORD)
        assert registry.get_by_id(created.id) == created

    def test_get_by_id_missing(self, registry: AccountRegistry) -> None:
        assert registry.get_by_id(42) == NotFound(42)

    def test_get_by_username_found(self, registry: AccountRegistry) -> None:
        created = registry.create("alice", "alice@example.com", VALID_PASSWORD)
        assert registry.get_by_username("alice") == created

    def test_get_by_username_missing_is_none(self, registry: AccountRegistry) -> None:
        """Absence is a plain None, not a failure value."""
        assert registry.get_by_username("nobody") is None


class TestDelete:
    """Tests for delete()."""

    def test_delete_missing_returns_not_found(self, registry: AccountRegistry) -> None:
        assert registry.delete(99) == NotFound(99)

    def test_delete_removes_account(self, registry: AccountRegistry) -> None:
        """Deleted account is unreachable by id and username."""
        created = registry.create("alice", "alice@example.com", VALID_PASSWORD)

        assert registry.delete(created.id) is None
        assert registry.get_by_id(created.id) == NotFound(created.id)
        assert registry.get_by_username("alice") is None

    def test_delete_twice(self, registry: AccountRegistry) -> None:
        created = registry.create("alice", "alice@example.com", VALID_PASSWORD)
        registry.delete(created.id)

        assert registry.delete(created.id) == NotFound(created.id)

    def test_deleted_username_can_be_reused(self, registry: AccountRegistry) -> None:
        """Uniqueness only applies to existing accounts; ids are never reused."""
        first = registry.create("alice", "alice@example.com", VALID_PASSWORD)
        registry.delete(first.id)

        second = registry.create("alice", "alice@example.com", VALID_PASSWORD)

        assert isinstance(second, Account)
        assert second.id != first.id

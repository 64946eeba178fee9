"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
account store port using psycopg3 with raw SQL.

Uniqueness of username and email is enforced twice: the domain checks
before writing, and the table's UNIQUE constraints reject whichever of
two concurrent inserts commits second. That rejection surfaces as
DuplicateAccount so the domain can report a Conflict.
"""

import logging
from pathlib import Path

from psycopg import errors
from psycopg_pool import ConnectionPool

from useraccounts.domain.account import Account
from useraccounts.domain.exceptions import DuplicateAccount

logger = logging.getLogger(__name__)

_COLUMNS = "id, username, email, password_hash, created_at"

# Constraint names from migrations/001_create_accounts.sql
_CONSTRAINT_FIELDS = {
    "accounts_username_key": "username",
    "accounts_email_key": "email",
}


def _to_account(row: tuple) -> Account:
    return Account(
        id=row[0],
        username=row[1],
        email=row[2],
        password_hash=row[3],
        created_at=row[4],
    )


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def exists_by_username(self, username: str) -> bool:
        return self._exists("SELECT 1 FROM accounts WHERE username = %s", username)

    def exists_by_email(self, email: str) -> bool:
        return self._exists("SELECT 1 FROM accounts WHERE email = %s", email)

    def exists_by_id(self, account_id: int) -> bool:
        return self._exists("SELECT 1 FROM accounts WHERE id = %s", account_id)

    def find_all(self) -> list[Account]:
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(f"SELECT {_COLUMNS} FROM accounts ORDER BY id")
            return [_to_account(row) for row in cursor.fetchall()]

    def find_by_id(self, account_id: int) -> Account | None:
        return self._find_one(f"SELECT {_COLUMNS} FROM accounts WHERE id = %s", account_id)

    def find_by_username(self, username: str) -> Account | None:
        return self._find_one(f"SELECT {_COLUMNS} FROM accounts WHERE username = %s", username)

    def save(self, account: Account) -> Account:
        """
        Insert a new account row.

        The database assigns ``id`` (identity column) and ``created_at``
        (NOW()). Any id or created_at on the passed account is ignored.

        Args:
            account: Unsaved account with a bcrypt password hash

        Returns:
            The persisted account as stored

        Raises:
            DuplicateAccount: If the username or email UNIQUE constraint fails
        """
        sql = f"""
            INSERT INTO accounts (username, email, password_hash)
            VALUES (%s, %s, %s)
            RETURNING {_COLUMNS}
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (account.username, account.email, account.password_hash))
                row = cursor.fetchone()
                conn.commit()
        except errors.UniqueViolation as e:
            field = _CONSTRAINT_FIELDS.get(e.diag.constraint_name or "", "username")
            raise DuplicateAccount(field) from e

        return _to_account(row)

    def delete_by_id(self, account_id: int) -> None:
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("DELETE FROM accounts WHERE id = %s", (account_id,))
            conn.commit()

    def _exists(self, sql: str, value: object) -> bool:
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (value,))
            return cursor.fetchone() is not None

    def _find_one(self, sql: str, value: object) -> Account | None:
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (value,))
            row = cursor.fetchone()
        return _to_account(row) if row is not None else None


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/useraccounts/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parents[4] / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e

"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Protocol

from db.errors import NoRowsError
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository(Protocol):
    """Read and write access to stored users."""

    def get_user_by_id(self, user_id: int) -> User:
        """
        Fetch the user with the given ID.

        Raises:
            NoRowsError: If no user has that ID.
        """
        ...

    def create_user(self, user: User) -> None:
        """Store a new user under its own ID."""
        ...


class DBUserRepository:
    """
    UserRepository backed by a DB-API connection to the users table.

    The connection is borrowed, not owned: whoever builds the repository
    opens it, commits if needed, and closes it.
    """

    def __init__(self, conn):
        self.conn = conn

    def get_user_by_id(self, user_id: int) -> User:
        """
        Fetch a user by ID.

        Returns:
            A fully populated User.

        Raises:
            NoRowsError: If the query matched no row.
            psycopg2.Error: Any driver failure, unchanged.
        """
        sql = "SELECT id, name FROM users WHERE id = %s;"
        params = (user_id,)
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            if row is None:
                raise NoRowsError(sql, params)
            id_, name = row
        except Exception as e:
            logger.error(f"Failed to get user {user_id}: {e}")
            raise
        return User(id=id_, name=name)

    def create_user(self, user: User) -> None:
        """
        Insert a new user row.

        The affected row count is not checked; a statement the server accepts
        counts as success.

        Raises:
            psycopg2.Error: Any driver failure (e.g. duplicate ID), unchanged.
        """
        sql = "INSERT INTO users (id, name) VALUES (%s, %s);"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (user.id, user.name))
        except Exception as e:
            logger.error(f"Failed to create user {user.id}: {e}")
            raise

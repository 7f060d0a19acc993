"""
Pytest fixtures - mocked psycopg2 driver and an in-memory repository double.
No real database is needed for the unit tests.
"""

from unittest.mock import MagicMock

import pytest

from db.errors import NoRowsError
from models.user import User
from repositories.user_repo import DBUserRepository


class InMemoryUserRepository:
    """Hand-written UserRepository double that records the users it is given."""

    def __init__(self, users=None):
        self.users = {u.id: u for u in users or []}
        self.created = []

    def get_user_by_id(self, user_id: int) -> User:
        if user_id not in self.users:
            raise NoRowsError("SELECT id, name FROM users WHERE id = %s;", (user_id,))
        stored = self.users[user_id]
        return User(id=stored.id, name=stored.name)

    def create_user(self, user: User) -> None:
        self.created.append(user)
        self.users[user.id] = user


@pytest.fixture
def cursor() -> MagicMock:
    cur = MagicMock(name="cursor")
    cur.rowcount = 1
    return cur


@pytest.fixture
def conn(cursor: MagicMock) -> MagicMock:
    """psycopg2-style connection whose cursor() works as a context manager."""
    connection = MagicMock(name="connection")
    connection.cursor.return_value.__enter__.return_value = cursor
    connection.cursor.return_value.__exit__.return_value = False
    return connection


@pytest.fixture
def repo(conn: MagicMock) -> DBUserRepository:
    return DBUserRepository(conn)


@pytest.fixture
def memory_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository([User(id=1, name="John Doe")])

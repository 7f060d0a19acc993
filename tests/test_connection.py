"""
Connection pool tests - the psycopg2 pool is replaced by a mock.
"""

from unittest.mock import MagicMock, patch

import pytest

from db import connection as db_connection


@pytest.fixture
def fake_pool(monkeypatch) -> MagicMock:
    pool = MagicMock(name="pool")
    monkeypatch.setattr(db_connection, "_pool", pool)
    return pool


def test_get_connection_without_pool(monkeypatch):
    monkeypatch.setattr(db_connection, "_pool", None)

    with pytest.raises(RuntimeError):
        db_connection.get_connection()


def test_init_pool_is_idempotent(monkeypatch):
    monkeypatch.setattr(db_connection, "_pool", None)

    with patch.object(db_connection.pool, "SimpleConnectionPool") as pool_cls:
        db_connection.init_pool(1, 3)
        db_connection.init_pool(1, 3)

    pool_cls.assert_called_once_with(1, 3, db_connection.DATABASE_URL)
    db_connection.close_pool()
    assert db_connection._pool is None


def test_connection_context_autocommits_and_releases(fake_pool):
    conn = fake_pool.getconn.return_value

    with db_connection.connection() as borrowed:
        assert borrowed is conn
        assert borrowed.autocommit is True

    fake_pool.putconn.assert_called_once_with(conn)


def test_connection_context_releases_on_error(fake_pool):
    conn = fake_pool.getconn.return_value

    with pytest.raises(ZeroDivisionError):
        with db_connection.connection():
            1 / 0

    fake_pool.putconn.assert_called_once_with(conn)

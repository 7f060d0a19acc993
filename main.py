"""
main.py
-------
Command-line entry point for the user store.

Responsibilities:
    - Initialize the database connection pool (and the schema on request).
    - Wire a DBUserRepository to one borrowed connection.
    - Run a single create/get command and release everything on exit.

Usage:
    python main.py init-db
    python main.py create 1 "John Doe"
    python main.py get 1
"""

import argparse
import sys

from db.connection import close_pool, connection, init_pool
from db.errors import NoRowsError
from db.init_db import create_tables
from models.user import User
from repositories.user_repo import DBUserRepository, UserRepository


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="user-store", description="Read and write stored users.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create the users table if it does not exist.")

    create = sub.add_parser("create", help="Insert a new user.")
    create.add_argument("id", type=int)
    create.add_argument("name")

    get = sub.add_parser("get", help="Look up a user by ID.")
    get.add_argument("id", type=int)

    return parser


def run_command(repo: UserRepository, args: argparse.Namespace) -> int:
    """Execute a create/get command against the repository. Returns an exit code."""
    if args.command == "create":
        user = User(id=args.id, name=args.name)
        repo.create_user(user)
        print(f"Created {user}")
        return 0

    try:
        user = repo.get_user_by_id(args.id)
    except NoRowsError:
        print(f"No user with id {args.id}", file=sys.stderr)
        return 1
    print(user)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    init_pool()
    try:
        if args.command == "init-db":
            create_tables()
            return 0
        with connection() as conn:
            return run_command(DBUserRepository(conn), args)
    finally:
        close_pool()


if __name__ == "__main__":
    sys.exit(main())

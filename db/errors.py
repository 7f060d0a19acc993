"""
db/errors.py
------------
Errors raised by the database layer itself.
Driver errors (psycopg2.Error and subclasses) are never wrapped and reach callers as-is.
"""


class NoRowsError(LookupError):
    """Raised when a single-row query returns no rows."""

    def __init__(self, query: str, params: tuple = ()):
        super().__init__(query, params)
        self.query = query
        self.params = params

    def __str__(self) -> str:
        return f"no rows in result set for {self.query!r} with params {self.params!r}"

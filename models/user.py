"""
models/user.py
--------------
Domain model for stored users.
"""

from dataclasses import dataclass


@dataclass
class User:
    """
    Represents a single user row.

    Attributes:
        id: Primary key, chosen by the caller (the store never generates it).
        name: Display name. No length or uniqueness rule is applied here.
    """
    id: int
    name: str

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"

"""Record categories and their wire tokens.

The category decides both the shape of a boat's location and its
monthly per-foot rate.
"""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    """Where a boat is kept.

    Values are the tokens written to the data file. ``trailor`` is the
    historic spelling; existing files depend on it.
    """

    SLIP = "slip"
    LAND = "land"
    TRAILER = "trailor"
    STORAGE = "storage"

    @classmethod
    def parse(cls, token: str) -> Category:
        """Resolve a token case-insensitively, defaulting to STORAGE."""
        try:
            return cls(token.lower())
        except ValueError:
            return cls.STORAGE

    @property
    def label(self) -> str:
        """Display name (``Trailer``, not the wire spelling)."""
        return self.name.capitalize()

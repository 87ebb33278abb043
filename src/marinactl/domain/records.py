"""Boat records and their category-specific location descriptors.

A location is one of four frozen variants. A record's category is read
from its location, so the two can never disagree.

Numeric location text is parsed permissively (``"A7"`` becomes slip 0)
because existing data files rely on it.
"""

from __future__ import annotations

import re
from dataclasses import FrozenInstanceError, dataclass
from typing import Any, ClassVar

from marinactl.domain.types import Category

NAME_MAX_LEN = 127
TAG_MAX_LEN = 15

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_leading_int(text: str) -> int:
    """Parse the leading integer of *text*, or 0 if there is none.

    Examples:
        >>> parse_leading_int("42")
        42
        >>> parse_leading_int(" -3x")
        -3
        >>> parse_leading_int("A7")
        0
    """
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


# ---------------------------------------------------------------------------
# Location variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SlipLocation:
    """Kept in a numbered slip."""

    category: ClassVar[Category] = Category.SLIP

    number: int

    @property
    def payload(self) -> int:
        return self.number

    @property
    def label(self) -> str:
        return f"Slip #{self.number}"


@dataclass(frozen=True)
class LandLocation:
    """Kept on land in a lettered bay."""

    category: ClassVar[Category] = Category.LAND

    bay: str

    @property
    def payload(self) -> str:
        return self.bay

    @property
    def label(self) -> str:
        return f"Bay {self.bay}"


@dataclass(frozen=True)
class TrailerLocation:
    """Kept on a trailer identified by its tag."""

    category: ClassVar[Category] = Category.TRAILER

    tag: str

    @property
    def payload(self) -> str:
        return self.tag

    @property
    def label(self) -> str:
        return f"Trailer {self.tag}"


@dataclass(frozen=True)
class StorageLocation:
    """Kept in a numbered storage space."""

    category: ClassVar[Category] = Category.STORAGE

    number: int

    @property
    def payload(self) -> int:
        return self.number

    @property
    def label(self) -> str:
        return f"Storage #{self.number}"


Location = SlipLocation | LandLocation | TrailerLocation | StorageLocation


def make_location(category: Category, raw: str) -> Location:
    """Build the location variant for *category* from raw field text."""
    match category:
        case Category.SLIP:
            return SlipLocation(parse_leading_int(raw))
        case Category.LAND:
            return LandLocation(raw[:1])
        case Category.TRAILER:
            return TrailerLocation(raw[:TAG_MAX_LEN])
        case _:
            return StorageLocation(parse_leading_int(raw))


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------


@dataclass
class Record:
    """One boat's stored data.

    Only ``balance`` changes after construction; the fee engine and
    payment acceptance mutate it in place. Assigning any other field
    raises :class:`dataclasses.FrozenInstanceError`.
    """

    _FIXED: ClassVar[frozenset[str]] = frozenset({"name", "length", "location"})

    name: str
    length: float
    location: Location
    balance: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name[:NAME_MAX_LEN])

    def __setattr__(self, key: str, value: Any) -> None:
        if key in self._FIXED and key in self.__dict__:
            msg = f"cannot assign to field {key!r}"
            raise FrozenInstanceError(msg)
        super().__setattr__(key, value)

    @classmethod
    def create(
        cls,
        name: str,
        length: float,
        category: Category,
        location: Location,
        balance: float = 0.0,
    ) -> Record:
        """Construct a record, rejecting a location that disagrees with *category*."""
        if location.category is not category:
            msg = f"{category.label} record cannot carry a {location.category.label} location"
            raise ValueError(msg)
        return cls(name=name, length=length, location=location, balance=balance)

    @property
    def category(self) -> Category:
        return self.location.category

    def to_dict(self) -> dict[str, Any]:
        """Serializable view used in service results."""
        return {
            "name": self.name,
            "length": self.length,
            "category": self.category.value,
            "location": self.location.payload,
            "location_label": self.location.label,
            "balance": self.balance,
        }

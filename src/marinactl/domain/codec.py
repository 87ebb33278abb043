"""One-line CSV encoding for boat records.

Line layout, no header and no quoting::

    name,length,category,location,balance

``length`` is written with 0 decimals and ``balance`` with 2. Decoding is
deliberately permissive: short rows, unknown categories, and unparseable
numbers all fall back to defaults instead of raising, because existing
data files rely on it.
"""

from __future__ import annotations

import re

from marinactl.domain.records import (
    LandLocation,
    Record,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
    make_location,
)
from marinactl.domain.types import Category

FIELD_COUNT = 5

_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def parse_leading_float(text: str) -> float:
    """Parse the leading number of *text*, or 0.0 if there is none.

    Examples:
        >>> parse_leading_float("23")
        23.0
        >>> parse_leading_float(" 500.00\\n")
        500.0
        >>> parse_leading_float("abc")
        0.0
    """
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def display_text(text: str) -> str:
    """Return *text* with undecodable bytes shown as U+FFFD.

    Data files are read with ``surrogateescape`` so foreign bytes survive a
    load/save cycle; they must not reach terminals or JSON as lone
    surrogates.

    Examples:
        >>> display_text("Ni\\udcf1a") == "Ni\\ufffda"
        True
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def encode_location(record: Record) -> str:
    """Render the location field for *record*."""
    location = record.location
    match location:
        case SlipLocation(number=number) | StorageLocation(number=number):
            return str(number)
        case LandLocation(bay=bay):
            return bay
        case TrailerLocation(tag=tag):
            return tag
    msg = f"Unknown location variant: {location!r}"
    raise TypeError(msg)


def encode_record(record: Record) -> str:
    """Encode *record* as one CSV line (without the trailing newline)."""
    return ",".join(
        (
            record.name,
            f"{record.length:.0f}",
            record.category.value,
            encode_location(record),
            f"{record.balance:.2f}",
        )
    )


def decode_record(line: str) -> Record:
    """Decode one CSV line into a Record.

    Missing trailing fields take defaults (zero numbers, empty text,
    STORAGE category). Anything after the fifth field is ignored.

    Raises:
        ValueError: *line* is blank, so there is no name to key on.
    """
    text = line.rstrip("\r\n")
    if not text.strip():
        msg = "Blank record line"
        raise ValueError(msg)

    fields = text.split(",", FIELD_COUNT - 1)
    fields += [""] * (FIELD_COUNT - len(fields))
    name, length_raw, category_raw, location_raw, balance_raw = fields

    category = Category.parse(category_raw)
    return Record.create(
        name=name,
        length=parse_leading_float(length_raw),
        category=category,
        location=make_location(category, location_raw),
        balance=parse_leading_float(balance_raw),
    )

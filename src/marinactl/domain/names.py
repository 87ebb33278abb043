"""Case-insensitive name comparison.

Names are the registry's business key. They are compared by folding each
character to lower case pairwise, giving an ordinary case-insensitive
lexicographic order usable both for sorting and for equality.
"""

from __future__ import annotations

from functools import cmp_to_key


def _fold(ch: str) -> int:
    return ord(ch.lower()[0])


def compare_names(a: str, b: str) -> int:
    """Compare two names ignoring case.

    Returns the difference between the first pair of differing folded
    characters. When one name is a prefix of the other, the shorter name
    sorts first.

    Examples:
        >>> compare_names("alice", "ALICE")
        0
        >>> compare_names("Ann", "bob") < 0
        True
        >>> compare_names("Bobby", "bob") > 0
        True
    """
    for ca, cb in zip(a, b, strict=False):
        diff = _fold(ca) - _fold(cb)
        if diff:
            return diff
    n = min(len(a), len(b))
    tail_a = _fold(a[n]) if len(a) > n else 0
    tail_b = _fold(b[n]) if len(b) > n else 0
    return tail_a - tail_b


def names_match(a: str, b: str) -> bool:
    """Whether two names are equal ignoring case."""
    return compare_names(a, b) == 0


name_sort_key = cmp_to_key(compare_names)

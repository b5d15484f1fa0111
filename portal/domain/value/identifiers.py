"""Strongly typed identifiers for portal entities.

WordPress keys every table with an unsigned integer, so identifiers wrap
``int`` rather than UUIDs.
"""

from typing import NewType, Optional

ArticleId = NewType("ArticleId", int)
CommentId = NewType("CommentId", int)
UserId = NewType("UserId", int)

# Largest key the BIGINT columns can hold
MAX_ID = 2**63 - 1


def parse_id(identifier: str) -> Optional[int]:
    """Read a URL segment as a row ID.

    Returns None unless the segment is made of ASCII digits and fits a
    BIGINT column, so callers can fall back to matching it as a slug.
    """
    if not (identifier.isascii() and identifier.isdecimal()):
        return None
    value = int(identifier)
    if value > MAX_ID:
        return None
    return value

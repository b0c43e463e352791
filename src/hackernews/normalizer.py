"""Search hit normalization.

Pure data transformation layer that converts raw Algolia search hits into
the canonical ``Item`` representation.
"""

import re
from typing import List, Sequence

from hackernews.errors import ConversionError
from hackernews.models import Hit, Item

_OBJECT_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_object_id(object_id: str, index: int | None = None) -> int:
    """Parse a hit ``objectID`` as a base-10 integer.

    Args:
        object_id: Identifier as transmitted by the API
        index: Position of the hit, attached to the error

    Returns:
        Integer identifier

    Raises:
        ConversionError: If the value is not a plain integer
    """
    if not isinstance(object_id, str) or not _OBJECT_ID_PATTERN.fullmatch(object_id):
        raise ConversionError(object_id, index=index)
    return int(object_id)


def hit_to_item(hit: Hit, index: int | None = None) -> Item:
    """Normalize a single hit.

    Body text is never taken from a hit and the hit has no nested replies,
    so ``text`` stays ``None`` and ``children`` empty.
    """
    return Item(
        id=parse_object_id(hit.object_id, index),
        created_at=hit.created_at,
        created_at_i=hit.created_at_i,
        author=hit.author,
        title=hit.title,
        url=hit.url,
        text=None,
        points=hit.points,
        parent_id=hit.parent_id,
        story_id=hit.story_id,
        num_comments=hit.num_comments,
        children=[],
    )


def hits_to_items(hits: Sequence[Hit]) -> List[Item]:
    """Normalize search hits, preserving order.

    Args:
        hits: Raw hits of one search page

    Returns:
        One ``Item`` per hit, same order

    Raises:
        ConversionError: If any hit has a malformed identifier; no partial
            list is returned
    """
    return [hit_to_item(hit, index) for index, hit in enumerate(hits)]

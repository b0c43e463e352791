"""Comment thread reconstruction.

Single-item lookups return the whole reply tree, including removed or
deleted comments that come back without an author or text. These helpers
drop such nodes and order every level chronologically. They return new
objects and never modify their input.
"""

from typing import List, Sequence

from hackernews.models import Item


def is_valid_comment(item: Item) -> bool:
    """A comment is kept only when both author and text are present."""
    return item.author is not None and item.text is not None


def filter_children(children: Sequence[Item]) -> List[Item]:
    """Drop malformed comments together with their whole subtree.

    Valid descendants of a rejected node are not promoted.
    """
    return [
        child.model_copy(update={"children": filter_children(child.children)})
        for child in children
        if is_valid_comment(child)
    ]


def sort_children(children: Sequence[Item]) -> List[Item]:
    """Order siblings by ascending ``created_at_i`` at every level.

    The sort is stable, ties keep their input order.
    """
    ordered = sorted(children, key=lambda child: child.created_at_i)
    return [
        child.model_copy(update={"children": sort_children(child.children)})
        for child in ordered
    ]


def reconstruct_thread(item: Item) -> Item:
    """Filter the whole reply tree of ``item``, then sort it.

    Fields of ``item`` itself are left as they are; only its children are
    subject to filtering.

    Args:
        item: Item as returned by the single-item endpoint

    Returns:
        A copy of ``item`` with a cleaned, ordered thread
    """
    cleaned = filter_children(item.children)
    return item.model_copy(update={"children": sort_children(cleaned)})

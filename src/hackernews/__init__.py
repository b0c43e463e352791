"""Hacker News client built on the Algolia HN Search API.

Fetches front page, newest, Ask HN and Show HN listings, single items with
their comment threads, and raw relevance or date searches.
"""

from hackernews.client import HackerNewsClient
from hackernews.errors import (
    APIError,
    ConversionError,
    DecodeError,
    HackerNewsError,
    TransportError,
)
from hackernews.models import Highlight, HighlightResult, Hit, Item, SearchResult
from hackernews.normalizer import hits_to_items
from hackernews.query import SearchRequest, inject_key
from hackernews.thread import filter_children, reconstruct_thread, sort_children

__all__ = [
    "HackerNewsClient",
    "SearchRequest",
    "SearchResult",
    "Item",
    "Hit",
    "Highlight",
    "HighlightResult",
    "inject_key",
    "hits_to_items",
    "filter_children",
    "sort_children",
    "reconstruct_thread",
    "HackerNewsError",
    "TransportError",
    "APIError",
    "DecodeError",
    "ConversionError",
]

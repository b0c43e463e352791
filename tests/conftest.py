"""Pytest configuration and shared payload fixtures."""

import shutil
from pathlib import Path

import pytest

from hackernews.utils.config import reset_settings


@pytest.fixture(scope="session", autouse=True)
def backup_env_file():
    """Backup .env file during test session to prevent pollution."""
    env_file = Path(".env")
    backup_file = Path(".env.test_backup")

    if env_file.exists():
        shutil.copy(env_file, backup_file)
        env_file.unlink()

    yield

    if backup_file.exists():
        shutil.move(backup_file, env_file)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default settings."""
    for name in ("HN_API_BASE_URL", "API_TIMEOUT", "HN_HITS_PER_PAGE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def make_hit(object_id: str = "1", **overrides) -> dict:
    """Build a raw search hit as returned by the API."""
    hit = {
        "objectID": object_id,
        "title": f"Story {object_id}",
        "url": f"https://example.com/{object_id}",
        "author": "pg",
        "created_at": "2024-01-15T10:00:00.000Z",
        "created_at_i": 1705312800,
        "points": 120,
        "story_text": None,
        "comment_text": None,
        "num_comments": 42,
        "story_id": None,
        "story_title": None,
        "story_url": None,
        "parent_id": None,
        "_tags": ["story", "author_pg", f"story_{object_id}"],
        "_highlightResult": {
            "title": {"value": f"Story {object_id}", "matchLevel": "none", "matchedWords": []},
            "author": {"value": "pg", "matchLevel": "none", "matchedWords": []},
        },
        "children": [101, 102],
    }
    hit.update(overrides)
    return hit


def make_search_payload(hits: list[dict], **overrides) -> dict:
    """Build a raw search response body."""
    payload = {
        "hits": hits,
        "nbHits": 1000,
        "page": 0,
        "nbPages": 30,
        "hitsPerPage": 34,
        "exhaustiveNbHits": False,
        "query": "",
        "params": "advancedSyntax=true&analytics=true&analyticsTags=backend&tags=front_page",
        "processingTimeMS": 3,
    }
    payload.update(overrides)
    return payload


def make_comment(
    item_id: int,
    created_at_i: int,
    children: list[dict] | None = None,
    author: str | None = "commenter",
    text: str | None = "<p>Nice</p>",
) -> dict:
    """Build a raw comment node of a single-item response."""
    return {
        "id": item_id,
        "created_at": "2024-01-15T10:00:00.000Z",
        "created_at_i": created_at_i,
        "type": "comment",
        "author": author,
        "title": None,
        "url": None,
        "text": text,
        "points": None,
        "parent_id": 1,
        "story_id": 1,
        "children": children or [],
    }


def make_item(children: list[dict] | None = None, **overrides) -> dict:
    """Build a raw single-item response for a story."""
    item = {
        "id": 1,
        "created_at": "2006-10-09T18:21:51.000Z",
        "created_at_i": 1160418111,
        "type": "story",
        "author": "pg",
        "title": "Y Combinator",
        "url": "http://ycombinator.com",
        "text": None,
        "points": 57,
        "parent_id": None,
        "story_id": 1,
        "children": children or [],
    }
    item.update(overrides)
    return item


@pytest.fixture
def hit_factory():
    return make_hit


@pytest.fixture
def search_payload_factory():
    return make_search_payload


@pytest.fixture
def comment_factory():
    return make_comment


@pytest.fixture
def item_factory():
    return make_item

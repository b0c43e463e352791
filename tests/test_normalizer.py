"""Tests for search hit normalization."""

from datetime import datetime

import pytest

from hackernews.errors import ConversionError
from hackernews.models import Hit
from hackernews.normalizer import hits_to_items, parse_object_id


class TestParseObjectId:
    """Tests for objectID parsing."""

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("38912345", 38912345), ("+7", 7)])
    def test_valid_ids(self, raw, expected):
        """Test that integer strings are parsed."""
        assert parse_object_id(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", " 12", "1_000", "12.5"])
    def test_invalid_ids(self, raw):
        """Test that anything but a plain integer is rejected."""
        with pytest.raises(ConversionError) as exc_info:
            parse_object_id(raw, index=4)

        assert exc_info.value.value == raw
        assert exc_info.value.index == 4


class TestHitsToItems:
    """Tests for hit to item mapping."""

    def test_fields_are_copied(self, hit_factory):
        """Test that hit fields are renamed and copied onto the item."""
        hit = Hit.model_validate(
            hit_factory("8863", parent_id=None, story_id=8863, points=104, num_comments=71)
        )

        [item] = hits_to_items([hit])

        assert item.id == 8863
        assert item.title == "Story 8863"
        assert item.url == "https://example.com/8863"
        assert item.author == "pg"
        assert item.points == 104
        assert item.num_comments == 71
        assert item.story_id == 8863
        assert item.parent_id is None
        assert item.created_at_i == 1705312800
        assert isinstance(item.created_at, datetime)

    def test_text_and_children_never_populated(self, hit_factory):
        """Test that hits never contribute body text or nested replies."""
        hit = Hit.model_validate(
            hit_factory("5", story_text="<p>self post</p>", comment_text="hello")
        )

        [item] = hits_to_items([hit])

        assert item.text is None
        assert item.children == []

    def test_order_preserved(self, hit_factory):
        """Test that the output matches the input order one to one."""
        hits = [Hit.model_validate(hit_factory(str(i))) for i in (30, 10, 20)]

        items = hits_to_items(hits)

        assert [item.id for item in items] == [30, 10, 20]

    def test_empty_hits(self):
        """Test that no hits give no items."""
        assert hits_to_items([]) == []

    def test_malformed_id_fails_whole_mapping(self, hit_factory):
        """Test that a single bad objectID aborts the mapping."""
        hits = [
            Hit.model_validate(hit_factory("1")),
            Hit.model_validate(hit_factory("abc")),
            Hit.model_validate(hit_factory("3")),
        ]

        with pytest.raises(ConversionError) as exc_info:
            hits_to_items(hits)

        assert exc_info.value.value == "abc"
        assert exc_info.value.index == 1

    def test_hit_keeps_tags_and_highlights(self, hit_factory):
        """Test that the raw hit model exposes tags and highlights."""
        hit = Hit.model_validate(hit_factory("9"))

        assert hit.object_id == "9"
        assert "story" in hit.tags
        assert hit.highlight_result.title.value == "Story 9"
        assert hit.highlight_result.title.match_level == "none"
        assert hit.children == [101, 102]

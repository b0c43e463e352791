"""Data models for Hacker News search results and items.

Field names follow the Algolia HN Search API wire format so payloads can be
validated directly and dumped back with the same keys. Optional fields keep
``None`` (absent) apart from ``""`` (present but empty); the thread filter
relies on that distinction.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

HN_ITEM_URL = "https://news.ycombinator.com/item?id={id}"


class Item(BaseModel):
    """A story, comment, poll, poll option or job.

    Attributes:
        id: Numeric item identifier
        created_at: Creation time
        created_at_i: Creation time as epoch seconds, 0 when missing
        type: Item kind (story, comment, poll, pollopt, job)
        author: Username of the poster
        title: Story title
        url: External link of the story
        text: Body text (HTML); only populated by single-item lookup
        points: Point count
        parent_id: Parent item identifier
        story_id: Root story identifier
        num_comments: Comment count (stories only)
        children: Ordered replies
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    created_at: Optional[datetime] = None
    created_at_i: int = 0
    type: Optional[str] = None
    author: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    text: Optional[str] = None
    points: Optional[int] = None
    parent_id: Optional[int] = None
    story_id: Optional[int] = None
    num_comments: Optional[int] = None
    children: List["Item"] = Field(default_factory=list)

    @property
    def discussion_url(self) -> str:
        """Link to the item's page on news.ycombinator.com."""
        return HN_ITEM_URL.format(id=self.id)


class Highlight(BaseModel):
    """Words of a field that matched the search query."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    value: Optional[str] = None
    match_level: Optional[str] = Field(default=None, alias="matchLevel")
    matched_words: List[str] = Field(default_factory=list, alias="matchedWords")


class HighlightResult(BaseModel):
    """The ``_highlightResult`` block of a hit."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[Highlight] = None
    url: Optional[Highlight] = None
    author: Optional[Highlight] = None
    story_text: Optional[Highlight] = None
    comment_text: Optional[Highlight] = None


class Hit(BaseModel):
    """A flat search result record (story or comment).

    Hits never carry nested replies; ``children`` only lists reply ids.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    object_id: str = Field(alias="objectID")
    title: Optional[str] = None
    url: Optional[str] = None
    author: Optional[str] = None
    created_at: datetime
    created_at_i: int
    points: Optional[int] = None
    story_text: Optional[str] = None
    comment_text: Optional[str] = None
    num_comments: Optional[int] = None
    story_id: Optional[int] = None
    story_title: Optional[str] = None
    story_url: Optional[str] = None
    parent_id: Optional[int] = None
    relevancy_score: Optional[int] = None
    tags: List[str] = Field(default_factory=list, alias="_tags")
    highlight_result: Optional[HighlightResult] = Field(
        default=None, alias="_highlightResult"
    )
    children: List[int] = Field(default_factory=list)


class SearchResult(BaseModel):
    """One page of search results plus pagination metadata.

    ``items`` is derived 1:1 from ``hits`` by the client; ``hits`` is kept so
    callers can still reach tags and highlights.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    items: List[Item] = Field(default_factory=list)
    hits: List[Hit] = Field(default_factory=list)
    page: int = 0
    num_pages: int = Field(default=0, alias="nbPages")
    results_per_page: int = Field(default=0, alias="hitsPerPage")
    num_results: int = Field(default=0, alias="nbHits")
    exhaustive_num_results: bool = Field(default=False, alias="exhaustiveNbHits")
    query: str = ""
    params: str = ""
    processing_time_ms: int = Field(default=0, alias="processingTimeMS")

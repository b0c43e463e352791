"""Search request definition and query string building.

Pure data transformation from a ``SearchRequest`` into the query
parameters understood by the Algolia HN Search API.
"""

from typing import Dict
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict

POINTS_KEY = "points"
CREATED_AT_KEY = "created_at_i"
NUM_COMMENTS_KEY = "num_comments"


class SearchRequest(BaseModel):
    """Query and filters for a search.

    Attributes:
        query: Full-text query to search for (e.g. "Duo")
        tags: Tag filter expression. Available tags are story, comment,
            poll, pollopt, show_hn, ask_hn, front_page, author_:USERNAME
            and story_:ID. Tags are ANDed by default and ORed inside
            parentheses: ``author_pg,(story,poll)``.
        points: Points condition, e.g. "points > 500" or just "> 500"
        created_at: Creation time condition in epoch seconds, e.g.
            "created_at_i>X,created_at_i<Y" or ">X,<Y"
        num_comments: Comment count condition, e.g. "> 10"
        page: Page number
        results_per_page: Hits per page; the server default applies when 0
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    tags: str = ""
    points: str = ""
    created_at: str = ""
    num_comments: str = ""
    page: int = 0
    results_per_page: int = 0

    def numeric_filters(self) -> str:
        """Combine the three numeric conditions into one filter expression."""
        filters = []
        if self.points:
            filters.append(inject_key(self.points, POINTS_KEY))
        if self.created_at:
            filters.append(inject_key(self.created_at, CREATED_AT_KEY))
        if self.num_comments:
            filters.append(inject_key(self.num_comments, NUM_COMMENTS_KEY))
        return ",".join(filters)

    def to_params(self) -> Dict[str, str]:
        """Return only the wire parameters the caller actually set."""
        params: Dict[str, str] = {}
        if self.query:
            params["query"] = self.query
        if self.tags:
            params["tags"] = self.tags
        if self.page > 0:
            params["page"] = str(self.page)
        numeric_filters = self.numeric_filters()
        if numeric_filters:
            params["numericFilters"] = numeric_filters
        if self.results_per_page > 0:
            params["hitsPerPage"] = str(self.results_per_page)
        return params

    def querystring(self) -> str:
        """URL-encode the parameters, sorted by key."""
        return urlencode(sorted(self.to_params().items()))


def inject_key(condition: str, key: str) -> str:
    """Prefix every comma-separated clause of ``condition`` with ``key``.

    Allows both "points > 500" and "> 500". Clauses already starting with
    the key are left untouched.

    Args:
        condition: Comma-separated comparator clauses
        key: Field name to scope the clauses to

    Returns:
        Clauses joined back with commas

    Example:
        >>> inject_key("> 500", "points")
        'points> 500'
    """
    clauses = []
    for part in condition.split(","):
        clause = part.strip()
        if not clause.startswith(key):
            clause = key + clause
        clauses.append(clause)
    return ",".join(clauses)

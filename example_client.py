"""Example: print the front page and the thread of one story."""

import asyncio
import os
import sys

from hackernews import HackerNewsClient, HackerNewsError, Item, SearchRequest
from hackernews.utils.logging_config import get_logger, setup_logging

os.environ.setdefault("LOG_LEVEL", "DEBUG")


def print_thread(children: list[Item], depth: int = 0) -> None:
    for child in children:
        preview = (child.text or "").replace("\n", " ")[:70]
        print(f"{'  ' * depth}- {child.author}: {preview}")
        print_thread(child.children, depth + 1)


async def main(item_id: int) -> None:
    setup_logging(use_json=False)
    logger = get_logger("hackernews.example")

    async with HackerNewsClient() as hn:
        print("=== Front page ===")
        for story in await hn.front_page():
            print(f"{story.points or 0:>5}  {story.title}  ({story.discussion_url})")

        print("\n=== Recent stories over 300 points ===")
        result = await hn.search_recent(
            SearchRequest(tags="story", points="> 300", results_per_page=5)
        )
        logger.info(f"{result.num_results} matching stories, showing {len(result.items)}")
        for story in result.items:
            print(f"{story.points or 0:>5}  {story.title}")

        print(f"\n=== Item {item_id} ===")
        item = await hn.find(item_id)
        print(item.title)
        print_thread(item.children)


if __name__ == "__main__":
    try:
        asyncio.run(main(int(sys.argv[1]) if len(sys.argv) > 1 else 1))
    except HackerNewsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)

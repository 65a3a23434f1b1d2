# wp_tools/duplicates.py
"""
Duplicate detection by normalized title, and force-deletion of the extras.

Policy: within each group the oldest post (by creation date) is kept,
everything else is deleted. Ties keep whichever post was fetched first.
"""

import sys
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime

import requests

from wp_tools.models import DuplicateGroup, RemoteItem
from wp_tools.title_normalizer import normalize_title
from wp_tools.wordpress_client import WordPressAPIError, WordPressClient


def _creation_key(item: RemoteItem) -> tuple:
    # Undated posts sort after dated ones
    if item.created_at is None:
        return (1, datetime.min)
    return (0, item.created_at)


def group_duplicates(items: list[RemoteItem]) -> list[DuplicateGroup]:
    """Group posts sharing a normalized title.

    Only groups with two or more members are returned, in the order each
    title was first seen. Posts whose title normalizes to "" are ignored.
    """
    by_title = defaultdict(list)
    for item in items:
        key = normalize_title(item.title)
        if key:
            by_title[key].append(item)

    groups = []
    for key, posts in by_title.items():
        if len(posts) < 2:
            continue
        ordered = sorted(posts, key=_creation_key)
        groups.append(DuplicateGroup(
            normalized_title=key,
            keep=ordered[0],
            to_delete=tuple(ordered[1:]),
        ))
    return groups


def deletion_candidates(groups: list[DuplicateGroup]) -> list[RemoteItem]:
    return [post for group in groups for post in group.to_delete]


@dataclass
class DeletionResult:
    deleted_count: int = 0
    failed_count: int = 0
    failures: list = field(default_factory=list)   # [(post_id, message)]

    @property
    def attempted(self) -> int:
        return self.deleted_count + self.failed_count


def delete_all(client: WordPressClient, candidates: list[RemoteItem]) -> DeletionResult:
    """Permanently delete each candidate, one at a time.

    A failed delete is printed and counted; the remaining candidates are
    still processed.
    """
    result = DeletionResult()
    for post in candidates:
        try:
            client.delete_post(post.id, force=True)
        except (WordPressAPIError, requests.exceptions.RequestException) as e:
            print(f"✗ Failed to delete Post ID {post.id}: {e}", file=sys.stderr)
            result.failed_count += 1
            result.failures.append((post.id, str(e)))
            continue
        print(f"✓ Deleted Post ID {post.id}: \"{post.title}\"")
        result.deleted_count += 1
    return result

# wp_tools/report.py
"""Console output for the list and cleanup tools."""

from collections import defaultdict
from datetime import datetime
from typing import Optional

from wp_tools.models import DuplicateGroup, PostStatus, RemoteItem

RULE = "=" * 60
THIN_RULE = "-" * 60

# Display order for the status listing
STATUS_ORDER = [
    PostStatus.PUBLISH.value,
    PostStatus.DRAFT.value,
    PostStatus.PRIVATE.value,
    PostStatus.PENDING.value,
    PostStatus.FUTURE.value,
    PostStatus.TRASH.value,
]


def _fmt_date(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else "unknown"


def banner(title: str) -> None:
    print("\n" + RULE)
    print(title)
    print(RULE)


def group_by_status(posts: list[RemoteItem]) -> dict:
    """Bucket posts by status. Unknown statuses are left out, as in the listing."""
    by_status = defaultdict(list)
    for post in posts:
        if post.status in STATUS_ORDER:
            by_status[post.status].append(post)
    return by_status


def print_posts_by_status(posts: list[RemoteItem]) -> None:
    by_status = group_by_status(posts)
    banner("ALL POSTS")

    for status in STATUS_ORDER:
        bucket = by_status.get(status)
        if not bucket:
            continue
        print(f"\n{status.upper()} POSTS ({len(bucket)}):")
        print(THIN_RULE)
        for index, post in enumerate(bucket, start=1):
            print(f"{index}. [ID: {post.id}] {post.title or 'No title'}")
            if status == PostStatus.PUBLISH.value:
                print(f"   Date: {_fmt_date(post.created_at)} | Slug: {post.slug or 'N/A'}")
            elif status == PostStatus.DRAFT.value:
                print(f"   Modified: {_fmt_date(post.modified_at)} | Slug: {post.slug or 'N/A'}")


def print_status_summary(posts: list[RemoteItem]) -> None:
    by_status = group_by_status(posts)
    banner("SUMMARY")
    for status in STATUS_ORDER:
        if by_status.get(status):
            print(f"{status.upper()}: {len(by_status[status])}")


def print_duplicate_report(groups: list[DuplicateGroup]) -> None:
    banner("CHECKING FOR DUPLICATE TITLES")
    if not groups:
        print("✓ No duplicate titles found")
        return
    for group in groups:
        print(f"\n⚠  DUPLICATE TITLE: \"{group.title}\"")
        for post in group.members:
            print(f"   - Post ID {post.id} ({post.status})")
    print(f"\n⚠  Found {len(groups)} duplicate title(s)")


def print_deletion_preview(groups: list[DuplicateGroup]) -> int:
    """Show what will be kept and deleted. Returns the number of posts to delete."""
    print(f"\n⚠  Found {len(groups)} duplicate title(s) in drafts:\n")
    total = 0
    for index, group in enumerate(groups, start=1):
        print(f"{index}. \"{group.title}\"")
        print(f"   KEEP:   ID {group.keep.id} (created: {_fmt_date(group.keep.created_at)})")
        for post in group.to_delete:
            print(f"   DELETE: ID {post.id} (created: {_fmt_date(post.created_at)})")
        print()
        total += len(group.to_delete)

    print(f"Summary: {total} duplicate draft post(s) to delete, keeping {len(groups)} original(s)")
    return total


def print_deletion_summary(result, kept: int) -> None:
    banner("DELETION SUMMARY")
    print(f"✓ Successfully deleted: {result.deleted_count} post(s)")
    if result.failed_count:
        print(f"✗ Failed to delete: {result.failed_count} post(s)")
    print(f"Kept: {kept} original post(s)")

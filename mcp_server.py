"""
WordPress Cleanup MCP Server
============================
Exposes the post listing and duplicate-draft cleanup as an MCP server for
Claude Desktop and other MCP-compatible assistants.

Tools (read):
  list_posts                — posts with a given status, plus duplicate titles
  preview_duplicate_drafts  — which drafts would be kept / deleted

Tools (write):
  remove_duplicate_drafts   — force-delete duplicate drafts, keeping the oldest

Usage:
  python mcp_server.py              # stdio transport (default, for Claude Desktop)
  python mcp_server.py --sse        # SSE transport (for remote clients)
"""

import sys
import contextlib
from pathlib import Path

# ── sys.path fix ─────────────────────────────────────────────────────────────
_project_root = str(Path(__file__).parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from dotenv import load_dotenv
load_dotenv()

from mcp.server.fastmcp import FastMCP

from wp_tools.config import ConfigurationError, load_config
from wp_tools.duplicates import group_duplicates
from wp_tools.models import PostStatus
from wp_tools.remove_duplicates import remove_duplicate_drafts as run_removal
from wp_tools.wordpress_client import WordPressClient, fetch_all_posts

# =============================================================================
# Server
# =============================================================================

mcp = FastMCP(
    name="WordPress Cleanup",
    instructions=(
        "Tools for inspecting WordPress posts and removing duplicate drafts. "
        "Always run preview_duplicate_drafts before remove_duplicate_drafts; "
        "deletes are permanent."
    ),
)


def _client() -> WordPressClient:
    return WordPressClient(load_config())


def _quiet():
    # Progress output must not reach stdout: it carries the stdio protocol.
    return contextlib.redirect_stdout(sys.stderr)


def _format_groups(groups) -> list[str]:
    lines = []
    for group in groups:
        lines.append(f"\"{group.title}\"")
        lines.append(f"  KEEP:   ID {group.keep.id}")
        for post in group.to_delete:
            lines.append(f"  DELETE: ID {post.id}")
    return lines


# =============================================================================
# Tools — Read
# =============================================================================

@mcp.tool()
def list_posts(status: str = "any") -> str:
    """List WordPress posts and flag duplicate titles.

    Args:
        status: publish, draft, private, pending, future, trash or any.

    Returns:
        One line per post (ID, status, title), then any duplicate titles.
    """
    valid = {s.value for s in PostStatus}
    if status not in valid:
        return f"Error: status must be one of {', '.join(sorted(valid))}"
    try:
        with _quiet():
            posts = fetch_all_posts(_client(), status)
    except ConfigurationError as e:
        return f"Error: {e}"

    if not posts:
        return "No posts found."

    lines = [f"Found {len(posts)} posts:"]
    lines.extend(f"  [ID {p.id}] ({p.status}) {p.title or 'No title'}" for p in posts)

    groups = group_duplicates(posts)
    if groups:
        lines.append(f"\nDuplicate titles: {len(groups)}")
        lines.extend(_format_groups(groups))
    return "\n".join(lines)


@mcp.tool()
def preview_duplicate_drafts() -> str:
    """Show duplicate draft posts without deleting anything.

    Returns:
        Each duplicate title with the post that would be kept (oldest)
        and the posts that would be deleted.
    """
    try:
        with _quiet():
            groups, _ = run_removal(_client(), dry_run=True)
    except ConfigurationError as e:
        return f"Error: {e}"

    if not groups:
        return "No duplicate draft posts found."

    to_delete = sum(len(g.to_delete) for g in groups)
    lines = [f"Preview: {len(groups)} duplicate title(s), {to_delete} draft(s) would be deleted"]
    lines.extend(_format_groups(groups))
    return "\n".join(lines)


# =============================================================================
# Tools — Write
# =============================================================================

@mcp.tool()
def remove_duplicate_drafts() -> str:
    """Permanently delete duplicate draft posts, keeping the oldest of each title.

    ⚠️ WRITE OPERATION — deletes bypass the WordPress trash.
    Use preview_duplicate_drafts first to review the scope.

    Returns:
        Counts of deleted and failed posts, with failure messages.
    """
    try:
        with _quiet():
            groups, result = run_removal(_client())
    except ConfigurationError as e:
        return f"Error: {e}"

    if result is None:
        return "No duplicate draft posts found."

    lines = [
        f"Cleanup complete — {len(groups)} duplicate title(s)",
        f"  Deleted: {result.deleted_count}",
        f"  Failed:  {result.failed_count}",
        f"  Kept:    {len(groups)}",
    ]
    if result.failures:
        lines.append("Errors:")
        lines.extend(f"  ID {pid}: {message}" for pid, message in result.failures)
    return "\n".join(lines)


# =============================================================================
# Entry point
# =============================================================================

if __name__ == "__main__":
    if "--sse" in sys.argv:
        mcp.run(transport="sse")
    else:
        mcp.run()

# wp_tools/remove_duplicates.py
"""
Find draft posts that share a title and delete all but the oldest copy.

Deletes are permanent (force=true bypasses the trash).

Usage:
    python wp_tools/remove_duplicates.py              # preview, then delete
    python wp_tools/remove_duplicates.py --dry-run    # preview only
    python wp_tools/remove_duplicates.py --config path/to/config.yaml
"""

import sys
import argparse
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Fix Windows console encoding
if sys.platform == 'win32':
    sys.stdout.reconfigure(encoding='utf-8', errors='replace')
    sys.stderr.reconfigure(encoding='utf-8', errors='replace')

# Allow `python wp_tools/remove_duplicates.py` from the project root.
_project_root = str(Path(__file__).parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from wp_tools.config import ConfigurationError, load_config
from wp_tools.duplicates import DeletionResult, deletion_candidates, delete_all, group_duplicates
from wp_tools.models import PostStatus
from wp_tools.report import banner, print_deletion_preview, print_deletion_summary
from wp_tools.wordpress_client import WordPressClient, fetch_all_posts


def remove_duplicate_drafts(client: WordPressClient, dry_run: bool = False) -> tuple[list, Optional[DeletionResult]]:
    """Fetch drafts, preview the duplicate groups, then delete the extras.

    Returns (groups, result). result is None when nothing was deleted
    because there were no duplicates or dry_run was set.
    """
    drafts = fetch_all_posts(client, PostStatus.DRAFT)
    print(f"\nFound {len(drafts)} draft posts")

    groups = group_duplicates(drafts)
    if not groups:
        print("✓ No duplicate draft posts found!")
        return groups, None

    print_deletion_preview(groups)
    if dry_run:
        print("\nDry run — no posts deleted.")
        return groups, None

    print("\nStarting deletion...\n")
    result = delete_all(client, deletion_candidates(groups))
    print_deletion_summary(result, kept=len(groups))
    return groups, result


def main(argv: list = None) -> int:
    parser = argparse.ArgumentParser(description="Delete duplicate WordPress draft posts, keeping the oldest")
    parser.add_argument("--config", type=str, help="Path to config.yaml (default: auto-discover from CWD or project root)")
    parser.add_argument("--dry-run", action="store_true", help="Show duplicates without deleting anything")
    args = parser.parse_args(argv)

    load_dotenv()
    try:
        config = load_config(args.config)
    except (ConfigurationError, FileNotFoundError) as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    banner("Remove Duplicate Drafts")
    print(f"WordPress: {config.site_url}")

    try:
        remove_duplicate_drafts(WordPressClient(config), dry_run=args.dry_run)
    except Exception as e:
        print(f"✗ Fatal error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

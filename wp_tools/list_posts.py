# wp_tools/list_posts.py
"""
List WordPress posts grouped by status and report duplicate titles.
Read-only: nothing is modified.

Usage:
    python wp_tools/list_posts.py                   # every status
    python wp_tools/list_posts.py --status draft
"""

import sys
import argparse
from pathlib import Path

from dotenv import load_dotenv

# Fix Windows console encoding
if sys.platform == 'win32':
    sys.stdout.reconfigure(encoding='utf-8', errors='replace')
    sys.stderr.reconfigure(encoding='utf-8', errors='replace')

_project_root = str(Path(__file__).parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from wp_tools.config import ConfigurationError, load_config
from wp_tools.duplicates import group_duplicates
from wp_tools.models import PostStatus
from wp_tools.report import print_duplicate_report, print_posts_by_status, print_status_summary
from wp_tools.wordpress_client import WordPressClient, fetch_all_posts


def list_posts(client: WordPressClient, status: str = PostStatus.ANY.value) -> list:
    posts = fetch_all_posts(client, status)
    print(f"\nTotal posts found: {len(posts)}")
    print_posts_by_status(posts)
    print_status_summary(posts)
    groups = group_duplicates(posts)
    print_duplicate_report(groups)
    return groups


def main(argv: list = None) -> int:
    parser = argparse.ArgumentParser(description="List WordPress posts and check for duplicate titles")
    parser.add_argument("--config", type=str, help="Path to config.yaml (default: auto-discover from CWD or project root)")
    parser.add_argument(
        "--status",
        default=PostStatus.ANY.value,
        choices=[s.value for s in PostStatus],
        help="Only list posts with this status (default: any)",
    )
    args = parser.parse_args(argv)

    load_dotenv()
    try:
        config = load_config(args.config)
    except (ConfigurationError, FileNotFoundError) as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    try:
        list_posts(WordPressClient(config), args.status)
    except Exception as e:
        print(f"✗ Fatal error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

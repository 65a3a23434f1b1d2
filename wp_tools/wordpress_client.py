# wp_tools/wordpress_client.py
"""
WordPress REST client for the posts collection.

Flow: GET /posts (paginated) → RemoteItem list;  DELETE /posts/{id}?force=true
"""

import sys
import base64
from typing import Optional

import requests

from wp_tools.config import WordPressConfig
from wp_tools.models import PostStatus, RemoteItem

# WordPress answers 400 with this code when asked for the page after the last one.
_INVALID_PAGE_CODE = "rest_post_invalid_page_number"


class WordPressAPIError(Exception):
    """HTTP >= 400 from the WordPress REST API."""

    def __init__(self, status_code: int, code: str = "", message: str = ""):
        self.status_code = status_code
        self.code = code
        self.message = message
        detail = f"{code}: {message}" if code else message
        super().__init__(f"{status_code} Error: {detail}" if detail else f"{status_code} Error")


# =============================================================================
# WordPress API Client
# =============================================================================

class WordPressClient:
    def __init__(self, config: WordPressConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.base_url = config.api_base
        self.auth_header = base64.b64encode(
            f"{config.username}:{config.app_password}".encode()
        ).decode()
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Basic {self.auth_header}",
            "Content-Type": "application/json"
        })

    def _check(self, response) -> None:
        if response.status_code < 400:
            return
        code, message = "", response.text[:500]
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            code = body.get("code") or ""
            message = body.get("message") or message
        raise WordPressAPIError(response.status_code, code, message)

    def get_posts_page(self, page: int, per_page: int, status: str = PostStatus.ANY.value) -> tuple:
        """Fetch one page of posts, newest first. Returns (posts, response headers)."""
        response = self.session.get(
            f"{self.base_url}/posts",
            params={
                "per_page": per_page,
                "page": page,
                "status": status,
                "orderby": "date",
                "order": "desc",
            },
            timeout=self.config.timeout,
        )
        self._check(response)
        posts = response.json()
        if not isinstance(posts, list):
            posts = []
        return posts, response.headers

    def delete_post(self, post_id: int, force: bool = True) -> dict:
        """Delete a post. force=True bypasses the trash."""
        response = self.session.delete(
            f"{self.base_url}/posts/{post_id}",
            params={"force": "true" if force else "false"},
            timeout=self.config.timeout,
        )
        self._check(response)
        try:
            return response.json()
        except ValueError:
            return {}


# =============================================================================
# Paginated fetch
# =============================================================================

def fetch_all_posts(client: WordPressClient, status: str = PostStatus.ANY.value) -> list[RemoteItem]:
    """Fetch every post with the given status.

    Stops at the first short or empty page. A failing request also stops the
    loop: the error is printed and the posts gathered so far are returned.
    """
    if isinstance(status, PostStatus):
        status = status.value
    per_page = client.config.per_page
    all_posts: list[RemoteItem] = []
    page = 1

    print(f"Fetching {status} posts from WordPress...")
    while True:
        try:
            posts, headers = client.get_posts_page(page, per_page, status)
        except WordPressAPIError as e:
            if e.status_code == 400 and e.code == _INVALID_PAGE_CODE:
                # Previous page was exactly full and the last one
                break
            print(f"✗ Error fetching posts (page {page}): {e}", file=sys.stderr)
            break
        except requests.exceptions.RequestException as e:
            print(f"✗ Error fetching posts (page {page}): {e}", file=sys.stderr)
            break

        if not posts:
            break

        for post in posts:
            try:
                all_posts.append(RemoteItem.from_api(post))
            except (KeyError, TypeError, ValueError):
                print(f"  Skipping malformed post on page {page}: {str(post)[:80]}", file=sys.stderr)
        total = headers.get("X-WP-Total", "?")
        total_pages = headers.get("X-WP-TotalPages", "?")
        print(f"  Page {page}/{total_pages} — {len(posts)} posts (total: {total})")

        if len(posts) < per_page:
            break
        page += 1

    print(f"  Total fetched: {len(all_posts)}")
    return all_posts

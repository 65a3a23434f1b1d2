# wp_tools/login.py
"""
Client for the site's session login endpoint (POST /login).

Mirrors what public/login.js does in the browser: form-encoded credentials,
JSON reply of {"success": bool, "error": str}. The session cookie is owned
by the server and stays on the passed-in requests.Session.

Usage:
    python wp_tools/login.py --username editor [--site https://example.com] [--remember]
"""

import os
import sys
import argparse
import getpass
from dataclasses import dataclass
from typing import Optional

import requests
from dotenv import load_dotenv

DEFAULT_LOGIN_ERROR = "Invalid username or password"
GENERIC_LOGIN_ERROR = "An error occurred. Please try again."


@dataclass
class LoginResult:
    success: bool
    error: Optional[str] = None


def submit_login(
    site_url: str,
    username: str,
    password: str,
    remember: bool = False,
    session: Optional[requests.Session] = None,
    timeout: int = 30,
) -> LoginResult:
    session = session or requests.Session()
    try:
        response = session.post(
            f"{site_url.rstrip('/')}/login",
            data={
                "username": username,
                "password": password,
                "rememberme": "forever" if remember else "",
            },
            timeout=timeout,
        )
        data = response.json()
    except (requests.exceptions.RequestException, ValueError):
        return LoginResult(success=False, error=GENERIC_LOGIN_ERROR)

    if not isinstance(data, dict):
        return LoginResult(success=False, error=GENERIC_LOGIN_ERROR)
    if response.ok and data.get("success"):
        return LoginResult(success=True)
    return LoginResult(success=False, error=data.get("error") or DEFAULT_LOGIN_ERROR)


def main(argv: list = None) -> int:
    parser = argparse.ArgumentParser(description="Log in to the site's session endpoint")
    parser.add_argument("--site", type=str, help="Site URL (default: WP_SITE_URL)")
    parser.add_argument("--username", type=str, help="Username (default: WP_USERNAME)")
    parser.add_argument("--remember", action="store_true", help="Ask for a long-lived session cookie")
    args = parser.parse_args(argv)

    load_dotenv()
    site_url = args.site or os.getenv("WP_SITE_URL", "")
    username = args.username or os.getenv("WP_USERNAME", "")
    if not site_url or not username:
        print("✗ Missing required settings: site URL and username", file=sys.stderr)
        return 1

    result = submit_login(site_url, username, getpass.getpass("Password: "), remember=args.remember)
    if not result.success:
        print(f"✗ {result.error}", file=sys.stderr)
        return 1
    print(f"✓ Logged in to {site_url} as {username}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

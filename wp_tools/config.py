# wp_tools/config.py
"""
Configuration for the WordPress tools.

Priority for each value:
  config.yaml  >  environment variable  >  built-in default

Credentials (WP_APP_PASSWORD) are always read from the environment / .env only.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_TIMEOUT = 30
DEFAULT_PER_PAGE = 100


class ConfigurationError(ValueError):
    """Raised when required settings are missing. Always fatal, before any request."""


@dataclass(frozen=True)
class WordPressConfig:
    site_url: str
    username: str
    app_password: str
    timeout: int = DEFAULT_TIMEOUT
    per_page: int = DEFAULT_PER_PAGE

    @property
    def api_base(self) -> str:
        return f"{self.site_url.rstrip('/')}/wp-json/wp/v2"


def find_config_file(explicit_path: str = None) -> Optional[Path]:
    """Locate config.yaml using a priority chain.

    1. Explicit --config path (if given)
    2. Current working directory
    3. Project root (one level above this package)
    """
    if explicit_path:
        p = Path(explicit_path)
        if p.exists():
            return p
        raise FileNotFoundError(f"Config file not found: {explicit_path}")

    cwd_config = Path.cwd() / "config.yaml"
    if cwd_config.exists():
        return cwd_config

    project_config = Path(__file__).parent.parent / "config.yaml"
    if project_config.exists():
        return project_config

    return None


def _read_yaml(path: Path) -> dict:
    try:
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{path.name} is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path.name} must contain a mapping at the top level")
    return data


def _text_setting(config: dict, key: str, *env_names: str) -> str:
    value = config.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigurationError(f"{key} must be a string, got {type(value).__name__}")
    if value:
        return value
    for name in env_names:
        if os.getenv(name):
            return os.getenv(name)
    return ""


def load_config(config_path: str = None) -> WordPressConfig:
    """Build the WordPressConfig for this run.

    Raises ConfigurationError when the site URL, username or application
    password is missing, or when config.yaml cannot be used.
    The page size is always DEFAULT_PER_PAGE.
    """
    config_file = find_config_file(config_path)
    config: dict = {}
    if config_file:
        config = _read_yaml(config_file)

    site_url = _text_setting(config, "wp_site_url", "WP_SITE_URL", "WP_SITE")
    username = _text_setting(config, "wp_username", "WP_USERNAME", "WP_USER")
    app_password = os.getenv("WP_APP_PASSWORD", "")   # credentials: .env only

    missing = [
        name for name, value in [
            ("WP_SITE_URL", site_url),
            ("WP_USERNAME", username),
            ("WP_APP_PASSWORD", app_password),
        ]
        if not value
    ]
    if missing:
        raise ConfigurationError(
            f"Missing required settings: {', '.join(missing)}. "
            "Set them in config.yaml or .env."
        )

    try:
        timeout = int(config.get("request_timeout") or os.getenv("WP_REQUEST_TIMEOUT", DEFAULT_TIMEOUT))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid request_timeout: {e}") from e
    if timeout <= 0:
        raise ConfigurationError("request_timeout must be positive")

    return WordPressConfig(
        site_url=site_url.rstrip("/"),
        username=username,
        app_password=app_password,
        timeout=timeout,
    )

from pathlib import Path

import pytest

from wp_tools.config import ConfigurationError, load_config

_ENV_VARS = ["WP_SITE_URL", "WP_SITE", "WP_USERNAME", "WP_USER", "WP_APP_PASSWORD", "WP_REQUEST_TIMEOUT"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path: Path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep auto-discovery away from any real config.yaml in the working tree
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("wp_tools.config.find_config_file", _no_project_config)


def _no_project_config(explicit_path=None):
    if explicit_path:
        path = Path(explicit_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {explicit_path}")
        return path
    cwd_config = Path.cwd() / "config.yaml"
    return cwd_config if cwd_config.exists() else None


def test_loads_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("WP_SITE_URL", "https://example.com/")
    monkeypatch.setenv("WP_USERNAME", "editor")
    monkeypatch.setenv("WP_APP_PASSWORD", "secret")
    config = load_config()
    assert config.site_url == "https://example.com"
    assert config.api_base == "https://example.com/wp-json/wp/v2"
    assert (config.timeout, config.per_page) == (30, 100)


def test_accepts_legacy_variable_names(monkeypatch) -> None:
    monkeypatch.setenv("WP_SITE", "https://legacy.example.com")
    monkeypatch.setenv("WP_USER", "admin")
    monkeypatch.setenv("WP_APP_PASSWORD", "secret")
    config = load_config()
    assert (config.site_url, config.username) == ("https://legacy.example.com", "admin")


@pytest.mark.parametrize("missing", ["WP_SITE_URL", "WP_USERNAME", "WP_APP_PASSWORD"])
def test_missing_setting_is_a_configuration_error(monkeypatch, missing) -> None:
    values = {"WP_SITE_URL": "https://example.com", "WP_USERNAME": "editor", "WP_APP_PASSWORD": "secret"}
    for name, value in values.items():
        if name != missing:
            monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError, match=missing):
        load_config()


def test_yaml_overrides_environment(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text(
        "wp_site_url: https://yaml.example.com\nwp_username: yaml-user\nrequest_timeout: 10\nper_page: 50\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("WP_SITE_URL", "https://env.example.com")
    monkeypatch.setenv("WP_USERNAME", "env-user")
    monkeypatch.setenv("WP_APP_PASSWORD", "secret")
    config = load_config()
    assert config.site_url == "https://yaml.example.com"
    assert config.username == "yaml-user"
    assert (config.timeout, config.per_page) == (10, 50)


def test_password_is_never_read_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text(
        "wp_site_url: https://example.com\nwp_username: editor\nwp_app_password: leaked\n",
        encoding="utf-8",
    )
    with pytest.raises(ConfigurationError, match="WP_APP_PASSWORD"):
        load_config(str(path))


def test_explicit_config_path_must_exist() -> None:
    with pytest.raises(FileNotFoundError):
        load_config("does-not-exist.yaml")


def _set_credentials(monkeypatch) -> None:
    monkeypatch.setenv("WP_SITE_URL", "https://example.com")
    monkeypatch.setenv("WP_USERNAME", "editor")
    monkeypatch.setenv("WP_APP_PASSWORD", "secret")


def test_page_size_is_fixed_at_100(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("per_page: 5\n", encoding="utf-8")
    _set_credentials(monkeypatch)
    assert load_config().per_page == 100


def test_malformed_yaml_is_a_configuration_error(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("wp_site_url: [unclosed\n", encoding="utf-8")
    _set_credentials(monkeypatch)
    with pytest.raises(ConfigurationError, match="not valid YAML"):
        load_config()


@pytest.mark.parametrize("line", ["wp_site_url: 123", "wp_username: [a, b]"])
def test_non_string_setting_is_a_configuration_error(monkeypatch, tmp_path: Path, line) -> None:
    (tmp_path / "config.yaml").write_text(line + "\n", encoding="utf-8")
    _set_credentials(monkeypatch)
    with pytest.raises(ConfigurationError, match="must be a string"):
        load_config()


def test_non_positive_timeout_is_rejected(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("request_timeout: -1\n", encoding="utf-8")
    _set_credentials(monkeypatch)
    with pytest.raises(ConfigurationError):
        load_config()

import os
from pathlib import Path

import pytest

from starred_monitor.config import Settings, load_environment, resolve_token
from starred_monitor.errors import ConfigurationError, ExitCode


def test_resolve_token_returns_value(settings):
    assert resolve_token(settings, {"USER_GITHUB_TOKEN": "ghp_abc"}) == "ghp_abc"


@pytest.mark.parametrize("environ", [{}, {"USER_GITHUB_TOKEN": ""}])
def test_resolve_token_missing_raises(settings, environ):
    with pytest.raises(ConfigurationError) as exc_info:
        resolve_token(settings, environ)

    assert exc_info.value.exit_code == ExitCode.NO_TOKEN_GIVEN
    assert "$USER_GITHUB_TOKEN environment variable not set." in str(exc_info.value)


def test_settings_defaults():
    settings = Settings()

    assert settings.readme_template_file == "README.tmpl"
    assert settings.index_template_file == "index.tmpl"
    assert settings.readme_file == "README.md"
    assert settings.index_file == "index.html"
    assert settings.page_size == 100
    assert settings.output_mode == 0o644
    assert len(settings.step_descriptions) == 5


def test_settings_from_env_applies_overrides(tmp_path):
    settings = Settings.from_env({
        "STARRED_MONITOR_DIR": str(tmp_path),
        "GITHUB_GRAPHQL_URL": "http://localhost:9000/graphql",
    })

    assert settings.base_dir == tmp_path
    assert settings.graphql_endpoint == "http://localhost:9000/graphql"
    assert settings.path("README.md") == tmp_path / "README.md"


def test_settings_from_env_without_overrides_uses_cwd():
    assert Settings.from_env({}).base_dir == Path.cwd()


def test_load_environment_reads_dotenv_without_overriding(settings, monkeypatch):
    monkeypatch.delenv("USER_GITHUB_TOKEN", raising=False)
    monkeypatch.setenv("STARRED_MONITOR_EXISTING", "real")
    (settings.base_dir / ".env").write_text(
        "USER_GITHUB_TOKEN=from-dotenv\nSTARRED_MONITOR_EXISTING=dotenv\n", encoding="utf-8"
    )

    load_environment(settings)

    assert os.environ["USER_GITHUB_TOKEN"] == "from-dotenv"
    assert os.environ["STARRED_MONITOR_EXISTING"] == "real"

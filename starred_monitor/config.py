"""
Configuration for the starred repository monitor.

Holds the fixed file names, identities and labels used by a run, and
resolves the GitHub access token from the environment.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

from starred_monitor.errors import ConfigurationError

logger = logging.getLogger(__name__)

STEP_DESCRIPTIONS = (
    "Step1 - Check configuration: ",
    "Step2 - Get user starred repositories information via Github api: ",
    "Step3 - Render README template file with data: ",
    "Step4 - Render index.html template file with README content: ",
    "Step5 - Write output: ",
)


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, constructed once at startup."""

    token_env_name: str = "USER_GITHUB_TOKEN"
    readme_template_file: str = "README.tmpl"
    index_template_file: str = "index.tmpl"
    readme_file: str = "README.md"
    index_file: str = "index.html"
    user_name: str = "gududege"
    repository_name: str = "Starred-Repository-Monitor"
    separator_pattern: str = r"[_|-]+"
    page_size: int = 100
    languages_per_repository: int = 3
    output_mode: int = 0o644
    base_dir: Path = field(default_factory=Path.cwd)
    graphql_endpoint: str = "https://api.github.com/graphql"
    request_timeout: int = 30
    markdown_extensions: Tuple[str, ...] = ("tables", "fenced_code")
    step_descriptions: Tuple[str, ...] = STEP_DESCRIPTIONS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings, applying optional overrides from the environment.

        Args:
            environ: Environment mapping. If None, uses os.environ.

        Returns:
            Settings instance
        """
        if environ is None:
            environ = os.environ

        overrides = {}
        if environ.get("STARRED_MONITOR_DIR"):
            overrides["base_dir"] = Path(environ["STARRED_MONITOR_DIR"])
        if environ.get("GITHUB_GRAPHQL_URL"):
            overrides["graphql_endpoint"] = environ["GITHUB_GRAPHQL_URL"]
        return cls(**overrides)

    def path(self, name: str) -> Path:
        """Resolve a file name against the base directory."""
        return self.base_dir / name


def load_environment(settings: Settings) -> None:
    """Load a .env file from the base directory without overriding real variables."""
    env_file = settings.path(".env")
    if env_file.is_file():
        load_dotenv(env_file, override=False)
        logger.debug(f"Loaded environment from {env_file}")


def resolve_token(settings: Settings, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Return the GitHub access token.

    Raises:
        ConfigurationError: If the token variable is unset or empty
    """
    if environ is None:
        environ = os.environ

    token = environ.get(settings.token_env_name, "")
    if not token:
        raise ConfigurationError(f"${settings.token_env_name} environment variable not set.")
    return token

"""Fetch, render and write pipeline for the starred repository documents."""

import logging
import sys
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, TextIO

from starred_monitor.application.star_service import StarredRepositoryService
from starred_monitor.config import Settings, resolve_token
from starred_monitor.domain.repository import IndexContext, ReadmeContext, RepositoryInfo
from starred_monitor.domain.text import sanitize_title
from starred_monitor.errors import ExitCode, StarredMonitorError
from starred_monitor.infrastructure.files import read_template, write_documents
from starred_monitor.infrastructure.github_client import GitHubGraphQLClient
from starred_monitor.infrastructure.rendering import TemplateRenderer, convert_markdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedRun:
    """Everything step 1 resolves before any network call."""

    token: str
    title: str
    readme_template: str
    index_template: str


class StarredMonitorPipeline:
    """
    Runs the five stages in order, printing one progress line per stage.

    The first failing stage stops the run; its exit code is returned and no
    later stage runs.
    """

    def __init__(
        self,
        settings: Settings,
        environ: Optional[Mapping[str, str]] = None,
        client_factory: Optional[Callable[[str], GitHubGraphQLClient]] = None,
        renderer: Optional[TemplateRenderer] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            settings: Run configuration
            environ: Environment mapping used to resolve the token
            client_factory: Builds a GraphQL client from a token
            renderer: Template renderer
            stream: Console stream for progress lines. If None, uses stdout.
        """
        self.settings = settings
        self.environ = environ
        self.client_factory = client_factory or self._default_client
        self.renderer = renderer or TemplateRenderer()
        self.stream = stream or sys.stdout

    def _default_client(self, token: str) -> GitHubGraphQLClient:
        return GitHubGraphQLClient(
            token=token,
            endpoint=self.settings.graphql_endpoint,
            timeout=self.settings.request_timeout,
            max_languages=self.settings.languages_per_repository,
        )

    def _print(self, text: str, end: str = "\n") -> None:
        self.stream.write(text + end)
        self.stream.flush()

    def prepare(self) -> PreparedRun:
        """Resolve the token, the title and both templates."""
        token = resolve_token(self.settings, self.environ)
        title = sanitize_title(self.settings.repository_name, self.settings.separator_pattern)
        readme_template = read_template(self.settings.path(self.settings.readme_template_file))
        index_template = read_template(self.settings.path(self.settings.index_template_file))
        return PreparedRun(token, title, readme_template, index_template)

    def fetch(self, token: str) -> List[RepositoryInfo]:
        service = StarredRepositoryService(self.client_factory(token), batch_size=self.settings.page_size)
        return service.fetch_all()

    def render_readme(self, prepared: PreparedRun, repositories: List[RepositoryInfo]) -> str:
        context = ReadmeContext(
            title=prepared.title,
            repository_name=self.settings.repository_name,
            user_name=self.settings.user_name,
            repositories=repositories,
        )
        return self.renderer.render(prepared.readme_template, context)

    def render_index(self, prepared: PreparedRun, readme_content: str, repositories_count: int) -> str:
        fragment = convert_markdown(readme_content, self.settings.markdown_extensions)
        context = IndexContext(
            title=prepared.title,
            repository_name=self.settings.repository_name,
            readme_content=fragment,
            repositories_count=repositories_count,
        )
        return self.renderer.render(prepared.index_template, context)

    def write(self, readme_content: str, index_content: str) -> None:
        write_documents(
            [
                (self.settings.path(self.settings.readme_file), readme_content),
                (self.settings.path(self.settings.index_file), index_content),
            ],
            mode=self.settings.output_mode,
        )

    def run(self) -> ExitCode:
        """
        Run every stage.

        Returns:
            ExitCode.OK on success, otherwise the code of the failed stage
        """
        steps = self.settings.step_descriptions
        try:
            self._print(steps[0], end="")
            prepared = self.prepare()
            self._print("OK.")

            self._print(steps[1], end="")
            repositories = self.fetch(prepared.token)
            self._print("OK.")

            self._print(steps[2], end="")
            readme_content = self.render_readme(prepared, repositories)
            self._print("OK.")

            self._print(steps[3], end="")
            index_content = self.render_index(prepared, readme_content, len(repositories))
            self._print("OK.")

            self._print(steps[4], end="")
            self.write(readme_content, index_content)
            self._print("OK.")
        except StarredMonitorError as e:
            self._print(e.message)
            logger.debug(f"Stage failed with exit code {int(e.exit_code)}", exc_info=True)
            return e.exit_code

        self._print("Finished!")
        return ExitCode.OK

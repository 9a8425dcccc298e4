"""Exception hierarchy and process exit codes."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit code for each pipeline stage that can fail."""

    OK = 0
    REGEX_FAULT = 1
    NO_TOKEN_GIVEN = 2
    FILE_NOT_FOUND = 3
    GITHUB_QUERY = 4
    RENDER_TEMPLATE = 5
    CONVERT_MARKDOWN = 6
    WRITE_OUTPUT = 7
    UNEXPECTED_ERROR = 99


class StarredMonitorError(Exception):
    """Base exception for all pipeline failures."""

    exit_code = ExitCode.OK

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PatternCompileError(StarredMonitorError):
    """Raised when the title separator pattern does not compile."""

    exit_code = ExitCode.REGEX_FAULT


class ConfigurationError(StarredMonitorError):
    """Raised when the access token is missing from the environment."""

    exit_code = ExitCode.NO_TOKEN_GIVEN


class TemplateNotFoundError(StarredMonitorError):
    """Raised when a template file cannot be read."""

    exit_code = ExitCode.FILE_NOT_FOUND


class GitHubQueryError(StarredMonitorError):
    """Raised when the GitHub GraphQL API query fails."""

    exit_code = ExitCode.GITHUB_QUERY


class TemplateRenderError(StarredMonitorError):
    """Raised when a template cannot be rendered with its context."""

    exit_code = ExitCode.RENDER_TEMPLATE


class MarkdownConversionError(StarredMonitorError):
    """Raised when markdown cannot be converted to HTML."""

    exit_code = ExitCode.CONVERT_MARKDOWN


class OutputWriteError(StarredMonitorError):
    """Raised when an output document cannot be written."""

    exit_code = ExitCode.WRITE_OUTPUT

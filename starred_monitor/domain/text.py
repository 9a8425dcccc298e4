"""Text cleanup for titles and repository descriptions."""

import re

from starred_monitor.errors import PatternCompileError


def sanitize_title(name: str, pattern: str = r"[_|-]+") -> str:
    """
    Turn a project identifier into a display title.

    Every run of separator characters becomes a single space, then
    surrounding spaces are trimmed.

    Args:
        name: Project identifier such as "Starred-Repository-Monitor"
        pattern: Regular expression matching separator runs

    Returns:
        Display title

    Raises:
        PatternCompileError: If the pattern is not a valid regular expression
    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise PatternCompileError(f"Invalid separator pattern {pattern!r}: {e}") from e
    return regex.sub(" ", name).strip(" ")


def _is_alphanumeric(char: str) -> bool:
    return char.isalpha() or char.isnumeric()


def sanitize_description(text: str) -> str:
    """Strip leading and trailing characters that are neither letters nor numbers."""
    start = 0
    end = len(text)
    while start < end and not _is_alphanumeric(text[start]):
        start += 1
    while end > start and not _is_alphanumeric(text[end - 1]):
        end -= 1
    return text[start:end]

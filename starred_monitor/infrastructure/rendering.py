"""Template rendering and markdown conversion."""

import logging
from dataclasses import fields
from typing import Any, Dict, Sequence

import jinja2
import markdown

from starred_monitor.errors import MarkdownConversionError, TemplateRenderError

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """Renders template sources with a context dataclass; undefined names are errors."""

    def __init__(self):
        self.environment = jinja2.Environment(
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )

    @staticmethod
    def _context_values(context: Any) -> Dict[str, Any]:
        return {f.name: getattr(context, f.name) for f in fields(context)}

    def render(self, source: str, context: Any) -> str:
        """
        Render a template source.

        Args:
            source: Template text
            context: Dataclass instance whose fields become template variables

        Returns:
            Rendered text

        Raises:
            TemplateRenderError: On syntax errors, references to undefined names
                or any error raised while substituting values
        """
        try:
            template = self.environment.from_string(source)
            return template.render(self._context_values(context))
        except jinja2.TemplateError as e:
            raise TemplateRenderError(f"Template render failed: {e}") from e
        except Exception as e:
            logger.error(f"Template substitution failed: {e}")
            raise TemplateRenderError(f"Template render failed: {e}") from e


def convert_markdown(text: str, extensions: Sequence[str] = ("tables", "fenced_code")) -> str:
    """
    Convert markdown to an HTML fragment.

    Raises:
        MarkdownConversionError: If the converter fails
    """
    try:
        return markdown.markdown(text, extensions=list(extensions))
    except Exception as e:
        logger.error(f"Markdown conversion failed: {e}")
        raise MarkdownConversionError(f"Markdown conversion failed: {e}") from e

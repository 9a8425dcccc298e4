"""Template loading and output document persistence."""

import logging
import os
from pathlib import Path
from typing import Sequence, Tuple

from starred_monitor.errors import OutputWriteError, TemplateNotFoundError

logger = logging.getLogger(__name__)


def read_template(path: Path) -> str:
    """Read a template file as UTF-8; unreadable or undecodable files count as missing."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateNotFoundError(str(e)) from e


def write_documents(documents: Sequence[Tuple[Path, str]], mode: int = 0o644) -> None:
    """
    Write each document to its path, overwriting any existing content.

    Documents are written in order. When one write fails, earlier documents
    stay on disk and the run must be treated as failed.

    Args:
        documents: (path, text) pairs
        mode: Permission bits applied to every written file

    Raises:
        OutputWriteError: If any file cannot be written
    """
    for path, text in documents:
        try:
            path.write_text(text, encoding="utf-8")
            os.chmod(path, mode)
        except OSError as e:
            raise OutputWriteError(str(e)) from e
        logger.info(f"Wrote {len(text)} characters to {path}")

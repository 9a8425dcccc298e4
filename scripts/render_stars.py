#!/usr/bin/env python3
"""Script to render README.md and index.html from the viewer's starred repositories."""

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from starred_monitor.config import Settings, load_environment
from starred_monitor.application.pipeline import StarredMonitorPipeline
from starred_monitor.errors import ExitCode

logger = logging.getLogger(__name__)


def main():
    """Fetch starred repositories and write the rendered documents."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        settings = Settings.from_env()
        load_environment(settings)

        pipeline = StarredMonitorPipeline(settings)
        exit_code = pipeline.run()
        if exit_code:
            logger.error(f"Run failed with exit code {int(exit_code)}")
        return int(exit_code)

    except Exception as e:
        logger.error(f"Run failed: {e}", exc_info=True)
        return int(ExitCode.UNEXPECTED_ERROR)


if __name__ == "__main__":
    sys.exit(main())

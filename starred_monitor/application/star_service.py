"""Application service for collecting every starred repository."""

import logging
from typing import List, Optional

from starred_monitor.domain.repository import RepositoryInfo
from starred_monitor.errors import GitHubQueryError
from starred_monitor.infrastructure.github_client import GitHubGraphQLClient

logger = logging.getLogger(__name__)


class StarredRepositoryService:
    """Service that pages through the viewer's starred repositories."""

    BATCH_SIZE = 100  # Maximum records per GraphQL query

    def __init__(self, github_client: GitHubGraphQLClient, batch_size: int = BATCH_SIZE):
        """
        Initialize starred repository service.

        Args:
            github_client: GitHub API client
            batch_size: Records requested per page, capped at 100
        """
        self.github_client = github_client
        self.batch_size = min(batch_size, self.BATCH_SIZE)

    def fetch_all(self) -> List[RepositoryInfo]:
        """
        Fetch every starred repository, most recently starred first.

        Returns:
            Repositories in the order the API returned them

        Raises:
            GitHubQueryError: If a query fails or a page comes back empty
                before the reported total is reached
        """
        repositories: List[RepositoryInfo] = []
        cursor: Optional[str] = None
        count = self.batch_size

        while True:
            page = self.github_client.get_starred_page(count=count, cursor=cursor)
            total_count = page.total_count

            if not page.edges:
                if len(repositories) >= total_count:
                    break
                raise GitHubQueryError(
                    f"GitHub returned an empty page after {len(repositories)} "
                    f"of {total_count} starred repositories"
                )

            repositories.extend(edge.repository for edge in page.edges)
            logger.info(
                f"Fetched {len(repositories)}/{total_count} starred repositories "
                f"({len(page.edges)} in this page)"
            )

            if len(repositories) >= total_count:
                break

            # Move to next page
            cursor = page.edges[-1].cursor
            count = min(self.batch_size, total_count - len(repositories))

        logger.info(f"Fetch completed. Total starred repositories: {len(repositories)}")
        return repositories

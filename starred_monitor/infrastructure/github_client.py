"""GitHub GraphQL API client for the viewer's starred repositories."""

import logging
from typing import Any, Dict, Optional

import requests

from starred_monitor.domain.repository import RepositoryInfo, StarredEdge, StarredPage
from starred_monitor.domain.text import sanitize_description
from starred_monitor.errors import GitHubQueryError

logger = logging.getLogger(__name__)


STARRED_REPOSITORIES_QUERY = """
query($count: Int!, $cursor: String, $languages: Int!) {
    viewer {
        starredRepositories(
            first: $count,
            after: $cursor,
            orderBy: {field: STARRED_AT, direction: DESC}
        ) {
            isOverLimit
            totalCount
            edges {
                cursor
                node {
                    name
                    nameWithOwner
                    description
                    url
                    stargazerCount
                    forkCount
                    updatedAt
                    createdAt
                    pushedAt
                    isArchived
                    languages(first: $languages) {
                        nodes {
                            name
                        }
                    }
                }
            }
        }
    }
}
"""


class GitHubGraphQLClient:
    """Client for the GitHub GraphQL API. Failures are surfaced, never retried."""

    GRAPHQL_ENDPOINT = "https://api.github.com/graphql"
    MAX_LANGUAGES = 3

    def __init__(
        self,
        token: str,
        endpoint: Optional[str] = None,
        timeout: int = 30,
        max_languages: int = MAX_LANGUAGES,
    ):
        """
        Initialize GitHub GraphQL client.

        Args:
            token: GitHub personal access token
            endpoint: GraphQL endpoint URL. If None, uses the public GitHub API.
            timeout: Per-request timeout in seconds
            max_languages: Number of languages kept per repository
        """
        self.endpoint = endpoint or self.GRAPHQL_ENDPOINT
        self.timeout = timeout
        self.max_languages = max_languages
        self.headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

    def _execute_query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            GraphQL response data

        Raises:
            GitHubQueryError: If the request, the HTTP status or the GraphQL payload fails
        """
        payload = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = requests.post(
                self.endpoint,
                json=payload,
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise GitHubQueryError(f"Request to {self.endpoint} failed: {e}") from e

        if response.status_code == 401:
            raise GitHubQueryError("Authentication failed. Check your GitHub token.")
        if response.status_code != 200:
            raise GitHubQueryError(f"GitHub API returned HTTP {response.status_code}: {response.text}")

        try:
            data = response.json()
        except ValueError as e:
            raise GitHubQueryError(f"GitHub API returned a non-JSON body: {e}") from e

        if data.get("errors"):
            error_messages = [err.get("message", "") for err in data["errors"]]
            raise GitHubQueryError(f"GraphQL errors: {error_messages}")

        return data.get("data") or {}

    def get_starred_page(self, count: int, cursor: Optional[str] = None) -> StarredPage:
        """
        Fetch one page of the viewer's starred repositories, most recent star first.

        Args:
            count: Number of records to request (max 100 per query)
            cursor: Cursor of the last edge already received, None for the first page

        Returns:
            The page with its total count and edges
        """
        variables = {
            "count": min(count, 100),
            "cursor": cursor,
            "languages": self.max_languages,
        }
        data = self._execute_query(STARRED_REPOSITORIES_QUERY, variables)

        try:
            starred = data["viewer"]["starredRepositories"]
            total_count = starred["totalCount"]
            edges = [self._parse_edge(edge) for edge in starred.get("edges") or []]
        except (KeyError, TypeError) as e:
            raise GitHubQueryError(f"Unexpected GraphQL response shape: missing {e}") from e

        if starred.get("isOverLimit"):
            logger.warning("GitHub reports the starred repositories list is over its limit")

        return StarredPage(total_count=total_count, edges=edges)

    def _parse_edge(self, edge: Dict[str, Any]) -> StarredEdge:
        node = edge["node"]
        language_nodes = (node.get("languages") or {}).get("nodes") or []
        languages = tuple(lang["name"] for lang in language_nodes[: self.max_languages])

        repo = RepositoryInfo(
            name=node["name"],
            name_with_owner=node["nameWithOwner"],
            # Remove emoji and symbols around the description
            description=sanitize_description(node.get("description") or ""),
            url=node["url"],
            stargazer_count=node["stargazerCount"],
            fork_count=node["forkCount"],
            updated_at=node["updatedAt"],
            created_at=node["createdAt"],
            pushed_at=node.get("pushedAt") or "",
            is_archived=node["isArchived"],
            languages=languages,
        )
        return StarredEdge(cursor=edge["cursor"], repository=repo)

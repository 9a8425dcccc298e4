"""Domain entities for starred GitHub repositories."""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class RepositoryInfo:
    """Immutable snapshot of one starred repository."""

    name: str
    name_with_owner: str
    description: str
    url: str
    stargazer_count: int
    fork_count: int
    updated_at: str
    created_at: str
    pushed_at: str
    is_archived: bool
    languages: Tuple[str, ...]


@dataclass(frozen=True)
class StarredEdge:
    """One paginated record plus its continuation cursor."""

    cursor: str
    repository: RepositoryInfo


@dataclass(frozen=True)
class StarredPage:
    """One page of the viewer's starred repositories."""

    total_count: int
    edges: List[StarredEdge]


@dataclass(frozen=True)
class ReadmeContext:
    """Inputs of the markdown document template."""

    title: str
    repository_name: str
    user_name: str
    repositories: List[RepositoryInfo]


@dataclass(frozen=True)
class IndexContext:
    """Inputs of the HTML page template."""

    title: str
    repository_name: str
    readme_content: str
    repositories_count: int

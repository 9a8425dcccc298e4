from pathlib import Path

import pytest

from starred_monitor.config import Settings
from starred_monitor.domain.repository import RepositoryInfo, StarredEdge, StarredPage

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def make_repo(index: int, **overrides) -> RepositoryInfo:
    values = dict(
        name=f"repo-{index}",
        name_with_owner=f"owner/repo-{index}",
        description=f"Repository number {index}",
        url=f"https://github.com/owner/repo-{index}",
        stargazer_count=index * 10,
        fork_count=index,
        updated_at="2024-05-01T10:00:00Z",
        created_at="2020-01-01T00:00:00Z",
        pushed_at="2024-04-30T08:00:00Z",
        is_archived=False,
        languages=("Python", "Go"),
    )
    values.update(overrides)
    return RepositoryInfo(**values)


class FakeStarredClient:
    """Serves a fixed list of repositories the way the GraphQL API pages them."""

    def __init__(self, repositories, total_count=None, empty_after=None):
        self.repositories = list(repositories)
        self.total_count = len(self.repositories) if total_count is None else total_count
        self.empty_after = empty_after
        self.calls = []

    def get_starred_page(self, count, cursor=None):
        self.calls.append((count, cursor))
        start = 0 if cursor is None else int(cursor) + 1
        if self.empty_after is not None and start >= self.empty_after:
            batch = []
        else:
            batch = self.repositories[start:start + count]
        edges = [StarredEdge(cursor=str(start + i), repository=repo) for i, repo in enumerate(batch)]
        return StarredPage(total_count=self.total_count, edges=edges)


@pytest.fixture
def settings(tmp_path):
    return Settings(base_dir=tmp_path)


@pytest.fixture
def workdir(tmp_path):
    """Working directory holding the shipped README.tmpl and index.tmpl."""
    for name in ("README.tmpl", "index.tmpl"):
        (tmp_path / name).write_text((PROJECT_ROOT / name).read_text(encoding="utf-8"), encoding="utf-8")
    return tmp_path

"""
Pytest fixtures for testing code that uses the azdo VCS client.
"""

from typing import Generator

import pytest

from azdo.repo_name import split_repo_full_name
from azdo.testing.mock import MockVCSClient
from azdo.types.models import PullRequest, Repo


@pytest.fixture
def mock_vcs() -> Generator[MockVCSClient, None, None]:
    """
    Provide a MockVCSClient for testing.

    Example:
        ```python
        def test_autoplan(mock_vcs, sample_pull):
            mock_vcs.configure_list_modified_files(response=["infra/main.tf"])
            run_autoplan(mock_vcs, sample_pull)
            assert mock_vcs.was_called("update_status")
        ```
    """
    client = MockVCSClient()
    yield client
    client.reset()


@pytest.fixture
def sample_repo() -> Repo:
    """Provide a sample Repo."""
    return create_mock_repo()


@pytest.fixture
def sample_pull(sample_repo: Repo) -> PullRequest:
    """Provide a sample PullRequest against sample_repo."""
    return create_mock_pull(base_repo=sample_repo)


@pytest.fixture
def mock_vcs_ready_to_merge(mock_vcs: MockVCSClient) -> MockVCSClient:
    """Provide a MockVCSClient whose pull requests are approved and mergeable."""
    mock_vcs.configure_pull_is_approved(response=True)
    mock_vcs.configure_pull_is_mergeable(response=True)
    return mock_vcs


def create_mock_repo(full_name: str = "mock-org/mock-project/mock-repo") -> Repo:
    """Create a Repo with sensible defaults."""
    owner, project, name = split_repo_full_name(full_name)
    return Repo(
        full_name=full_name,
        clone_url=f"https://dev.azure.com/{owner}/{project}/_git/{name}",
    )


def create_mock_pull(
    num: int = 1,
    head_commit: str = "0123456789abcdef0123456789abcdef01234567",
    base_repo: Repo | None = None,
    head_branch: str = "feature",
    base_branch: str = "main",
    author: str = "mock-author@example.com",
) -> PullRequest:
    """Create a PullRequest with sensible defaults."""
    return PullRequest(
        num=num,
        head_commit=head_commit,
        base_repo=base_repo or create_mock_repo(),
        head_branch=head_branch,
        base_branch=base_branch,
        author=author,
    )


__all__ = [
    "mock_vcs",
    "mock_vcs_ready_to_merge",
    "sample_repo",
    "sample_pull",
    "create_mock_repo",
    "create_mock_pull",
]

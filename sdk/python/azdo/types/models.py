"""Models owned by the orchestration engine and passed into the VCS client."""

from dataclasses import dataclass
from enum import Enum

from azdo.repo_name import split_repo_full_name


class CommitStatus(str, Enum):
    """Provider-neutral status of a plan/apply run."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"
    ERROR = "error"


@dataclass(frozen=True)
class Repo:
    """A repository as the orchestration engine knows it."""

    full_name: str  # owner/project/repo
    clone_url: str | None = None

    @property
    def owner(self) -> str:
        return split_repo_full_name(self.full_name)[0]

    @property
    def project(self) -> str:
        return split_repo_full_name(self.full_name)[1]

    @property
    def name(self) -> str:
        return split_repo_full_name(self.full_name)[2]


@dataclass(frozen=True)
class PullRequest:
    """A pull request as the orchestration engine knows it."""

    num: int
    head_commit: str
    base_repo: Repo
    head_branch: str | None = None
    base_branch: str | None = None
    author: str | None = None

"""VCS client interface consumed by the orchestration engine."""

from typing import Protocol

from azdo.types.models import CommitStatus, PullRequest, Repo


class VCSClient(Protocol):
    def list_modified_files(self, repo: Repo, pull: PullRequest) -> list[str]:
        ...

    def create_comment(self, repo: Repo, pull_num: int, comment: str, command: str = "") -> None:
        ...

    def hide_prev_plan_comments(self, repo: Repo, pull_num: int) -> None:
        ...

    def pull_is_approved(self, repo: Repo, pull: PullRequest) -> bool:
        ...

    def pull_is_mergeable(self, repo: Repo, pull: PullRequest) -> bool:
        ...

    def update_status(
        self,
        repo: Repo,
        pull: PullRequest,
        state: CommitStatus,
        src: str,
        description: str,
        url: str = "",
    ) -> None:
        ...

    def merge_pull(self, pull: PullRequest) -> None:
        ...

    def markdown_pull_link(self, pull: PullRequest) -> str:
        ...

    def supports_single_file_download(self, repo: Repo) -> bool:
        ...

    def download_repo_config_file(self, pull: PullRequest) -> tuple[bool, bytes]:
        ...

"""
Azure DevOps implementation of the VCS client interface.

Translates the orchestration engine's small set of operations onto policy
evaluations, iterations, identity GUIDs and comment threads.
"""

import os
import posixpath
from typing import Any

from azdo.client import AzureDevopsClient
from azdo.comments import MAX_COMMENT_LENGTH, SEP_END, SEP_START, split_comment
from azdo.exceptions import IterationNotFoundError, MergeCommitNotFoundError, MergeFailedError
from azdo.identity import AUTO, UserIdentity
from azdo.logging import get_logger, safe_log_dict
from azdo.repo_name import split_repo_full_name
from azdo.status import (
    APPLY_STATUS_SRC,
    DEFAULT_BOT_NAME,
    git_status_state,
    status_context_from_src,
)
from azdo.transport import DEFAULT_HOSTNAME
from azdo.types.comments import CommentThread
from azdo.types.models import CommitStatus, PullRequest, Repo
from azdo.types.policies import PolicyEvaluation, PolicyEvaluationStatus
from azdo.types.pulls import (
    GitPullRequest,
    GitPullRequestCompletionOptions,
    MergeStatus,
    PullRequestStatus,
    Vote,
)

AUTOMERGE_COMMIT_MSG = "[Atlantis] Automatically merging after successful apply"

_APPROVING_VOTES = (Vote.APPROVED, Vote.APPROVED_WITH_SUGGESTIONS)

logger = get_logger()
identity_logger = get_logger("identity")


class AzureDevopsVCSClient:
    """
    VCS client for Azure DevOps.

    Example:
        ```python
        from azdo import AzureDevopsVCSClient, PullRequest, Repo

        vcs = AzureDevopsVCSClient(token="my-pat")
        repo = Repo("org/project/infra")
        pull = PullRequest(num=7, head_commit="abc123", base_repo=repo)

        vcs.create_comment(repo, pull.num, "Ran Plan for dir: `.`")
        if vcs.pull_is_approved(repo, pull) and vcs.pull_is_mergeable(repo, pull):
            vcs.merge_pull(pull)
        ```
    """

    def __init__(
        self,
        token: str | None = None,
        hostname: str = DEFAULT_HOSTNAME,
        user_guid: str | UserIdentity = AUTO,
        bot_name: str = DEFAULT_BOT_NAME,
        apply_status_src: str = APPLY_STATUS_SRC,
        merge_commit_message: str = AUTOMERGE_COMMIT_MSG,
        max_comment_length: int = MAX_COMMENT_LENGTH,
        timeout: float = AzureDevopsClient.DEFAULT_TIMEOUT,
        client: AzureDevopsClient | None = None,
    ) -> None:
        """
        Initialize the VCS client.

        Args:
            token: Personal access token (ignored when ``client`` is given)
            hostname: Azure DevOps host (default: dev.azure.com)
            user_guid: GUID merges are performed as; "auto" learns it from
                the first comment posted, "" disables merging
            bot_name: Genre prefix of every status this client creates
            apply_status_src: Status source of the engine's own apply status,
                which never blocks mergeability
            merge_commit_message: Message of the merge commit
            max_comment_length: Maximum size of a single comment
            timeout: Request timeout in seconds
            client: Preconfigured REST client
        """
        self.client = client or AzureDevopsClient(token=token or "", hostname=hostname, timeout=timeout)
        self.identity = user_guid if isinstance(user_guid, UserIdentity) else UserIdentity(user_guid)
        self.bot_name = bot_name
        self.apply_status_context = status_context_from_src(apply_status_src, bot_name)
        self.merge_commit_message = merge_commit_message
        self.max_comment_length = max_comment_length

    @classmethod
    def from_env(cls, timeout: float = AzureDevopsClient.DEFAULT_TIMEOUT) -> "AzureDevopsVCSClient":
        """
        Create a VCS client from environment variables.

        Environment variables:
            AZDO_TOKEN: Personal access token (required)
            AZDO_HOSTNAME: Host name (optional, default: dev.azure.com)
            AZDO_USER_GUID: User GUID (optional, default: auto; empty disables merges)
            AZDO_BOT_NAME: Status genre prefix (optional, default: Atlantis Bot)

        Raises:
            ConfigurationError: If AZDO_TOKEN is missing
        """
        return cls(
            client=AzureDevopsClient.from_env(timeout=timeout),
            user_guid=os.environ.get("AZDO_USER_GUID", AUTO),
            bot_name=os.environ.get("AZDO_BOT_NAME", DEFAULT_BOT_NAME),
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "AzureDevopsVCSClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _split_repo(self, repo: Repo) -> tuple[str, str, str]:
        owner, project, repo_name = split_repo_full_name(repo.full_name)
        if not repo_name:
            logger.debug("malformed repository full name %r", repo.full_name)
        return owner, project, repo_name

    def get_pull_request(self, repo: Repo, num: int) -> GitPullRequest:
        """Return the pull request as the host reports it."""
        owner, project, repo_name = self._split_repo(repo)
        return self.client.pulls.get_with_repo(owner, project, repo_name, num)

    def list_modified_files(self, repo: Repo, pull: PullRequest) -> list[str]:
        """
        Return the names of files modified in the pull request, relative to
        the repo root, e.g. ``parent/child/file.txt``.

        Renamed files are listed under both their new and their old path.

        Raises:
            MergeCommitNotFoundError: If the host has not computed the merge
                source commit yet
        """
        owner, project, repo_name = self._split_repo(repo)
        ad_pull = self.client.pulls.get_with_repo(owner, project, repo_name, pull.num)
        if not ad_pull.last_merge_source_commit:
            raise MergeCommitNotFoundError(pull.num)

        changes = self.client.git.get_changes(owner, project, repo_name, ad_pull.last_merge_source_commit)

        files = []
        for change in changes:
            files.append(_relative_path(change.path))
            # Renamed files count as modified at their old path too.
            if change.is_rename and change.source_server_item:
                files.append(_relative_path(change.source_server_item))
        return files

    def create_comment(self, repo: Repo, pull_num: int, comment: str, command: str = "") -> None:
        """
        Create a comment on a pull request.

        Comments longer than the maximum comment length are split into
        several comments, posted in order. If a post fails the remaining
        chunks are not posted and the error propagates.
        """
        owner, project, repo_name = self._split_repo(repo)
        chunks = split_comment(comment, self.max_comment_length, SEP_END, SEP_START)

        for chunk in chunks:
            thread = self.client.threads.create(owner, project, repo_name, pull_num, chunk)
            # Only an unsplit comment is trusted to identify us.
            if len(chunks) == 1:
                self._learn_identity(thread)

    def _learn_identity(self, thread: CommentThread) -> None:
        # A freshly created thread holds only our comment, so its author is us.
        if not self.identity.is_auto:
            return
        identity_logger.debug("user GUID set to auto")

        if len(thread.comments) != 1:
            identity_logger.debug(
                "user GUID set to auto but response identities != 1: %s",
                safe_log_dict({"id": thread.id, "comments": len(thread.comments)}),
            )
            return

        author = thread.comments[0].author
        if author is None or not author.id:
            identity_logger.debug("comment to cache user GUID from has no author id")
            return

        self.identity.try_set(author.id)

    def hide_prev_plan_comments(self, repo: Repo, pull_num: int) -> None:
        """Azure DevOps has no way to hide comments; nothing to do."""
        return None

    def pull_is_approved(self, repo: Repo, pull: PullRequest) -> bool:
        """
        Return True if the pull request was approved by a reviewer other
        than its author.
        """
        ad_pull = self.get_pull_request(repo, pull.num)
        author = ad_pull.created_by.unique_name if ad_pull.created_by else None

        for reviewer in ad_pull.reviewers:
            if author is not None and reviewer.identity.unique_name == author:
                continue
            if reviewer.vote in _APPROVING_VOTES:
                return True
        return False

    def pull_is_mergeable(self, repo: Repo, pull: PullRequest) -> bool:
        """Return True if the pull request can be merged."""
        owner, project, repo_name = self._split_repo(repo)
        ad_pull = self.client.pulls.get_with_repo(owner, project, repo_name, pull.num)

        if ad_pull.merge_status != MergeStatus.SUCCEEDED:
            return False
        if ad_pull.is_draft:
            return False
        if ad_pull.status != PullRequestStatus.ACTIVE:
            return False

        artifact_id = self.client.policy_evaluations.artifact_id(ad_pull.project_id or "", pull.num)
        evaluations = self.client.policy_evaluations.list(owner, project, artifact_id)

        for evaluation in evaluations:
            if not evaluation.is_enabled or evaluation.is_deleted:
                continue
            # Our own apply status must not keep us from applying.
            if self._is_apply_status(evaluation):
                continue
            if evaluation.is_blocking and evaluation.status != PolicyEvaluationStatus.APPROVED:
                return False
        return True

    def _is_apply_status(self, evaluation: PolicyEvaluation) -> bool:
        return (
            evaluation.status_genre == self.apply_status_context.genre
            and evaluation.status_name == self.apply_status_context.name
        )

    def update_status(
        self,
        repo: Repo,
        pull: PullRequest,
        state: CommitStatus,
        src: str,
        description: str,
        url: str = "",
    ) -> None:
        """
        Create a status on the pull request.

        When the pull request supports iterations the status is attached to
        the iteration built from the pull request's head commit.

        Raises:
            IterationNotFoundError: If no iteration matches the head commit
        """
        owner, project, repo_name = self._split_repo(repo)
        context = status_context_from_src(src, self.bot_name)

        source = self.client.pulls.get(owner, project, pull.num)

        iteration_id = None
        if source.supports_iterations:
            iterations = self.client.pulls.list_iterations(owner, project, repo_name, pull.num)
            for iteration in iterations:
                if iteration.source_ref_commit == pull.head_commit:
                    iteration_id = iteration.id
                    break
            if iteration_id is None or iteration_id < 1:
                raise IterationNotFoundError(pull.head_commit)

        self.client.pulls.create_status(
            owner,
            project,
            repo_name,
            pull.num,
            state=git_status_state(state),
            context=context,
            description=description,
            target_url=url or None,
            iteration_id=iteration_id,
        )

    def merge_pull(self, pull: PullRequest) -> None:
        """
        Merge the pull request with the no fast-forward strategy.

        If a branch policy disallows no fast-forward merges the merge fails.

        Raises:
            IdentityNotCachedError: If the user GUID has not been learned yet
            IdentityNotConfiguredError: If the user GUID was configured empty
            MergeFailedError: If the host reports a merge status other than succeeded
        """
        user_guid = self.identity.require()

        owner, project, repo_name = self._split_repo(pull.base_repo)
        result = self.client.pulls.complete(
            owner,
            project,
            repo_name,
            pull.num,
            GitPullRequestCompletionOptions(merge_commit_message=self.merge_commit_message),
            completed_by=user_guid,
        )
        if result.merge_status != MergeStatus.SUCCEEDED:
            raise MergeFailedError(result.merge_status.value, result.merge_failure_message)

    def markdown_pull_link(self, pull: PullRequest) -> str:
        """Return the markdown used in a comment to reference another pull request."""
        return f"!{pull.num}"

    def supports_single_file_download(self, repo: Repo) -> bool:
        return False

    def download_repo_config_file(self, pull: PullRequest) -> tuple[bool, bytes]:
        raise NotImplementedError("downloading a single file is not supported for Azure DevOps")


def _relative_path(path: str) -> str:
    return posixpath.normpath("./" + path)

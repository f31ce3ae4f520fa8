"""Pull requests resource client."""

from typing import TYPE_CHECKING, Any

from azdo.clients._paths import project_path, repo_path
from azdo.types.git import GitStatusContext, GitStatusState
from azdo.types.pulls import (
    GitPullRequest,
    GitPullRequestCompletionOptions,
    GitPullRequestIteration,
    IdentityRef,
    MergeStatus,
    PullRequestStatus,
    Reviewer,
    Vote,
)

if TYPE_CHECKING:
    from azdo.transport import HTTPTransport

STATUS_API_VERSION = "6.0-preview.1"


def parse_identity(data: dict[str, Any] | None) -> IdentityRef | None:
    """Parse an IdentityRef from API response data."""
    if not data:
        return None
    return IdentityRef(
        id=data.get("id"),
        unique_name=data.get("uniqueName"),
        display_name=data.get("displayName"),
    )


class PullsClient:
    """Client for pull request operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the pulls client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get_with_repo(
        self,
        owner: str,
        project: str,
        repo_name: str,
        pull_request_id: int,
        include_work_item_refs: bool = True,
    ) -> GitPullRequest:
        """
        Get a pull request scoped to its repository.

        Raises:
            NotFoundError: If the pull request does not exist
        """
        response = self.transport.request(
            method="GET",
            path=f"{repo_path(owner, project, repo_name)}/pullRequests/{pull_request_id}",
            operation="getting pull request",
            params={"includeWorkItemRefs": str(include_work_item_refs).lower()},
        )
        return self._parse_pull_request(response)

    def get(self, owner: str, project: str, pull_request_id: int) -> GitPullRequest:
        """Get a pull request by its project-wide id."""
        response = self.transport.request(
            method="GET",
            path=f"{project_path(owner, project)}/git/pullrequests/{pull_request_id}",
            operation="getting pull request",
        )
        return self._parse_pull_request(response)

    def list_iterations(
        self,
        owner: str,
        project: str,
        repo_name: str,
        pull_request_id: int,
    ) -> list[GitPullRequestIteration]:
        """List the iterations (pushes) of a pull request."""
        response = self.transport.request(
            method="GET",
            path=f"{repo_path(owner, project, repo_name)}/pullRequests/{pull_request_id}/iterations",
            operation="listing pull request iterations",
        )
        return [
            GitPullRequestIteration(
                id=iteration.get("id"),
                source_ref_commit=(iteration.get("sourceRefCommit") or {}).get("commitId"),
            )
            for iteration in response.get("value", [])
        ]

    def create_status(
        self,
        owner: str,
        project: str,
        repo_name: str,
        pull_request_id: int,
        state: GitStatusState,
        context: GitStatusContext,
        description: str,
        target_url: str | None = None,
        iteration_id: int | None = None,
    ) -> dict[str, Any]:
        """Create a status on a pull request, optionally bound to an iteration."""
        body: dict[str, Any] = {
            "state": state.value,
            "description": description,
            "context": {"name": context.name, "genre": context.genre},
        }
        if target_url:
            body["targetUrl"] = target_url
        if iteration_id is not None:
            body["iterationId"] = iteration_id

        return self.transport.request(
            method="POST",
            path=f"{repo_path(owner, project, repo_name)}/pullRequests/{pull_request_id}/statuses",
            operation="creating pull request status",
            body=body,
            api_version=STATUS_API_VERSION,
        )

    def complete(
        self,
        owner: str,
        project: str,
        repo_name: str,
        pull_request_id: int,
        completion_options: GitPullRequestCompletionOptions,
        completed_by: str,
        last_merge_source_commit: str | None = None,
    ) -> GitPullRequest:
        """
        Complete (merge) a pull request.

        Args:
            owner: Organization name
            project: Project name
            repo_name: Repository name
            pull_request_id: The pull request identifier
            completion_options: Merge strategy and commit message
            completed_by: GUID of the identity completing the pull request
            last_merge_source_commit: Source commit to complete; fetched when omitted

        Returns:
            The updated pull request, whose merge_status tells whether the merge succeeded
        """
        if last_merge_source_commit is None:
            pull = self.get_with_repo(owner, project, repo_name, pull_request_id)
            last_merge_source_commit = pull.last_merge_source_commit

        body: dict[str, Any] = {
            "status": PullRequestStatus.COMPLETED.value,
            "lastMergeSourceCommit": {"commitId": last_merge_source_commit},
            "completionOptions": completion_options.to_dict(),
            "autoCompleteSetBy": {"id": completed_by},
        }

        response = self.transport.request(
            method="PATCH",
            path=f"{repo_path(owner, project, repo_name)}/pullRequests/{pull_request_id}",
            operation="merging pull request",
            body=body,
        )
        return self._parse_pull_request(response)

    def _parse_pull_request(self, data: dict[str, Any]) -> GitPullRequest:
        """Parse pull request data from API response."""
        reviewers = []
        for reviewer in data.get("reviewers") or []:
            if not reviewer:
                continue
            reviewers.append(
                Reviewer(
                    identity=parse_identity(reviewer) or IdentityRef(id=None),
                    vote=Vote(int(reviewer.get("vote") or 0)),
                    is_required=reviewer.get("isRequired", False),
                )
            )

        repository = data.get("repository") or {}
        return GitPullRequest(
            pull_request_id=data.get("pullRequestId", 0),
            status=PullRequestStatus(data.get("status", "notSet")),
            merge_status=MergeStatus(data.get("mergeStatus", "notSet")),
            is_draft=data.get("isDraft", False),
            created_by=parse_identity(data.get("createdBy")),
            project_id=(repository.get("project") or {}).get("id"),
            last_merge_source_commit=(data.get("lastMergeSourceCommit") or {}).get("commitId"),
            supports_iterations=data.get("supportsIterations", False),
            title=data.get("title"),
            source_ref_name=data.get("sourceRefName"),
            target_ref_name=data.get("targetRefName"),
            merge_failure_message=data.get("mergeFailureMessage"),
            reviewers=reviewers,
        )

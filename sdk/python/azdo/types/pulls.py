"""Pull request data models as returned by the Azure DevOps REST API."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class MergeStatus(str, Enum):
    """Status of the merge attempted for a pull request."""

    NOT_SET = "notSet"
    QUEUED = "queued"
    CONFLICTS = "conflicts"
    SUCCEEDED = "succeeded"
    REJECTED_BY_POLICY = "rejectedByPolicy"
    FAILURE = "failure"

    @classmethod
    def _missing_(cls, value: object) -> "MergeStatus":
        return cls.NOT_SET


class PullRequestStatus(str, Enum):
    """Lifecycle state of a pull request."""

    NOT_SET = "notSet"
    ACTIVE = "active"
    ABANDONED = "abandoned"
    COMPLETED = "completed"

    @classmethod
    def _missing_(cls, value: object) -> "PullRequestStatus":
        return cls.NOT_SET


class Vote(IntEnum):
    """A reviewer's vote."""

    APPROVED = 10
    APPROVED_WITH_SUGGESTIONS = 5
    NO_VOTE = 0
    WAITING_FOR_AUTHOR = -5
    REJECTED = -10

    @classmethod
    def _missing_(cls, value: object) -> "Vote":
        return cls.NO_VOTE


@dataclass
class IdentityRef:
    """An Azure DevOps identity."""

    id: str | None
    unique_name: str | None = None
    display_name: str | None = None


@dataclass
class Reviewer:
    """A reviewer on a pull request together with their vote."""

    identity: IdentityRef
    vote: Vote = Vote.NO_VOTE
    is_required: bool = False


@dataclass
class GitPullRequest:
    """Pull request information."""

    pull_request_id: int
    status: PullRequestStatus
    merge_status: MergeStatus
    is_draft: bool
    created_by: IdentityRef | None
    project_id: str | None
    last_merge_source_commit: str | None
    supports_iterations: bool = False
    title: str | None = None
    source_ref_name: str | None = None
    target_ref_name: str | None = None
    merge_failure_message: str | None = None
    reviewers: list[Reviewer] = field(default_factory=list)


@dataclass
class GitPullRequestIteration:
    """One push to the pull request's source branch."""

    id: int | None
    source_ref_commit: str | None


@dataclass
class GitPullRequestCompletionOptions:
    """Options used when completing (merging) a pull request."""

    merge_commit_message: str
    merge_strategy: str = "noFastForward"
    squash_merge: bool = False
    bypass_policy: bool = False
    bypass_reason: str = ""
    delete_source_branch: bool = False
    transition_work_items: bool = True
    triggered_by_auto_complete: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "bypassPolicy": self.bypass_policy,
            "bypassReason": self.bypass_reason,
            "deleteSourceBranch": self.delete_source_branch,
            "mergeCommitMessage": self.merge_commit_message,
            "mergeStrategy": self.merge_strategy,
            "squashMerge": self.squash_merge,
            "transitionWorkItems": self.transition_work_items,
            "triggeredByAutoComplete": self.triggered_by_auto_complete,
        }

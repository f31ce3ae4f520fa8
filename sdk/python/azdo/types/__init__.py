"""azdo type definitions.

This module exports all data model types used by the client.
"""

from azdo.types.comments import Comment, CommentThread
from azdo.types.git import GitChange, GitStatusContext, GitStatusState, VersionControlChangeType
from azdo.types.models import CommitStatus, PullRequest, Repo
from azdo.types.policies import PolicyEvaluation, PolicyEvaluationStatus
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

__all__ = [
    # Orchestration engine models
    "CommitStatus",
    "PullRequest",
    "Repo",
    # Pull request types
    "GitPullRequest",
    "GitPullRequestCompletionOptions",
    "GitPullRequestIteration",
    "IdentityRef",
    "MergeStatus",
    "PullRequestStatus",
    "Reviewer",
    "Vote",
    # Git types
    "GitChange",
    "GitStatusContext",
    "GitStatusState",
    "VersionControlChangeType",
    # Policy types
    "PolicyEvaluation",
    "PolicyEvaluationStatus",
    # Comment types
    "Comment",
    "CommentThread",
]

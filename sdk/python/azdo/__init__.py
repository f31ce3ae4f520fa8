"""azdo - Azure DevOps VCS client for pull request automation."""

from azdo.base import VCSClient
from azdo.client import AzureDevopsClient
from azdo.comments import MAX_COMMENT_LENGTH, split_comment
from azdo.exceptions import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    AzureDevopsError,
    ConfigurationError,
    ConflictError,
    IdentityNotCachedError,
    IdentityNotConfiguredError,
    IterationNotFoundError,
    MergeCommitNotFoundError,
    MergeFailedError,
    NotFoundError,
    PreconditionError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from azdo.identity import AUTO, UNSET, UserIdentity
from azdo.logging import configure_logging, get_logger
from azdo.repo_name import split_repo_full_name
from azdo.status import git_status_state, status_context_from_src
from azdo.transport import HTTPTransport
from azdo.types.models import CommitStatus, PullRequest, Repo
from azdo.vcs import AzureDevopsVCSClient

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Clients
    "AzureDevopsVCSClient",
    "AzureDevopsClient",
    "VCSClient",
    # Models
    "CommitStatus",
    "PullRequest",
    "Repo",
    # Identity
    "AUTO",
    "UNSET",
    "UserIdentity",
    # Helpers
    "MAX_COMMENT_LENGTH",
    "git_status_state",
    "split_comment",
    "split_repo_full_name",
    "status_context_from_src",
    # Exceptions
    "AzureDevopsError",
    "APIError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "ConfigurationError",
    "PreconditionError",
    "IdentityNotCachedError",
    "IdentityNotConfiguredError",
    "IterationNotFoundError",
    "MergeCommitNotFoundError",
    "MergeFailedError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]

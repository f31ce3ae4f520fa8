"""Azure DevOps VCS exception classes."""


class AzureDevopsError(Exception):
    """Base exception for all azdo errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(AzureDevopsError):
    """Raised when client configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class APIError(AzureDevopsError):
    """Raised when the REST API answers with a non-2xx status or cannot be reached."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
        operation: str | None = None,
        request_id: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.operation = operation
        if operation and status_code is not None:
            message = f"{operation}: http response code {status_code}: {message}"
        elif operation:
            message = f"{operation}: {message}"
        super().__init__(code, message, request_id)


class AuthenticationError(APIError):
    """Raised when the access token is rejected (401, or 203 with a sign-in page)."""

    pass


class AuthorizationError(APIError):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(APIError):
    """Raised when a resource is not found (404)."""

    pass


class ConflictError(APIError):
    """Raised on conflicts (409)."""

    pass


class RateLimitedError(APIError):
    """Raised when rate limited (429)."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        status_code: int | None = 429,
        operation: str | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, status_code, operation, request_id)
        self.retry_after = retry_after


class ValidationError(APIError):
    """Raised on any other unsuccessful non-5xx response."""

    pass


class ServerError(APIError):
    """Raised on server errors (5xx) and connection failures."""

    pass


class PreconditionError(AzureDevopsError):
    """
    Raised when an operation cannot run because local state does not allow it.

    These are terminal for the adapter: retrying the same call without
    changing configuration or waiting for a state change will not help.
    """

    pass


class IdentityNotCachedError(PreconditionError):
    """Raised when the user GUID is still being discovered."""

    def __init__(self) -> None:
        super().__init__(
            "IDENTITY_NOT_CACHED",
            "user GUID set to auto but hasn't been cached yet, please try again",
        )


class IdentityNotConfiguredError(PreconditionError):
    """Raised when the user GUID was explicitly configured empty."""

    def __init__(self) -> None:
        super().__init__(
            "IDENTITY_NOT_CONFIGURED",
            "user GUID is empty, it must be configured for merges (AZDO_USER_GUID)",
        )


class IterationNotFoundError(PreconditionError):
    """Raised when iterations are supported but none matches the head commit."""

    def __init__(self, head_commit: str) -> None:
        self.head_commit = head_commit
        super().__init__(
            "ITERATION_NOT_FOUND",
            "supportsIterations was true but no iteration with source commit "
            f"{head_commit} was found",
        )


class MergeCommitNotFoundError(PreconditionError):
    """Raised when the host has not computed the pull request's merge source commit yet."""

    def __init__(self, pull_request_id: int) -> None:
        self.pull_request_id = pull_request_id
        super().__init__(
            "MERGE_COMMIT_NOT_FOUND",
            f"pull request {pull_request_id} has no merge source commit yet",
        )


class MergeFailedError(AzureDevopsError):
    """Raised when a completion request returns a merge status other than succeeded."""

    def __init__(self, merge_status: str, failure_message: str | None) -> None:
        self.merge_status = merge_status
        self.failure_message = failure_message
        super().__init__(
            "MERGE_FAILED",
            f"could not merge pull request: {failure_message or merge_status}",
        )

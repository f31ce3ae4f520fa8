"""Policy evaluations resource client."""

from typing import TYPE_CHECKING, Any

from azdo.clients._paths import project_path
from azdo.types.policies import PolicyEvaluation, PolicyEvaluationStatus

if TYPE_CHECKING:
    from azdo.transport import HTTPTransport

POLICY_API_VERSION = "6.0-preview.1"


class PolicyEvaluationsClient:
    """Client for branch policy evaluations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    @staticmethod
    def artifact_id(project_id: str, pull_request_id: int) -> str:
        """Return the artifact id policy evaluations of a pull request are scoped to."""
        return f"vstfs:///CodeReview/CodeReviewId/{project_id}/{pull_request_id}"

    def list(self, owner: str, project: str, artifact_id: str) -> list[PolicyEvaluation]:
        """List all policy evaluations for an artifact."""
        response = self.transport.request(
            method="GET",
            path=f"{project_path(owner, project)}/policy/evaluations",
            operation="getting policy evaluations",
            params={"artifactId": artifact_id},
            api_version=POLICY_API_VERSION,
        )
        return [self._parse_evaluation(evaluation) for evaluation in response.get("value", [])]

    def _parse_evaluation(self, data: dict[str, Any]) -> PolicyEvaluation:
        configuration = data.get("configuration") or {}
        settings = configuration.get("settings")
        return PolicyEvaluation(
            evaluation_id=data.get("evaluationId"),
            status=PolicyEvaluationStatus(data.get("status", "broken")),
            is_enabled=configuration.get("isEnabled", False),
            is_deleted=configuration.get("isDeleted", False),
            is_blocking=configuration.get("isBlocking", False),
            type_name=(configuration.get("type") or {}).get("displayName"),
            settings=settings if isinstance(settings, dict) else {},
        )

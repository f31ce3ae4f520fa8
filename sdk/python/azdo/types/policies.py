"""Branch policy evaluation data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PolicyEvaluationStatus(str, Enum):
    """Status of a policy which is running against a specific pull request."""

    QUEUED = "queued"
    RUNNING = "running"
    APPROVED = "approved"
    REJECTED = "rejected"
    NOT_APPLICABLE = "notApplicable"
    BROKEN = "broken"

    @classmethod
    def _missing_(cls, value: object) -> "PolicyEvaluationStatus":
        return cls.BROKEN


@dataclass
class PolicyEvaluation:
    """Result of one policy configuration evaluated against a pull request."""

    evaluation_id: str | None
    status: PolicyEvaluationStatus
    is_enabled: bool
    is_deleted: bool
    is_blocking: bool
    type_name: str | None = None
    settings: dict[str, Any] = field(default_factory=dict)

    @property
    def status_genre(self) -> str | None:
        return self.settings.get("statusGenre")

    @property
    def status_name(self) -> str | None:
        return self.settings.get("statusName")

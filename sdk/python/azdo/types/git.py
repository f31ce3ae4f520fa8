"""Git change and status data models."""

from dataclasses import dataclass
from enum import Enum


class VersionControlChangeType(str, Enum):
    """Kind of change a commit made to an item."""

    NONE = "none"
    ADD = "add"
    EDIT = "edit"
    ENCODING = "encoding"
    RENAME = "rename"
    DELETE = "delete"
    UNDELETE = "undelete"
    BRANCH = "branch"
    MERGE = "merge"
    LOCK = "lock"
    ROLLBACK = "rollback"
    SOURCE_RENAME = "sourceRename"
    TARGET_RENAME = "targetRename"
    PROPERTY = "property"
    ALL = "all"

    @classmethod
    def _missing_(cls, value: object) -> "VersionControlChangeType":
        return cls.NONE

    @classmethod
    def parse_flags(cls, value: str | None) -> frozenset["VersionControlChangeType"]:
        """Parse a comma separated flag list such as ``"edit, rename"``."""
        if not value:
            return frozenset()
        return frozenset(cls(part.strip()) for part in value.split(",") if part.strip())


class GitStatusState(str, Enum):
    """State of a pull request status."""

    NOT_SET = "notSet"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    ERROR = "error"
    NOT_APPLICABLE = "notApplicable"


@dataclass
class GitChange:
    """A single item changed by a commit."""

    path: str
    change_types: frozenset[VersionControlChangeType]
    source_server_item: str | None = None

    @property
    def is_rename(self) -> bool:
        return VersionControlChangeType.RENAME in self.change_types


@dataclass(frozen=True)
class GitStatusContext:
    """Status context; the branch policy UI shows it as ``genre/name``."""

    name: str
    genre: str

"""Pull request comment thread data models."""

from dataclasses import dataclass, field

from azdo.types.pulls import IdentityRef


@dataclass
class Comment:
    """A comment inside a pull request thread."""

    id: int | None
    content: str | None
    author: IdentityRef | None
    parent_comment_id: int = 0
    comment_type: str = "text"


@dataclass
class CommentThread:
    """A pull request comment thread."""

    id: int | None
    comments: list[Comment] = field(default_factory=list)
    status: str | None = None

"""Pull request comment threads resource client."""

from typing import TYPE_CHECKING, Any

from azdo.clients._paths import repo_path
from azdo.clients.pulls import parse_identity
from azdo.types.comments import Comment, CommentThread

if TYPE_CHECKING:
    from azdo.transport import HTTPTransport


class ThreadsClient:
    """Client for pull request comment threads."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def create(
        self,
        owner: str,
        project: str,
        repo_name: str,
        pull_request_id: int,
        content: str,
    ) -> CommentThread:
        """
        Start a new thread holding a single top-level text comment.

        Returns:
            The created thread, including the author the host recorded
        """
        body = {
            "comments": [
                {
                    "commentType": "text",
                    "content": content,
                    "parentCommentId": 0,
                }
            ],
        }

        response = self.transport.request(
            method="POST",
            path=f"{repo_path(owner, project, repo_name)}/pullRequests/{pull_request_id}/threads",
            operation="creating pull request comment",
            body=body,
        )
        return self._parse_thread(response)

    def _parse_thread(self, data: dict[str, Any]) -> CommentThread:
        comments = [
            Comment(
                id=comment.get("id"),
                content=comment.get("content"),
                author=parse_identity(comment.get("author")),
                parent_comment_id=comment.get("parentCommentId", 0),
                comment_type=comment.get("commentType", "text"),
            )
            for comment in data.get("comments") or []
            if comment
        ]
        return CommentThread(
            id=data.get("id"),
            comments=comments,
            status=data.get("status"),
        )

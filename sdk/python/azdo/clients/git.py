"""Git commits resource client."""

from typing import TYPE_CHECKING

from azdo.clients._paths import repo_path
from azdo.types.git import GitChange, VersionControlChangeType

if TYPE_CHECKING:
    from azdo.transport import HTTPTransport

CHANGES_PAGE_SIZE = 100


class GitClient:
    """Client for git commit operations."""

    def __init__(self, transport: "HTTPTransport", page_size: int = CHANGES_PAGE_SIZE) -> None:
        self.transport = transport
        self.page_size = page_size

    def get_changes(
        self,
        owner: str,
        project: str,
        repo_name: str,
        commit_id: str,
    ) -> list[GitChange]:
        """
        List every item changed by a commit.

        Pages through the result with ``top``/``skip`` until a short page is
        returned.
        """
        changes: list[GitChange] = []
        skip = 0
        while True:
            response = self.transport.request(
                method="GET",
                path=f"{repo_path(owner, project, repo_name)}/commits/{commit_id}/changes",
                operation="getting commit changes",
                params={"top": self.page_size, "skip": skip},
            )
            page = response.get("changes") or []
            for change in page:
                item = change.get("item") or {}
                changes.append(
                    GitChange(
                        path=item.get("path", ""),
                        change_types=VersionControlChangeType.parse_flags(change.get("changeType")),
                        source_server_item=change.get("sourceServerItem"),
                    )
                )
            if len(page) < self.page_size:
                return changes
            skip += len(page)

"""Shared fixtures: a routing fake of the Azure DevOps REST API."""

from collections.abc import Iterator
from typing import Any
from unittest.mock import patch

import httpx
import pytest

from azdo.types.models import PullRequest, Repo
from azdo.vcs import AzureDevopsVCSClient

REPO_FULL_NAME = "org/project/repo"
PROJECT_API = "org/project/_apis"
REPO_API = f"{PROJECT_API}/git/repositories/repo"
PROJECT_ID = "11111111-2222-3333-4444-555555555555"
HEAD_COMMIT = "a" * 40
BOT_GUID = "bot-guid-0000"


class FakeAzureDevops:
    """
    Stand-in for ``httpx.Client.request`` that answers from a route table.

    Responses registered for the same route are served in order; the last
    one keeps being served once the others are used up.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[httpx.Response]] = {}
        self.calls: list[dict[str, Any]] = []

    def add(
        self,
        method: str,
        path: str,
        json: Any = None,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
        text: str | None = None,
    ) -> None:
        response = httpx.Response(status_code, json=json, text=text, headers=headers)
        self.routes.setdefault((method, path), []).append(response)

    def __call__(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        self.calls.append({"method": method, "path": url, "params": params or {}, "json": json})
        queue = self.routes.get((method, url))
        if not queue:
            return httpx.Response(
                404,
                json={"message": f"no route for {method} {url}", "typeKey": "RouteNotFound"},
            )
        return queue.pop(0) if len(queue) > 1 else queue[0]

    def calls_to(self, method: str, path: str) -> list[dict[str, Any]]:
        return [c for c in self.calls if c["method"] == method and c["path"] == path]


def pull_payload(**overrides: Any) -> dict[str, Any]:
    """Build a pull request payload as returned by the REST API."""
    data: dict[str, Any] = {
        "pullRequestId": 1,
        "status": "active",
        "mergeStatus": "succeeded",
        "isDraft": False,
        "supportsIterations": False,
        "createdBy": {"id": "author-guid", "uniqueName": "author@example.com"},
        "repository": {"id": "repo-guid", "project": {"id": PROJECT_ID}},
        "lastMergeSourceCommit": {"commitId": "m" * 40},
        "reviewers": [],
    }
    data.update(overrides)
    return data


def thread_payload(*author_ids: str | None) -> dict[str, Any]:
    """Build a comment thread payload with one comment per author id."""
    comments = []
    for i, author_id in enumerate(author_ids, start=1):
        comment: dict[str, Any] = {"id": i, "content": "body", "commentType": "text"}
        if author_id is not None:
            comment["author"] = {"id": author_id, "displayName": "bot"}
        comments.append(comment)
    return {"id": 100, "comments": comments}


@pytest.fixture
def fake_api() -> FakeAzureDevops:
    return FakeAzureDevops()


@pytest.fixture
def repo() -> Repo:
    return Repo(full_name=REPO_FULL_NAME)


@pytest.fixture
def pull(repo: Repo) -> PullRequest:
    return PullRequest(num=1, head_commit=HEAD_COMMIT, base_repo=repo)


def make_vcs(fake_api: FakeAzureDevops, **kwargs: Any) -> Iterator[AzureDevopsVCSClient]:
    client = AzureDevopsVCSClient(token="test-pat", **kwargs)
    with patch.object(client.client.transport._client, "request", side_effect=fake_api):
        yield client
    client.close()


@pytest.fixture
def vcs(fake_api: FakeAzureDevops) -> Iterator[AzureDevopsVCSClient]:
    """A VCS client whose user GUID is still being discovered."""
    yield from make_vcs(fake_api)


@pytest.fixture
def merging_vcs(fake_api: FakeAzureDevops) -> Iterator[AzureDevopsVCSClient]:
    """A VCS client with a configured user GUID."""
    yield from make_vcs(fake_api, user_guid=BOT_GUID)

"""
Tests for the REST resource clients' request shapes and response parsing.
"""

from unittest.mock import patch

import httpx

from azdo.clients import GitClient, PolicyEvaluationsClient, PullsClient, ThreadsClient
from azdo.transport import HTTPTransport
from azdo.types.git import GitStatusContext, GitStatusState, VersionControlChangeType
from azdo.types.policies import PolicyEvaluationStatus
from azdo.types.pulls import MergeStatus, PullRequestStatus, Vote


def make_transport() -> HTTPTransport:
    return HTTPTransport(base_url="https://dev.azure.com/", token="pat")


def test_project_names_are_url_quoted() -> None:
    transport = make_transport()
    captured = {}

    def capture(method, path, params=None, json=None):
        captured["path"] = path
        return httpx.Response(200, json={"pullRequestId": 3})

    with patch.object(transport._client, "request", side_effect=capture):
        PullsClient(transport).get_with_repo("org", "My Project", "infra", 3)

    assert captured["path"] == "org/My%20Project/_apis/git/repositories/infra/pullRequests/3"


def test_pull_request_parsing_of_unknown_values() -> None:
    transport = make_transport()
    payload = {
        "pullRequestId": 3,
        "status": "somethingNew",
        "mergeStatus": "alsoNew",
        "reviewers": [{"uniqueName": "a@example.com", "vote": 7}, {"uniqueName": "b@example.com"}],
    }

    with patch.object(transport._client, "request", return_value=httpx.Response(200, json=payload)):
        pull = PullsClient(transport).get("org", "project", 3)

    assert pull.status is PullRequestStatus.NOT_SET
    assert pull.merge_status is MergeStatus.NOT_SET
    assert [r.vote for r in pull.reviewers] == [Vote.NO_VOTE, Vote.NO_VOTE]
    assert pull.created_by is None
    assert pull.project_id is None
    assert pull.last_merge_source_commit is None


def test_create_status_body() -> None:
    transport = make_transport()
    captured = {}

    def capture(method, path, params=None, json=None):
        captured.update(method=method, path=path, params=params, json=json)
        return httpx.Response(201, json={"id": 1})

    with patch.object(transport._client, "request", side_effect=capture):
        PullsClient(transport).create_status(
            "org", "project", "repo", 4,
            state=GitStatusState.FAILED,
            context=GitStatusContext(name="plan", genre="bot/atlantis"),
            description="Plan failed",
            iteration_id=3,
        )

    assert captured["method"] == "POST"
    assert captured["path"] == "org/project/_apis/git/repositories/repo/pullRequests/4/statuses"
    assert captured["params"]["api-version"] == "6.0-preview.1"
    assert captured["json"] == {
        "state": "failed",
        "description": "Plan failed",
        "context": {"name": "plan", "genre": "bot/atlantis"},
        "iterationId": 3,
    }


def test_change_type_flags() -> None:
    transport = make_transport()
    payload = {"changes": [
        {"item": {"path": "/a"}, "changeType": "rename"},
        {"item": {"path": "/b"}, "changeType": "edit, sourceRename"},
        {"item": {"path": "/c"}},
    ]}

    with patch.object(transport._client, "request", return_value=httpx.Response(200, json=payload)):
        changes = GitClient(transport).get_changes("org", "project", "repo", "abc")

    assert [c.is_rename for c in changes] == [True, False, False]
    assert changes[1].change_types == frozenset(
        {VersionControlChangeType.EDIT, VersionControlChangeType.SOURCE_RENAME}
    )
    assert changes[2].change_types == frozenset()


def test_policy_evaluation_parsing() -> None:
    transport = make_transport()
    payload = {"value": [
        {
            "evaluationId": "e1",
            "status": "running",
            "configuration": {
                "isEnabled": True,
                "isDeleted": False,
                "isBlocking": True,
                "settings": {"statusGenre": "bot/atlantis", "statusName": "plan"},
                "type": {"displayName": "Status"},
            },
        },
        {"evaluationId": "e2", "status": "approved", "configuration": {"settings": None}},
    ]}

    with patch.object(transport._client, "request", return_value=httpx.Response(200, json=payload)):
        evaluations = PolicyEvaluationsClient(transport).list("org", "project", "artifact")

    first, second = evaluations
    assert first.status is PolicyEvaluationStatus.RUNNING
    assert (first.status_genre, first.status_name) == ("bot/atlantis", "plan")
    assert first.type_name == "Status"
    assert second.settings == {}
    assert second.is_enabled is False


def test_thread_parsing() -> None:
    transport = make_transport()
    payload = {"id": 9, "status": "active", "comments": [
        {"id": 1, "content": "hi", "author": {"id": "guid", "uniqueName": "bot@example.com"}},
    ]}

    with patch.object(transport._client, "request", return_value=httpx.Response(200, json=payload)):
        thread = ThreadsClient(transport).create("org", "project", "repo", 1, "hi")

    assert thread.id == 9
    assert thread.comments[0].author.id == "guid"
    assert thread.comments[0].parent_comment_id == 0

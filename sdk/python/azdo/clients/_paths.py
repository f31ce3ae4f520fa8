"""URL path helpers shared by the resource clients."""

from urllib.parse import quote


def project_path(owner: str, project: str) -> str:
    return f"{quote(owner)}/{quote(project)}/_apis"


def repo_path(owner: str, project: str, repo_name: str) -> str:
    return f"{project_path(owner, project)}/git/repositories/{quote(repo_name)}"

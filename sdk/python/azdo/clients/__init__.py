"""Azure DevOps REST resource clients."""

from azdo.clients.git import GitClient
from azdo.clients.policies import PolicyEvaluationsClient
from azdo.clients.pulls import PullsClient
from azdo.clients.threads import ThreadsClient

__all__ = [
    "GitClient",
    "PolicyEvaluationsClient",
    "PullsClient",
    "ThreadsClient",
]

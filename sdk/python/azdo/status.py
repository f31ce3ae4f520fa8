"""Mapping of provider-neutral commit statuses onto pull request statuses."""

from azdo.types.git import GitStatusContext, GitStatusState
from azdo.types.models import CommitStatus

DEFAULT_BOT_NAME = "Atlantis Bot"

# Status source the orchestration engine reports apply results under.
APPLY_STATUS_SRC = "atlantis/apply"

_STATE_MAP = {
    CommitStatus.PENDING: GitStatusState.PENDING,
    CommitStatus.SUCCESS: GitStatusState.SUCCEEDED,
    CommitStatus.FAILED: GitStatusState.FAILED,
}


def git_status_state(state: CommitStatus | str) -> GitStatusState:
    """Map a commit status to the host's vocabulary; unknown values become ``error``."""
    try:
        state = CommitStatus(state)
    except ValueError:
        return GitStatusState.ERROR
    return _STATE_MAP.get(state, GitStatusState.ERROR)


def status_context_from_src(src: str, bot_name: str = DEFAULT_BOT_NAME) -> GitStatusContext:
    """
    Parse a slash formatted status source into a status context.

    The branch policy UI has a single field for a status where all text
    preceding the final ``/`` is treated as the genre.

    Examples:
        >>> status_context_from_src("apply")
        GitStatusContext(name='apply', genre='Atlantis Bot')
        >>> status_context_from_src("atlantis/plan")
        GitStatusContext(name='plan', genre='Atlantis Bot/atlantis')
    """
    head, sep, name = src.rpartition("/")
    if not sep:
        return GitStatusContext(name=src, genre=bot_name)
    return GitStatusContext(name=name, genre=f"{bot_name}/{head}")

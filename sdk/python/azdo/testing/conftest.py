"""
Pytest plugin for azdo testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["azdo.testing.conftest"]
"""

from azdo.testing.fixtures import (
    mock_vcs,
    mock_vcs_ready_to_merge,
    sample_pull,
    sample_repo,
)

__all__ = [
    "mock_vcs",
    "mock_vcs_ready_to_merge",
    "sample_pull",
    "sample_repo",
]

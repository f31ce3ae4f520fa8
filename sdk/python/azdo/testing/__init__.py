"""azdo testing utilities.

Provides a mock VCS client and fixtures for testing applications that use
the azdo VCS client.
"""

from azdo.testing.fixtures import create_mock_pull, create_mock_repo
from azdo.testing.mock import MockCall, MockResponse, MockVCSClient

__all__ = [
    "MockVCSClient",
    "MockCall",
    "MockResponse",
    "create_mock_repo",
    "create_mock_pull",
]

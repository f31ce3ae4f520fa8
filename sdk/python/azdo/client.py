"""
Azure DevOps REST client.

Provides a typed interface over the parts of the Azure DevOps REST API the
VCS adapter needs.
"""

import os
from typing import Any

from azdo.clients import GitClient, PolicyEvaluationsClient, PullsClient, ThreadsClient
from azdo.exceptions import ConfigurationError
from azdo.transport import DEFAULT_HOSTNAME, HTTPTransport, base_url_for_hostname


class AzureDevopsClient:
    """
    Main client for interacting with the Azure DevOps REST API.

    Aggregates all resource clients and handles authentication.

    Example:
        ```python
        from azdo import AzureDevopsClient

        client = AzureDevopsClient(token="my-pat")
        pull = client.pulls.get_with_repo("org", "project", "repo", 42)

        # Or create from environment variables
        client = AzureDevopsClient.from_env()
        ```
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        token: str,
        hostname: str = DEFAULT_HOSTNAME,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the Azure DevOps client.

        Args:
            token: Personal access token
            hostname: Azure DevOps host (default: dev.azure.com)
            timeout: Request timeout in seconds (default: 10.0)

        Raises:
            ConfigurationError: If the token is empty
        """
        if not token or not token.strip():
            raise ConfigurationError("an Azure DevOps personal access token is required")

        self.hostname = hostname
        self.base_url = base_url_for_hostname(hostname)
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=self.base_url,
            token=token,
            timeout=timeout,
        )

        self.pulls = PullsClient(self._transport)
        self.threads = ThreadsClient(self._transport)
        self.git = GitClient(self._transport)
        self.policy_evaluations = PolicyEvaluationsClient(self._transport)

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT) -> "AzureDevopsClient":
        """
        Create a client from environment variables.

        Environment variables:
            AZDO_TOKEN: Personal access token (required)
            AZDO_HOSTNAME: Host name (optional, default: dev.azure.com)

        Raises:
            ConfigurationError: If AZDO_TOKEN is missing
        """
        token = os.environ.get("AZDO_TOKEN")
        hostname = os.environ.get("AZDO_HOSTNAME", DEFAULT_HOSTNAME)

        if not token:
            raise ConfigurationError("AZDO_TOKEN environment variable not set")

        return cls(token=token, hostname=hostname, timeout=timeout)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "AzureDevopsClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

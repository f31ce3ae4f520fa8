"""Caller identity (user GUID) resolution."""

import threading

from azdo.exceptions import IdentityNotCachedError, IdentityNotConfiguredError
from azdo.logging import get_logger

AUTO = "auto"
UNSET = ""

logger = get_logger("identity")


class UserIdentity:
    """
    Learn-once, read-many holder for the GUID merges are performed as.

    The value is one of:

    - ``UNSET`` (``""``): explicitly configured empty, merges always fail
    - ``AUTO``: not known yet, learned from the first suitable comment post
    - a concrete GUID

    Only the ``AUTO`` to GUID transition is allowed, and it happens at most
    once. Instances may be shared between threads.
    """

    def __init__(self, value: str = AUTO) -> None:
        self._value = value.strip()
        self._lock = threading.Lock()

    def get(self) -> str:
        with self._lock:
            return self._value

    @property
    def is_auto(self) -> bool:
        return self.get() == AUTO

    def try_set(self, value: str) -> bool:
        """
        Cache ``value`` if the identity is still being discovered.

        Returns:
            True if this call performed the transition
        """
        value = value.strip()
        if not value or value == AUTO:
            return False
        with self._lock:
            if self._value != AUTO:
                return False
            self._value = value
        logger.debug("cached user GUID as %s", value)
        return True

    def require(self) -> str:
        """
        Return the concrete GUID.

        Raises:
            IdentityNotCachedError: If the GUID is still ``AUTO``
            IdentityNotConfiguredError: If the GUID was configured empty
        """
        value = self.get()
        if value == AUTO:
            raise IdentityNotCachedError()
        if value == UNSET:
            raise IdentityNotConfiguredError()
        return value

    def __repr__(self) -> str:
        return f"UserIdentity({self.get()!r})"

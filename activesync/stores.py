"""Storage of the provisioning policy key and per-collection sync keys."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Dict

_INITIAL_SYNC_KEY = "0"


class PolicyStore(ABC):
    """Persists the current provisioning policy key.

    An empty string means no policy has been negotiated yet; it stands for
    the ``"0"`` policy key on the wire.
    """

    @abstractmethod
    def get(self) -> str:
        """Return the stored policy key, or an empty string if there is none."""

    @abstractmethod
    def set(self, policy_key: str) -> None:
        """Replace the stored policy key."""


class SyncStateStore(ABC):
    """Persists the SyncKey of each collection.

    An unknown collection has the SyncKey ``"0"``, which asks the server for
    an initial sync.
    """

    @abstractmethod
    def get(self, collection_id: str) -> str:
        """Return the SyncKey of ``collection_id``, or ``"0"`` if unknown."""

    @abstractmethod
    def set(self, collection_id: str, sync_key: str) -> None:
        """Store the SyncKey of ``collection_id``."""


class InMemoryPolicyStore(PolicyStore):
    """A thread-safe, process-local policy store."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._key = ""

    def get(self) -> str:
        with self._lock:
            return self._key

    def set(self, policy_key: str) -> None:
        with self._lock:
            self._key = policy_key


class InMemorySyncStateStore(SyncStateStore):
    """A thread-safe, process-local sync state store."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._keys: Dict[str, str] = {}

    def get(self, collection_id: str) -> str:
        with self._lock:
            return self._keys.get(collection_id, _INITIAL_SYNC_KEY)

    def set(self, collection_id: str, sync_key: str) -> None:
        with self._lock:
            self._keys[collection_id] = sync_key
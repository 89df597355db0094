"""Exchange ActiveSync status codes and the protocol version spoken by the client."""

from __future__ import annotations

PROTOCOL_VERSION = "14.1"
"""The EAS protocol version this package implements."""

# Global status codes (MS-ASCMD 2.2.4) the client reacts to.
STATUS_SUCCESS = 1
STATUS_INVALID_POLICY = 142
STATUS_INVALID_POLICY_KEY = 143
STATUS_INVALID_DEVICE_ID = 144

# Sync command status codes (MS-ASCMD 2.2.1.21.4).
SYNC_STATUS_SUCCESS = 1
SYNC_STATUS_INVALID_SYNC_KEY = 3
SYNC_STATUS_PROTOCOL_ERROR = 4
SYNC_STATUS_SERVER_ERROR = 5
SYNC_STATUS_CONVERSION_ERROR = 6
SYNC_STATUS_CONFLICT = 7
SYNC_STATUS_OBJECT_NOT_FOUND = 8

_KNOWN_SYNC_STATUSES = frozenset(
    {
        SYNC_STATUS_SUCCESS,
        SYNC_STATUS_INVALID_SYNC_KEY,
        SYNC_STATUS_PROTOCOL_ERROR,
        SYNC_STATUS_SERVER_ERROR,
        SYNC_STATUS_CONVERSION_ERROR,
        SYNC_STATUS_CONFLICT,
        SYNC_STATUS_OBJECT_NOT_FOUND,
    }
)

_REPROVISION_STATUSES = frozenset({STATUS_INVALID_POLICY, STATUS_INVALID_POLICY_KEY})


def is_known_sync_status(code: int) -> bool:
    """Return True if ``code`` is a defined Sync status value."""
    return code in _KNOWN_SYNC_STATUSES


def should_reprovision(code: int) -> bool:
    """Return True if ``code`` requires a fresh Provision exchange before retrying."""
    return code in _REPROVISION_STATUSES
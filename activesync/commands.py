"""Request and response payloads of the Sync, FolderSync, Ping and Provision commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

POLICY_TYPE_WBXML = "MS-EAS-Provisioning-WBXML"
"""The EAS 14.1 policy type identifier (MS-ASPROV 2.2.2.39)."""

_PING_STATUS_CHANGES = 2


# --- Sync -----------------------------------------------------------------


@dataclass
class BodyPreference:
    """An AirSyncBase body preference declaration."""

    type: int = 0
    truncation_size: int = 0
    all_or_none: int = 0
    preview: int = 0


@dataclass
class SyncOptions:
    """Per-collection Options of a Sync request."""

    filter_type: int = 0
    class_: str = ""
    mime_support: int = 0
    mime_truncation: int = 0
    max_items: int = 0
    body_preference: List[BodyPreference] = field(default_factory=list)


@dataclass
class SyncAdd:
    """A server-pushed addition or a new client-side item.

    ``application_data`` holds the raw encoded body of the ApplicationData
    element; its concrete type depends on the collection's class.
    """

    server_id: str = ""
    client_id: str = ""
    application_data: Optional[bytes] = None


@dataclass
class SyncChange:
    """An item modification."""

    server_id: str = ""
    application_data: Optional[bytes] = None


@dataclass
class SyncDelete:
    """An item deletion notification."""

    server_id: str = ""


@dataclass
class SyncFetch:
    """An explicit Fetch request."""

    server_id: str = ""


@dataclass
class SyncCommands:
    """The Add, Change, Delete and Fetch commands of a collection."""

    add: List[SyncAdd] = field(default_factory=list)
    change: List[SyncChange] = field(default_factory=list)
    delete: List[SyncDelete] = field(default_factory=list)
    fetch: List[SyncFetch] = field(default_factory=list)


@dataclass
class SyncCollection:
    """A per-collection entry of a Sync request or response."""

    sync_key: str = ""
    collection_id: str = ""
    class_: str = ""
    get_changes: int = 0
    window_size: int = 0
    status: int = 0
    more_available: int = 0
    options: Optional[SyncOptions] = None
    commands: Optional[SyncCommands] = None
    responses: Optional[SyncCommands] = None


@dataclass
class SyncCollections:
    """The Collection entries of a Sync request or response."""

    collection: List[SyncCollection] = field(default_factory=list)


@dataclass
class SyncRequest:
    """The Sync command request payload."""

    collections: SyncCollections = field(default_factory=SyncCollections)


@dataclass
class SyncResponse:
    """The Sync command response payload."""

    status: int = 0
    collections: SyncCollections = field(default_factory=SyncCollections)


# --- FolderSync -------------------------------------------------------------


@dataclass
class FolderSyncRequest:
    """The FolderSync request payload; the initial SyncKey is ``"0"``."""

    sync_key: str = ""


def new_folder_sync_request(sync_key: str) -> FolderSyncRequest:
    """Build a FolderSync request with the given SyncKey."""
    return FolderSyncRequest(sync_key=sync_key)


@dataclass
class FolderAdd:
    """A newly created folder."""

    server_id: str = ""
    parent_id: str = ""
    display_name: str = ""
    type: int = 0


@dataclass
class FolderUpdate:
    """An updated folder."""

    server_id: str = ""
    parent_id: str = ""
    display_name: str = ""
    type: int = 0


@dataclass
class FolderDelete:
    """A deleted folder."""

    server_id: str = ""


@dataclass
class FolderChanges:
    """The Add, Update and Delete entries returned by FolderSync."""

    count: int = 0
    add: List[FolderAdd] = field(default_factory=list)
    update: List[FolderUpdate] = field(default_factory=list)
    delete: List[FolderDelete] = field(default_factory=list)


@dataclass
class FolderSyncResponse:
    """The server reply to FolderSync."""

    status: int = 0
    sync_key: str = ""
    changes: FolderChanges = field(default_factory=FolderChanges)


# --- Ping -------------------------------------------------------------------


@dataclass
class PingFolder:
    """A folder monitored by Ping."""

    id: str = ""
    class_: str = ""


@dataclass
class PingFolders:
    """The Folder entries of a Ping request."""

    folder: List[PingFolder] = field(default_factory=list)


@dataclass
class PingRequest:
    """The Ping command request payload."""

    heartbeat_interval: int = 0
    folders: PingFolders = field(default_factory=PingFolders)


@dataclass
class PingResponseFolders:
    """Identifiers of folders carrying changes."""

    folder: List[str] = field(default_factory=list)


@dataclass
class PingResponse:
    """The Ping command response payload."""

    status: int = 0
    folders: PingResponseFolders = field(default_factory=PingResponseFolders)


def ping_has_changes(status: int) -> bool:
    """Return True if a Ping status signals changes (MS-ASCMD 2.2.1.13.6)."""
    return status == _PING_STATUS_CHANGES


# --- Provision --------------------------------------------------------------


@dataclass
class PolicyRequest:
    """A client-side Policy entry."""

    policy_type: str = ""
    policy_key: str = ""
    status: int = 0


@dataclass
class PoliciesRequest:
    """The Policy entries of a Provision request."""

    policy: List[PolicyRequest] = field(default_factory=list)


@dataclass
class ProvisionRequest:
    """The client-to-server Provision payload, used for download and acknowledgement."""

    policies: PoliciesRequest = field(default_factory=PoliciesRequest)


def new_initial_request() -> ProvisionRequest:
    """Build the initial Provision request asking for the provisioning document."""
    return ProvisionRequest(
        policies=PoliciesRequest(policy=[PolicyRequest(policy_type=POLICY_TYPE_WBXML)])
    )


def new_acknowledge_request(policy_key: str, status: int) -> ProvisionRequest:
    """Build the Provision acknowledgement echoing the temporary policy key."""
    return ProvisionRequest(
        policies=PoliciesRequest(
            policy=[
                PolicyRequest(
                    policy_type=POLICY_TYPE_WBXML,
                    policy_key=policy_key,
                    status=status,
                )
            ]
        )
    )


@dataclass
class EASProvisionDoc:
    """The EAS 14.1 device policy document."""

    device_password_enabled: int = 0
    alphanumeric_device_password_required: int = 0
    password_recovery_enabled: int = 0
    attachments_enabled: int = 0
    min_device_password_length: int = 0
    max_inactivity_time_device_lock: int = 0
    max_device_password_failed_attempts: int = 0
    max_attachment_size: int = 0
    allow_simple_device_password: int = 0
    device_password_expiration: int = 0
    device_password_history: int = 0
    allow_storage_card: int = 0
    allow_camera: int = 0
    require_device_encryption: int = 0
    allow_unsigned_applications: int = 0
    allow_unsigned_installation_packages: int = 0
    min_device_password_complex_characters: int = 0
    allow_wifi: int = 0
    allow_text_messaging: int = 0
    allow_pop_imap_email: int = 0
    allow_bluetooth: int = 0
    allow_irda: int = 0
    require_manual_sync_when_roaming: int = 0
    allow_desktop_sync: int = 0
    max_calendar_age_filter: int = 0
    allow_html_email: int = 0
    max_email_age_filter: int = 0
    max_email_body_truncation_size: int = 0
    max_email_html_body_truncation_size: int = 0
    require_signed_smime_messages: int = 0
    require_encrypted_smime_messages: int = 0
    require_signed_smime_algorithm: int = 0
    require_encryption_smime_algorithm: int = 0
    allow_smime_encryption_algorithm_negotiation: int = 0
    allow_smime_soft_certs: int = 0
    allow_browser: int = 0
    allow_consumer_email: int = 0
    allow_remote_desktop: int = 0
    allow_internet_sharing: int = 0
    unapproved_in_rom_application_list: str = ""
    approved_application_list: str = ""


@dataclass
class PolicyResponse:
    """A server-side Policy entry."""

    policy_type: str = ""
    policy_key: str = ""
    status: int = 0
    data: Optional[EASProvisionDoc] = None


@dataclass
class PoliciesResponse:
    """The Policy entries of a Provision response."""

    policy: List[PolicyResponse] = field(default_factory=list)


@dataclass
class ProvisionResponse:
    """The server-to-client Provision payload."""

    status: int = 0
    policies: PoliciesResponse = field(default_factory=PoliciesResponse)
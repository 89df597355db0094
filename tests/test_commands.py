import pytest

from activesync.commands import (
    POLICY_TYPE_WBXML,
    EASProvisionDoc,
    FolderAdd,
    FolderChanges,
    FolderDelete,
    FolderSyncResponse,
    FolderUpdate,
    PingFolder,
    PingFolders,
    PingRequest,
    PingResponse,
    PingResponseFolders,
    PoliciesResponse,
    PolicyResponse,
    ProvisionResponse,
    SyncAdd,
    SyncCollection,
    SyncCollections,
    SyncCommands,
    SyncRequest,
    SyncResponse,
    new_acknowledge_request,
    new_folder_sync_request,
    new_initial_request,
    ping_has_changes,
)


def test_folder_sync_request_initial():
    req = new_folder_sync_request("0")
    assert req.sync_key == "0"


def test_folder_sync_request_carries_key():
    assert new_folder_sync_request("abcd").sync_key == "abcd"


def test_folder_sync_response_fields():
    resp = FolderSyncResponse(
        status=1,
        sync_key="abcd",
        changes=FolderChanges(
            count=2,
            add=[
                FolderAdd(server_id="1", parent_id="0", display_name="Inbox", type=2),
                FolderAdd(server_id="2", parent_id="0", display_name="Calendar", type=8),
            ],
            update=[FolderUpdate(server_id="3", parent_id="0", display_name="Contacts", type=9)],
            delete=[FolderDelete(server_id="old")],
        ),
    )
    assert [a.display_name for a in resp.changes.add] == ["Inbox", "Calendar"]
    assert resp.changes.update[0].type == 9
    assert resp.changes.delete == [FolderDelete(server_id="old")]


def test_folder_changes_defaults_not_shared():
    a = FolderChanges()
    b = FolderChanges()
    a.add.append(FolderAdd(server_id="1"))
    assert b.add == []


@pytest.mark.parametrize("status,expected", [(2, True), (1, False), (0, False), (3, False)])
def test_ping_has_changes(status, expected):
    assert ping_has_changes(status) is expected


def test_ping_response_changes_available():
    resp = PingResponse(status=2, folders=PingResponseFolders(folder=["1", "2"]))
    assert ping_has_changes(resp.status)
    assert resp.folders.folder == ["1", "2"]


def test_ping_request_folders():
    req = PingRequest(
        heartbeat_interval=480,
        folders=PingFolders(
            folder=[PingFolder(id="1", class_="Email"), PingFolder(id="2", class_="Calendar")]
        ),
    )
    assert req.heartbeat_interval == 480
    assert [f.class_ for f in req.folders.folder] == ["Email", "Calendar"]


def test_policy_type_value():
    assert new_initial_request().policies.policy[0].policy_type == "MS-EAS-Provisioning-WBXML"


def test_new_initial_request():
    r = new_initial_request()
    assert len(r.policies.policy) == 1
    p = r.policies.policy[0]
    assert p.policy_type == POLICY_TYPE_WBXML
    assert p.policy_key == ""
    assert p.status == 0


def test_new_initial_request_fresh_instances():
    a = new_initial_request()
    b = new_initial_request()
    a.policies.policy.append(a.policies.policy[0])
    assert len(b.policies.policy) == 1


def test_acknowledge_request():
    req = new_acknowledge_request("123456789", 1)
    assert len(req.policies.policy) == 1
    p = req.policies.policy[0]
    assert p.policy_type == POLICY_TYPE_WBXML
    assert p.policy_key == "123456789"
    assert p.status == 1


def test_provision_response_with_document():
    doc = EASProvisionDoc(
        device_password_enabled=1,
        min_device_password_length=4,
        max_inactivity_time_device_lock=900,
        max_device_password_failed_attempts=8,
        allow_simple_device_password=1,
        allow_storage_card=1,
        allow_camera=1,
    )
    resp = ProvisionResponse(
        status=1,
        policies=PoliciesResponse(
            policy=[PolicyResponse(policy_type=POLICY_TYPE_WBXML, policy_key="123", status=1, data=doc)]
        ),
    )
    pol = resp.policies.policy[0]
    assert pol.data.min_device_password_length == 4
    assert pol.data.require_device_encryption == 0
    assert pol.policy_key == "123"


def test_sync_request_defaults_and_collection():
    req = SyncRequest(
        collections=SyncCollections(
            collection=[SyncCollection(sync_key="0", collection_id="1", get_changes=1, window_size=25)]
        )
    )
    col = req.collections.collection[0]
    assert (col.sync_key, col.collection_id, col.window_size) == ("0", "1", 25)
    assert col.options is None and col.commands is None


def test_sync_response_commands():
    resp = SyncResponse(
        collections=SyncCollections(
            collection=[
                SyncCollection(
                    sync_key="abc",
                    collection_id="1",
                    status=1,
                    commands=SyncCommands(add=[SyncAdd(server_id="1:1", application_data=b"\x01")]),
                )
            ]
        )
    )
    cmds = resp.collections.collection[0].commands
    assert cmds.add[0].application_data == b"\x01"
    assert cmds.change == [] and cmds.delete == []
    assert resp.status == 0
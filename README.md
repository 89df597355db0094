# activesync

Building blocks for an Exchange ActiveSync (EAS) 14.1 client.

## Modules

- `activesync.status` – `PROTOCOL_VERSION` (`"14.1"`), the global and Sync status codes
  (`STATUS_SUCCESS`, `STATUS_INVALID_POLICY`, `SYNC_STATUS_CONFLICT`, …),
  `should_reprovision(code)` (true for 142 and 143) and `is_known_sync_status(code)`.
- `activesync.timefmt` – `format_datetime(t)` renders a datetime as `YYYYMMDDTHHMMSSZ` in UTC
  (naive datetimes are taken as UTC); `parse_datetime(s)` parses that form, also with
  fractional seconds before the `Z`, into an aware UTC datetime truncated to whole seconds,
  and raises `ValueError` otherwise.
- `activesync.pim` – dataclasses `Email`, `Appointment` (with `Categories`, `Attendees`,
  `Attendee`, `Recurrence`), `Contact` and `Task` (with `TaskCategories`, `TaskRecurrence`);
  the enums `BusyStatus`, `Sensitivity`, `MeetingStatus`, `RecurrenceType`, `Importance`,
  `TaskImportance`; and `valid_meeting_status(v)`.
- `activesync.commands` – dataclasses for the Sync, FolderSync, Ping and Provision
  requests and responses, plus `new_folder_sync_request(sync_key)`, `new_initial_request()`,
  `new_acknowledge_request(policy_key, status)`, `ping_has_changes(status)` and
  `POLICY_TYPE_WBXML`.
- `activesync.query` – the request query: `Query` with `encode_base64()` and
  `encode_plain()`, `parse_base64(s)`, `QueryParam`, the `Command` and `Param` enums,
  `command_name(code)`, `build_url(base, encoded_query, plain)`, `ENDPOINT_PATH` and
  `QueryError`.
- `activesync.headers` – `apply_mandatory_headers(headers, opts)` with `HeaderOptions`,
  `BasicAuth` whose `apply(headers)` sets the `Authorization` header, and
  `CONTENT_TYPE_WBXML`.
- `activesync.stores` – the abstract `PolicyStore` and `SyncStateStore` and their
  thread-safe in-memory forms `InMemoryPolicyStore` (empty key until set) and
  `InMemorySyncStateStore` (`"0"` for an unknown collection).
- `activesync.autodiscover` – `Discoverer.discover(email_address, creds)` finds the EAS
  endpoint URL for a mailbox over POX Autodiscover, following redirects by URL and by
  address and falling back to an `_autodiscover._tcp` SRV record. It returns a `Result` and
  raises `AutodiscoverError` on failure. `build_request_xml`, `parse_response` and
  `domain_of` are available on their own.

## Installation

```
pip install activesync
```

## Examples

Build a request URL for a FolderSync command:

```python
from activesync.query import Command, Param, Query, QueryParam, build_url, parse_base64

query = Query(
    protocol_version=0x91,
    cmd=Command.FOLDER_SYNC,
    locale=0x0409,
    device_id="DEVICE0001",
    device_type="SmartPhone",
    params=[QueryParam(Param.USER, b"user@example.com")],
)
encoded = query.encode_base64()
url = build_url("https://mail.example.com", encoded, False)
# https://mail.example.com/Microsoft-Server-ActiveSync?<encoded>
assert parse_base64(encoded) == query
```

Set the mandatory headers and the credentials on a header mapping:

```python
from activesync.headers import BasicAuth, HeaderOptions, apply_mandatory_headers

headers = {}
apply_mandatory_headers(headers, HeaderOptions(protocol_version="14.1", user_agent="my-client/1.0"))
password = "password"
BasicAuth(username="user@example.com", password=password).apply(headers)
```

Work with EAS date-times:

```python
from activesync.timefmt import format_datetime, parse_datetime

t = parse_datetime("20250101T000000.123Z")
format_datetime(t)  # "20250101T000000Z"
```

Find the endpoint with Autodiscover:

```python
from activesync.autodiscover import Credentials, Discoverer

password = "password"
result = Discoverer().discover(
    "user@example.com",
    Credentials(username="user@example.com", password=password),
)
print(result.url)
```

`Discoverer` takes an optional `requests.Session`, a `candidates_override` callable that
returns the candidate URLs for a domain, and an `srv_resolver` callable that replaces DNS
SRV resolution.

## What this package does not do

- It has no WBXML codec. The command and PIM dataclasses are plain Python objects; they are
  not encoded to or decoded from the wire format, and the `application_data` of `SyncAdd`
  and `SyncChange` stays as raw bytes.
- It has no client that sends Sync, FolderSync, Ping or Provision commands to a server, and
  so no automatic re-provisioning. It supplies the query, URL, headers, payload types and
  key stores such a client would use.
- The stores keep their keys in memory only; nothing is written to disk.

## Running the tests

```
pip install -e ".[test]"
pytest
```
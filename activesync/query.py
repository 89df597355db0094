"""The request query of the EAS HTTP transport, in its base64 and plain forms."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional
from urllib.parse import urlencode, urlsplit, urlunsplit

ENDPOINT_PATH = "/Microsoft-Server-ActiveSync"
"""The request path mandated by MS-ASHTTP 2.2.1."""

_BASE64URL = re.compile(r"[A-Za-z0-9_-]*={0,2}")


class QueryError(ValueError):
    """Raised when a query cannot be encoded, decoded or placed in a URL."""


class Command(IntEnum):
    """Command codes of the binary query (MS-ASHTTP 2.2.1.1.1.1.2)."""

    SYNC = 0
    SEND_MAIL = 1
    SMART_FORWARD = 2
    SMART_REPLY = 3
    GET_ATTACHMENT = 4
    FOLDER_SYNC = 9
    FOLDER_CREATE = 10
    FOLDER_DELETE = 11
    FOLDER_UPDATE = 12
    MOVE_ITEMS = 13
    GET_ITEM_ESTIMATE = 14
    MEETING_RESPONSE = 15
    SEARCH = 16
    SETTINGS = 17
    PING = 18
    ITEM_OPERATIONS = 19
    PROVISION = 20
    RESOLVE_RECIPIENTS = 21
    VALIDATE_CERT = 22

    @property
    def wire_name(self) -> str:
        """The command name as it appears in the plain query, e.g. ``FolderSync``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class Param(IntEnum):
    """Command-specific parameter tags (MS-ASHTTP 2.2.1.1.1.1.3)."""

    ATTACHMENT_NAME = 0
    COLLECTION_ID = 1
    COLLECTION_NAME = 2
    ITEM_ID = 3
    LONG_ID = 4
    PARENT_ID = 5
    OCCURRENCE = 6
    OPTIONS = 7
    USER = 8
    SAVE_IN_SENT = 9
    ACCEPT_MULTIPART = 10


_PLAIN_KEYS = {
    Param.USER: "User",
    Param.COLLECTION_ID: "CollectionId",
    Param.COLLECTION_NAME: "CollectionName",
    Param.ITEM_ID: "ItemId",
    Param.LONG_ID: "LongId",
    Param.PARENT_ID: "ParentId",
    Param.OCCURRENCE: "Occurrence",
    Param.OPTIONS: "Options",
    Param.SAVE_IN_SENT: "SaveInSent",
    Param.ATTACHMENT_NAME: "AttachmentName",
    Param.ACCEPT_MULTIPART: "AcceptMultiPart",
}


def _to_bytes(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _to_text(data: bytes) -> str:
    return data.decode("utf-8", "surrogateescape")


@dataclass
class QueryParam:
    """One entry of the optional command-specific parameter list."""

    tag: int
    value: bytes


@dataclass
class Query:
    """The abstract request query, shared by the base64 and plain encodings.

    ``policy_key`` of None means the key is absent from the wire form.
    """

    protocol_version: int = 0
    cmd: int = 0
    locale: int = 0
    device_id: str = ""
    device_type: str = ""
    policy_key: Optional[int] = None
    params: List[QueryParam] = field(default_factory=list)

    def encode_base64(self) -> str:
        """Return the URL-safe, unpadded base64 form of the binary query."""
        device_id = _to_bytes(self.device_id)
        device_type = _to_bytes(self.device_type)
        if len(device_id) > 0xFF:
            raise QueryError("ashttp: DeviceID longer than 255 bytes")
        if len(device_type) > 0xFF:
            raise QueryError("ashttp: DeviceType longer than 255 bytes")

        buf = bytearray(
            (
                self.protocol_version,
                self.cmd,
                self.locale & 0xFF,
                (self.locale >> 8) & 0xFF,
                len(device_id),
            )
        )
        buf += device_id
        if self.policy_key is None:
            buf.append(0)
        else:
            buf.append(4)
            buf += (self.policy_key & 0xFFFFFFFF).to_bytes(4, "little")
        buf.append(len(device_type))
        buf += device_type
        for param in self.params:
            if len(param.value) > 0xFF:
                raise QueryError(
                    f"ashttp: parameter tag 0x{param.tag:02X} value longer than 255 bytes"
                )
            buf += bytes((param.tag, len(param.value)))
            buf += param.value
        return base64.urlsafe_b64encode(bytes(buf)).decode("ascii").rstrip("=")

    def encode_plain(self) -> str:
        """Return the URL-encoded plain query (``Cmd=...&DeviceId=...``)."""
        values = {
            "Cmd": command_name(self.cmd),
            "DeviceId": self.device_id,
            "DeviceType": self.device_type,
        }
        for param in self.params:
            key = _PLAIN_KEYS.get(param.tag)
            if key is not None:
                values[key] = _to_text(param.value)
        return urlencode(sorted(values.items()))


class _Reader:
    """Sequential reader over the decoded binary query."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    @property
    def exhausted(self) -> bool:
        return self._pos >= len(self._data)

    def byte(self, error: str) -> int:
        if self.exhausted:
            raise QueryError(error)
        value = self._data[self._pos]
        self._pos += 1
        return value

    def take(self, n: int, error: str) -> bytes:
        if self._pos + n > len(self._data):
            raise QueryError(error)
        chunk = self._data[self._pos : self._pos + n]
        self._pos += n
        return chunk


def _decode_base64url(s: str) -> bytes:
    if not _BASE64URL.fullmatch(s):
        raise QueryError("ashttp: base64 decode: illegal character in input")
    core = s.rstrip("=")
    if len(core) % 4 == 1:
        raise QueryError("ashttp: base64 decode: illegal length")
    padded = core + "=" * (-len(core) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise QueryError(f"ashttp: base64 decode: {exc}") from exc


def parse_base64(s: str) -> Query:
    """Decode the URL-safe base64 form of the binary query.

    Both the unpadded and the padded forms are accepted.
    """
    raw = _decode_base64url(s)
    if len(raw) < 5:
        raise QueryError("ashttp: query shorter than fixed prefix")

    reader = _Reader(raw)
    protocol_version = reader.byte("ashttp: query shorter than fixed prefix")
    cmd = reader.byte("ashttp: query shorter than fixed prefix")
    locale = int.from_bytes(reader.take(2, "ashttp: query shorter than fixed prefix"), "little")

    dev_len = reader.byte("ashttp: query shorter than fixed prefix")
    device_id = _to_text(reader.take(dev_len, "ashttp: DeviceID length out of range"))

    policy_key: Optional[int] = None
    pk_len = reader.byte("ashttp: missing PolicyKey length")
    if pk_len == 4:
        policy_key = int.from_bytes(reader.take(4, "ashttp: PolicyKey truncated"), "little")
    elif pk_len != 0:
        raise QueryError(f"ashttp: PolicyKey length {pk_len} invalid")

    dt_len = reader.byte("ashttp: missing DeviceType length")
    device_type = _to_text(reader.take(dt_len, "ashttp: DeviceType truncated"))

    params: List[QueryParam] = []
    while not reader.exhausted:
        tag, length = reader.take(2, "ashttp: parameter header truncated")
        value = reader.take(length, "ashttp: parameter value truncated")
        params.append(QueryParam(tag=tag, value=bytes(value)))

    return Query(
        protocol_version=protocol_version,
        cmd=cmd,
        locale=locale,
        device_id=device_id,
        device_type=device_type,
        policy_key=policy_key,
        params=params,
    )


def command_name(code: int) -> str:
    """Return the plain-query name of a command code, or ``Cmd<n>`` if unknown."""
    try:
        return Command(code).wire_name
    except ValueError:
        return f"Cmd{code}"


def build_url(base: str, encoded_query: str, plain: bool = False) -> str:
    """Compose the request URL by placing ``encoded_query`` after ``base``.

    An empty or root path on ``base`` is replaced by the EAS endpoint path.
    Both query forms are placed verbatim; ``plain`` only names which one it is.
    """
    if base.startswith(":"):
        raise QueryError(f"ashttp: parse {base!r}: missing protocol scheme")
    if any(ord(ch) < 0x20 or ch == "\x7f" for ch in base):
        raise QueryError(f"ashttp: parse {base!r}: invalid control character in URL")
    try:
        parts = urlsplit(base)
        parts.port  # noqa: B018 - validates the port
    except ValueError as exc:
        raise QueryError(f"ashttp: parse {base!r}: {exc}") from exc
    path = ENDPOINT_PATH if parts.path in ("", "/") else parts.path
    return urlunsplit((parts.scheme, parts.netloc, path, encoded_query, parts.fragment))
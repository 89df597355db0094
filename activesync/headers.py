"""Mandatory EAS HTTP headers and Basic authentication."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import MutableMapping

CONTENT_TYPE_WBXML = "application/vnd.ms-sync.wbxml"
"""The MIME type EAS uses for WBXML payloads."""


@dataclass
class HeaderOptions:
    """Values used to populate the mandatory EAS headers of a request."""

    protocol_version: str
    user_agent: str
    policy_key: str = ""
    accept_language: str = ""


def _set_header(headers: MutableMapping[str, str], name: str, value: str) -> None:
    """Set ``name``, replacing any existing entry whatever its letter case."""
    lowered = name.lower()
    for key in [k for k in headers if k.lower() == lowered and k != name]:
        del headers[key]
    headers[name] = value


def apply_mandatory_headers(headers: MutableMapping[str, str], opts: HeaderOptions) -> None:
    """Set the mandatory MS-ASHTTP headers on ``headers``, overwriting managed ones."""
    _set_header(headers, "MS-ASProtocolVersion", opts.protocol_version)
    _set_header(headers, "Content-Type", CONTENT_TYPE_WBXML)
    _set_header(headers, "Accept", CONTENT_TYPE_WBXML)
    _set_header(headers, "User-Agent", opts.user_agent)
    if opts.policy_key:
        _set_header(headers, "X-MS-PolicyKey", opts.policy_key)
    if opts.accept_language:
        _set_header(headers, "Accept-Language", opts.accept_language)


@dataclass(frozen=True)
class BasicAuth:
    """RFC 7617 Basic credentials applied to outbound requests."""

    username: str
    password: str

    def apply(self, headers: MutableMapping[str, str]) -> None:
        """Write the Authorization header onto ``headers``."""
        credential = f"{self.username}:{self.password}".encode("utf-8")
        encoded = base64.b64encode(credential).decode("ascii")
        _set_header(headers, "Authorization", "Basic " + encoded)
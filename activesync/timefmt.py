"""Formatting and parsing of the EAS DateTime representation (YYYYMMDDTHHMMSSZ)."""

from __future__ import annotations

import re
from datetime import datetime, timezone

_LAYOUT = "%Y%m%dT%H%M%SZ"
_CANONICAL = re.compile(r"\d{8}T\d{6}Z")


def format_datetime(t: datetime) -> str:
    """Return ``t`` in the EAS UTC pattern. Naive datetimes are taken as UTC."""
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    return t.astimezone(timezone.utc).strftime(_LAYOUT)


def parse_datetime(s: str) -> datetime:
    """Parse an EAS DateTime into an aware UTC datetime truncated to seconds.

    Accepts the canonical form and a variant carrying fractional seconds
    before the trailing ``Z``.
    """
    core = s
    dot = core.find(".")
    if dot > 0 and core.endswith("Z"):
        core = core[:dot] + "Z"
    if not _CANONICAL.fullmatch(core):
        raise ValueError(f"eas: invalid DateTime {s!r}")
    try:
        parsed = datetime.strptime(core, _LAYOUT)
    except ValueError as exc:
        raise ValueError(f"eas: invalid DateTime {s!r}") from exc
    return parsed.replace(tzinfo=timezone.utc, microsecond=0)
"""Exchange ActiveSync 14.1 client building blocks: status codes, date-times, PIM and
command payloads, request query encoding, headers, key stores and Autodiscover."""

__version__ = "0.1.0"

__all__ = [
    "autodiscover",
    "commands",
    "headers",
    "pim",
    "query",
    "status",
    "stores",
    "timefmt",
]
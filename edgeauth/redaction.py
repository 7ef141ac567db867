"""Secret masking for the verbose configuration dump."""

from __future__ import annotations

from typing import Any, Dict

REDACTED = "[REDACTED]"

# Config fields whose values must never reach a log line
_SECRET_FIELDS = frozenset({"key", "salt"})


def redact_config(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``data`` with secret-bearing values masked.

    Unset (None) values are left alone so the dump can still report them
    as undefined.
    """
    out = {}
    for name, value in data.items():
        if value is not None and _is_secret_field(name):
            out[name] = REDACTED
        else:
            out[name] = value
    return out


def _is_secret_field(name: str) -> bool:
    """Check if a config field holds a secret."""
    return name.lower() in _SECRET_FIELDS

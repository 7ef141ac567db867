"""Early URL-escaping of token field values."""

from __future__ import annotations

import re
from urllib.parse import quote_plus

_TRIPLET_RE = re.compile(r"%[0-9A-F]{2}")


def escape_early(text: str) -> str:
    """Percent-encode ``text`` for a URL and lower-case every escape triplet.

    Matches the form encoding the edge expects: only letters, digits,
    ``-``, ``_`` and ``.`` pass through, spaces become ``+`` and ``~`` is
    encoded.
    """
    encoded = quote_plus(text, safe="", encoding="utf-8").replace("~", "%7E")
    return _TRIPLET_RE.sub(lambda m: m.group(0).lower(), encoded)

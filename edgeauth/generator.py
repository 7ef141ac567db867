"""Signed edge-authorization token generation.

A token is a ``~``-joined list of ``key=value`` segments ending in an
``hmac=`` segment.  The HMAC is computed over a second list (the hash
source) that carries the same segments plus fields the edge knows but the
token must not reveal: the URL for URL tokens and the optional salt.

Segment order is a compatibility contract with the edge verifier:

    token:       ip, st, exp, acl, id, data, hmac
    hash source: ip, st, exp, acl, id, data, url, salt
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, List, Mapping, Optional, Sequence, Union

from edgeauth.config import resolve_config
from edgeauth.errors import (
    EndBeforeStartError,
    InvalidEndTimeError,
    InvalidStartTimeError,
    InvalidURLTypeError,
    InvalidWindowError,
    MissingExpiryError,
    MissingURLError,
    UnsupportedAlgorithmError,
)
from edgeauth.escaping import escape_early
from edgeauth.redaction import redact_config
from edgeauth.types import SUPPORTED_ALGORITHMS, Algorithm, TokenConfig, parse_acl

logger = logging.getLogger(__name__)

_DIGESTS = {
    Algorithm.SHA256.value: hashlib.sha256,
    Algorithm.SHA1.value: hashlib.sha1,
    Algorithm.MD5.value: hashlib.md5,
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class TimeWindow:
    """Resolved validity window, in unix seconds."""
    start: int
    end: int


class TokenGenerator:
    """Generates ACL and URL tokens from one immutable configuration.

    Construction validates the key and fills in defaults; time fields and
    the algorithm are validated on every generate call.  Instances hold no
    mutable state, so one generator can be shared across threads.
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None, **options: Any):
        raw = dict(config or {})
        raw.update(options)
        self._config = resolve_config(raw)

    @property
    def config(self) -> TokenConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def generate_acl_token(self, acl: Union[str, Sequence[str], None] = None) -> str:
        """Create an ACL token for a path pattern or list of path patterns."""
        path = parse_acl(acl).render(self._config.acl_delimiter)
        return self._generate_token(path, is_url=False)

    def generate_url_token(self, url: Optional[str] = None) -> str:
        """Create a URL token bound to exactly ``url``."""
        if url is None:
            raise MissingURLError("You must provide a URL")
        if not isinstance(url, str):
            raise InvalidURLTypeError("URL must be a string")
        return self._generate_token(url, is_url=True)

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def _escape(self, text: str) -> str:
        if self._config.escape_early:
            return escape_early(text)
        return text

    def _resolve_window(self) -> TimeWindow:
        cfg = self._config

        start = cfg.start_time if cfg.start_time is not None else "now"
        if isinstance(start, str) and start.lower() == "now":
            start = int(time.time())
        elif not _is_int(start) or start <= 0:
            raise InvalidStartTimeError('startTime must be a number (>0) or "now"')

        end = cfg.end_time
        if end is not None and (not _is_int(end) or end <= 0):
            raise InvalidEndTimeError("endTime must be a number (>0)")

        window = cfg.window_seconds
        if window is not None and (not _is_int(window) or window <= 0):
            raise InvalidWindowError("windowSeconds must be a number (>0)")

        if end is None:
            if window is None:
                raise MissingExpiryError("You must provide endTime or windowSeconds")
            end = start + window

        if end < start:
            raise EndBeforeStartError("End time is before start time")

        return TimeWindow(start=start, end=end)

    def _resolve_digest(self):
        digest = _DIGESTS.get(self._config.algorithm)
        if digest is None:
            names = ", ".join(SUPPORTED_ALGORITHMS[:-1]) + " or " + SUPPORTED_ALGORITHMS[-1]
            raise UnsupportedAlgorithmError(f"Algorithm should be one of {names}")
        return digest

    def _generate_token(self, path: str, is_url: bool) -> str:
        cfg = self._config
        window = self._resolve_window()

        if cfg.verbose:
            logger.info("%s", self.describe(path=path, is_url=is_url, window=window))

        token: List[str] = []
        if cfg.ip is not None:
            token.append(f"ip={self._escape(cfg.ip)}")
        if cfg.has_start_time:
            token.append(f"st={window.start}")
        token.append(f"exp={window.end}")
        if not is_url:
            token.append(f"acl={path}")
        if cfg.session_id is not None:
            token.append(f"id={self._escape(cfg.session_id)}")
        if cfg.payload is not None:
            token.append(f"data={self._escape(cfg.payload)}")

        hash_source = list(token)
        if is_url:
            hash_source.append(f"url={self._escape(path)}")
        if cfg.salt is not None:
            hash_source.append(f"salt={cfg.salt}")

        digest = self._resolve_digest()
        message = cfg.field_delimiter.join(hash_source).encode("utf-8")
        signature = hmac.new(cfg.key_bytes, message, digest).hexdigest()
        token.append(f"hmac={signature}")

        logger.debug("Generated %s token (exp=%d, algorithm=%s)",
                     "url" if is_url else "acl", window.end, cfg.algorithm)
        return cfg.field_delimiter.join(token)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def describe(self, path: Optional[str] = None, is_url: Optional[bool] = None,
                 window: Optional[TimeWindow] = None) -> str:
        """Human-readable configuration dump with secrets masked."""
        cfg = redact_config(asdict(self._config))

        def show(name: str) -> str:
            value = cfg.get(name)
            return "undefined" if value is None else str(value)

        lines = ["Akamai Token Generation Parameters"]
        if is_url is True:
            lines.append(f"   URL            : {path}")
        elif is_url is False:
            lines.append(f"   ACL            : {path}")
        lines.append(f"   Token Name     : {show('token_name')}")
        lines.append(f"   Key / Secret   : {show('key')}")
        lines.append(f"   Algorithm      : {show('algorithm')}")
        lines.append(f"   Salt           : {show('salt')}")
        lines.append(f"   IP             : {show('ip')}")
        lines.append(f"   Payload        : {show('payload')}")
        lines.append(f"   Session ID     : {show('session_id')}")
        if window is not None:
            lines.append(f"   Start Time     : {window.start}")
        lines.append(f"   Window(Seconds): {show('window_seconds')}")
        if window is not None:
            lines.append(f"   End Time       : {window.end}")
        lines.append(f"   Field Delimiter: {show('field_delimiter')}")
        lines.append(f"   ACL Delimiter  : {show('acl_delimiter')}")
        lines.append(f"   Escape Early   : {'true' if cfg['escape_early'] else 'false'}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

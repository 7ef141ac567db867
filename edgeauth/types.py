"""Core type primitives for token generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Tuple, Union

from edgeauth.errors import InvalidACLTypeError, MissingACLError


# ---------------------------------------------------------------------------
# Hash algorithms
# ---------------------------------------------------------------------------

class Algorithm(str, Enum):
    """Keyed-hash algorithms understood by the edge."""
    SHA256 = "sha256"
    SHA1 = "sha1"
    MD5 = "md5"


SUPPORTED_ALGORITHMS = tuple(a.value for a in Algorithm)


# ---------------------------------------------------------------------------
# Resolved configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TokenConfig:
    """Fully-populated, immutable generator configuration.

    Time fields are kept exactly as supplied; they are validated when a
    token is generated, not here.
    """
    key: str
    token_name: str = "__token__"
    algorithm: str = Algorithm.SHA256.value
    escape_early: bool = False
    field_delimiter: str = "~"
    acl_delimiter: str = "!"
    verbose: bool = False
    start_time: Any = None
    end_time: Any = None
    window_seconds: Any = None
    ip: Optional[str] = None
    session_id: Optional[str] = None
    payload: Optional[str] = None
    salt: Optional[str] = None

    @property
    def key_bytes(self) -> bytes:
        return bytes.fromhex(self.key)

    @property
    def has_start_time(self) -> bool:
        """True when the caller supplied startTime explicitly."""
        return self.start_time is not None


# ---------------------------------------------------------------------------
# ACL input (scalar path or ordered list of paths)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AclPath:
    """A single ACL path pattern."""
    path: str

    def render(self, delimiter: str) -> str:
        return self.path


@dataclass(frozen=True)
class AclPaths:
    """An ordered list of ACL path patterns."""
    paths: Tuple[str, ...]

    def render(self, delimiter: str) -> str:
        return delimiter.join(self.paths)


AclInput = Union[AclPath, AclPaths]


def parse_acl(acl: Union[str, Sequence[str], None]) -> AclInput:
    """Turn caller input into an AclInput, rejecting empty or mistyped values."""
    if acl is None:
        raise MissingACLError("You must provide an ACL")
    if isinstance(acl, str):
        stripped = acl.strip()
        if not stripped:
            raise MissingACLError("You must provide an ACL")
        return AclPath(stripped)
    if isinstance(acl, (list, tuple)):
        if not acl:
            raise MissingACLError("You must provide an ACL")
        if not all(isinstance(p, str) for p in acl):
            raise InvalidACLTypeError("ACL must be a string or array")
        return AclPaths(tuple(acl))
    raise InvalidACLTypeError("ACL must be a string or array")

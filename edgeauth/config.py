"""
Configuration management for edgeauth.

resolve_config() turns a caller-supplied mapping into an immutable
TokenConfig.  Settings reads CLI defaults from EDGEAUTH_* environment
variables (and an optional .env file).
"""
from __future__ import annotations

import re
from dataclasses import fields
from typing import Any, Dict, Mapping, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from edgeauth.errors import (
    ConfigError,
    InvalidKeyEncodingError,
    InvalidKeyLengthError,
    MissingKeyError,
)
from edgeauth.types import Algorithm, TokenConfig

_HEX_RE = re.compile(r"^[a-f0-9]+$", re.IGNORECASE)

# camelCase names used by older integrations
_ALIASES = {
    "tokenName": "token_name",
    "escapeEarly": "escape_early",
    "fieldDelimiter": "field_delimiter",
    "aclDelimiter": "acl_delimiter",
    "startTime": "start_time",
    "endTime": "end_time",
    "windowSeconds": "window_seconds",
    "sessionId": "session_id",
}

_FIELDS = frozenset(f.name for f in fields(TokenConfig))


def _validate_key(key: Any) -> str:
    if key is None:
        raise MissingKeyError("Key must be provided to generate a token")
    if not isinstance(key, str):
        raise InvalidKeyEncodingError("Key must be a hex string")
    if len(key) % 2 != 0:
        raise InvalidKeyLengthError("Key must be even length")
    if not _HEX_RE.match(key):
        raise InvalidKeyEncodingError("Key must be a hex string")
    return key


def resolve_config(raw: Optional[Mapping[str, Any]] = None) -> TokenConfig:
    """Build a TokenConfig from a mapping, filling in defaults.

    The input mapping is never modified.  Keys may use snake_case or the
    legacy camelCase names.  Only the key is validated here; time fields
    and the algorithm are checked when a token is generated.
    """
    values: Dict[str, Any] = {}
    for name, value in (raw or {}).items():
        field_name = _ALIASES.get(name, name)
        if field_name not in _FIELDS:
            raise ConfigError(f"Unknown configuration option: {name}")
        values[field_name] = value

    values["key"] = _validate_key(values.get("key"))

    # None means "use the default" for the fields that have one
    for name in ("token_name", "algorithm", "escape_early", "field_delimiter",
                 "acl_delimiter", "verbose"):
        if values.get(name) is None:
            values.pop(name, None)

    if "algorithm" in values:
        algorithm = values["algorithm"]
        if isinstance(algorithm, Algorithm):
            algorithm = algorithm.value
        values["algorithm"] = str(algorithm).lower()

    return TokenConfig(**values)


class Settings(BaseSettings):
    """CLI defaults from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="EDGEAUTH_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Token defaults
    key: Optional[str] = None
    algorithm: str = "sha256"
    token_name: str = "__token__"
    field_delimiter: str = "~"
    acl_delimiter: str = "!"
    escape_early: bool = False
    window_seconds: Optional[int] = Field(default=None, gt=0)
    verbose: bool = False

    # Logging
    log_level: str = "INFO"

    def token_defaults(self) -> Dict[str, Any]:
        """Token-related settings that are set, keyed like resolve_config() expects."""
        data = self.model_dump(exclude={"log_level"})
        return {k: v for k, v in data.items() if v is not None}

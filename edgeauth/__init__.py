"""Signed access tokens for CDN edge authorization."""

from edgeauth.config import Settings, resolve_config
from edgeauth.errors import (
    ConfigError,
    EdgeAuthError,
    EndBeforeStartError,
    InvalidACLTypeError,
    InvalidEndTimeError,
    InvalidKeyEncodingError,
    InvalidKeyLengthError,
    InvalidStartTimeError,
    InvalidURLTypeError,
    InvalidWindowError,
    MissingACLError,
    MissingExpiryError,
    MissingKeyError,
    MissingURLError,
    TokenInputError,
    UnsupportedAlgorithmError,
)
from edgeauth.escaping import escape_early
from edgeauth.generator import TimeWindow, TokenGenerator
from edgeauth.types import Algorithm, TokenConfig

__version__ = "1.0.0"

__all__ = [
    "Algorithm",
    "ConfigError",
    "EdgeAuthError",
    "EndBeforeStartError",
    "InvalidACLTypeError",
    "InvalidEndTimeError",
    "InvalidKeyEncodingError",
    "InvalidKeyLengthError",
    "InvalidStartTimeError",
    "InvalidURLTypeError",
    "InvalidWindowError",
    "MissingACLError",
    "MissingExpiryError",
    "MissingKeyError",
    "MissingURLError",
    "Settings",
    "TimeWindow",
    "TokenConfig",
    "TokenGenerator",
    "TokenInputError",
    "UnsupportedAlgorithmError",
    "escape_early",
    "resolve_config",
]

"""Typed error hierarchy for token generation.

Every error carries a machine-readable `code` so callers never need to
parse exception messages.  All of them are terminal for the call that
raised them: no partial token is ever returned.
"""

from __future__ import annotations

from typing import Optional


class EdgeAuthError(Exception):
    """Base for all edgeauth errors."""
    code: str = "edgeauth_error"

    def __init__(self, message: str, *, code: Optional[str] = None):
        super().__init__(message)
        if code is not None:
            self.code = code


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigError(EdgeAuthError):
    """The generator configuration is missing or invalid."""
    code = "config_error"


class MissingKeyError(ConfigError):
    code = "missing_key"


class InvalidKeyLengthError(ConfigError):
    code = "invalid_key_length"


class InvalidKeyEncodingError(ConfigError):
    code = "invalid_key_encoding"


class InvalidStartTimeError(ConfigError):
    code = "invalid_start_time"


class InvalidEndTimeError(ConfigError):
    code = "invalid_end_time"


class InvalidWindowError(ConfigError):
    code = "invalid_window"


class MissingExpiryError(ConfigError):
    """Neither endTime nor windowSeconds was supplied."""
    code = "missing_expiry"


class EndBeforeStartError(ConfigError):
    code = "end_before_start"


class UnsupportedAlgorithmError(ConfigError):
    code = "unsupported_algorithm"


# ---------------------------------------------------------------------------
# Call argument errors
# ---------------------------------------------------------------------------

class TokenInputError(EdgeAuthError):
    """The ACL or URL handed to a generate call is unusable."""
    code = "token_input_error"


class MissingACLError(TokenInputError):
    code = "missing_acl"


class InvalidACLTypeError(TokenInputError):
    code = "invalid_acl_type"


class MissingURLError(TokenInputError):
    code = "missing_url"


class InvalidURLTypeError(TokenInputError):
    code = "invalid_url_type"

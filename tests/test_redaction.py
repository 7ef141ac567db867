"""Unit tests for edgeauth.redaction."""

from edgeauth.redaction import REDACTED, redact_config


class TestRedactConfig:
    def test_masks_key_and_salt(self):
        out = redact_config({"key": "abc123", "salt": "pepper", "ip": "1.2.3.4"})
        assert out == {"key": REDACTED, "salt": REDACTED, "ip": "1.2.3.4"}

    def test_leaves_unset_secret(self):
        assert redact_config({"salt": None})["salt"] is None

    def test_only_secret_fields_masked(self):
        out = redact_config({"session_id": "s1", "payload": "p", "algorithm": "sha256"})
        assert out == {"session_id": "s1", "payload": "p", "algorithm": "sha256"}

    def test_does_not_match_substrings(self):
        out = redact_config({"token_name": "__token__", "keyword": "k"})
        assert out == {"token_name": "__token__", "keyword": "k"}

    def test_input_unchanged(self):
        data = {"key": "abc123"}
        redact_config(data)
        assert data == {"key": "abc123"}

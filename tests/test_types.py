"""Unit tests for edgeauth.types — config struct and ACL variant."""

import dataclasses

import pytest

from edgeauth.errors import InvalidACLTypeError, MissingACLError
from edgeauth.types import (
    SUPPORTED_ALGORITHMS,
    AclPath,
    AclPaths,
    Algorithm,
    TokenConfig,
    parse_acl,
)


class TestAlgorithm:
    def test_values(self):
        assert SUPPORTED_ALGORITHMS == ("sha256", "sha1", "md5")
        assert Algorithm("sha1") is Algorithm.SHA1


class TestTokenConfig:
    def test_defaults(self):
        cfg = TokenConfig(key="abc123")
        assert cfg.token_name == "__token__"
        assert cfg.algorithm == "sha256"
        assert cfg.escape_early is False
        assert cfg.field_delimiter == "~"
        assert cfg.acl_delimiter == "!"
        assert cfg.verbose is False
        assert cfg.has_start_time is False

    def test_key_bytes(self):
        assert TokenConfig(key="abC123").key_bytes == b"\xab\xc1\x23"

    def test_frozen(self):
        cfg = TokenConfig(key="abc123")
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.key = "00"


class TestParseAcl:
    def test_string_is_stripped(self):
        assert parse_acl("  /foo/*  ") == AclPath("/foo/*")

    def test_list(self):
        acl = parse_acl(["/foo", "/goo"])
        assert acl == AclPaths(("/foo", "/goo"))
        assert acl.render("!") == "/foo!/goo"

    def test_tuple(self):
        assert parse_acl(("/a",)).render(",") == "/a"

    def test_scalar_render_ignores_delimiter(self):
        assert parse_acl("/foo").render("!") == "/foo"

    @pytest.mark.parametrize("value", [None, "", "   ", [], ()])
    def test_missing(self, value):
        with pytest.raises(MissingACLError, match="You must provide an ACL"):
            parse_acl(value)

    @pytest.mark.parametrize("value", [45345, {"a": 1}, b"/foo", ["/foo", 3]])
    def test_bad_type(self, value):
        with pytest.raises(InvalidACLTypeError, match="ACL must be a string or array"):
            parse_acl(value)

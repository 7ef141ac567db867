"""
edgeauth command line
=====================

Print a signed edge-authorization token.

  edgeauth acl /videos/* /thumbs/*  --key 0a1b... --window 300
  edgeauth url /videos/intro.mp4    --key 0a1b... --end-time 1700000000

Unset options fall back to EDGEAUTH_* environment variables (or .env).
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from edgeauth.config import Settings
from edgeauth.errors import EdgeAuthError
from edgeauth.generator import TokenGenerator

logger = logging.getLogger(__name__)


def _start_time(value: str):
    if value.lower() == "now":
        return value
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError('must be an integer or "now"')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="edgeauth", description="Generate edge authorization tokens")
    parser.add_argument("--key", help="Hex-encoded shared secret")
    parser.add_argument("--algorithm", help="sha256 (default), sha1 or md5")
    parser.add_argument("--start-time", type=_start_time, help='Unix time the token is valid from, or "now"')
    parser.add_argument("--end-time", type=int, help="Unix time the token expires")
    parser.add_argument("--window", dest="window_seconds", type=int, help="Seconds the token is valid for")
    parser.add_argument("--ip", help="Client IP to bind the token to")
    parser.add_argument("--session-id", help="Session id to bind the token to")
    parser.add_argument("--payload", help="Opaque payload carried in the token")
    parser.add_argument("--salt", help="Salt mixed into the HMAC (legacy)")
    parser.add_argument("--escape-early", action=argparse.BooleanOptionalAction, default=None,
                        help="URL-escape field values")
    parser.add_argument("--field-delimiter", help="Delimiter between token fields")
    parser.add_argument("--acl-delimiter", help="Delimiter between ACL entries")
    parser.add_argument("--token-name", help="Name used with --header")
    parser.add_argument("--header", action="store_true", help="Print NAME=TOKEN instead of the bare token")
    parser.add_argument("--verbose", action=argparse.BooleanOptionalAction, default=None,
                        help="Log the generation parameters")
    parser.add_argument("--log-level", help="Logging level (default INFO)")

    sub = parser.add_subparsers(dest="kind", required=True)
    acl = sub.add_parser("acl", help="Token for one or more ACL path patterns")
    acl.add_argument("paths", nargs="+")
    url = sub.add_parser("url", help="Token for a single URL path")
    url.add_argument("path")
    return parser


_TOKEN_OPTIONS = (
    "key", "algorithm", "start_time", "end_time", "window_seconds", "ip",
    "session_id", "payload", "salt", "escape_early", "field_delimiter",
    "acl_delimiter", "token_name", "verbose",
)


def _token_options(args: argparse.Namespace, settings: Settings) -> Dict[str, Any]:
    options = settings.token_defaults()
    for name in _TOKEN_OPTIONS:
        value = getattr(args, name)
        if value is not None:
            options[name] = value
    return options


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"error: invalid EDGEAUTH_* environment: {e}", file=sys.stderr)
        return 2

    level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        generator = TokenGenerator(_token_options(args, settings))
        if args.kind == "acl":
            paths = args.paths[0] if len(args.paths) == 1 else args.paths
            token = generator.generate_acl_token(paths)
        else:
            token = generator.generate_url_token(args.path)
    except EdgeAuthError as e:
        logger.debug("Token generation failed: %s", e.code)
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.header:
        print(f"{generator.config.token_name}={token}")
    else:
        print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())

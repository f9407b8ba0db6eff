"""CLI entrypoint for tlsadmit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tlsadmit import __version__
from tlsadmit.checks import resolve_tls_profile
from tlsadmit.ciphers import openssl_to_iana
from tlsadmit.config import load_apiserver
from tlsadmit.constants.branding import CLI_DESCRIPTION, VALID_MESSAGE
from tlsadmit.constants.config import APISERVER_FILENAME, INFRASTRUCTURE_FILENAME
from tlsadmit.exceptions import ConfigError, InfrastructureLookupError
from tlsadmit.exceptions.validation import format_errors
from tlsadmit.validation import preflight_validate


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="tlsadmit", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate an APIServer configuration document")
    validate.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path(APISERVER_FILENAME),
        help=f"APIServer document (default: {APISERVER_FILENAME})",
    )
    validate.add_argument(
        "-i",
        "--infrastructure",
        type=Path,
        default=Path(INFRASTRUCTURE_FILENAME),
        help=f"Infrastructure document with status.apiServerInternalURI (default: {INFRASTRUCTURE_FILENAME})",
    )

    profile = subparsers.add_parser("profile", help="Show the effective TLS profile of a configuration")
    profile.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path(APISERVER_FILENAME),
        help=f"APIServer document (default: {APISERVER_FILENAME})",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "validate":
        return _handle_validate(args)
    if args.command == "profile":
        return _handle_profile(args)

    parser.error(f"Unsupported command: {args.command}")


def _handle_validate(args: argparse.Namespace) -> int:
    """Run all admission checks and report results."""
    try:
        errors = preflight_validate(args.config, args.infrastructure)
    except InfrastructureLookupError as exc:
        print(f"Lookup error: {exc}", file=sys.stderr)
        return 1
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print(VALID_MESSAGE)
    return 0


def _handle_profile(args: argparse.Namespace) -> int:
    """Print the minimum TLS version and IANA cipher names in effect."""
    try:
        apiserver = load_apiserver(args.config)
        resolved = resolve_tls_profile(apiserver.spec.tls_security_profile)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print(f"type: {resolved.type}")
    print(f"minTLSVersion: {resolved.spec.min_tls_version}")
    print("ciphers:")
    for name in openssl_to_iana(resolved.spec.ciphers):
        print(f"  - {name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

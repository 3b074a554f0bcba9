"""Command-line interface for prcontext."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version

from prcontext import (
    AuthenticationError,
    CISource,
    ConfigError,
    EnvTokenResolver,
    EventLoadError,
    UnrecognizedAddressError,
    create_ci_source,
    detect_ci_source,
    require_pull_request_url,
)
from prcontext.ci import CI_SOURCES


def _package_version() -> str:
    try:
        return version("prcontext")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prcontext")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser("parse", help="Split a pull request URL into its parts")
    parse_parser.add_argument("url", help="Pull or merge request URL")
    parse_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    ci_parser = subparsers.add_parser("ci", help="Describe the CI run in the current environment")
    ci_parser.add_argument(
        "--source",
        choices=sorted(CI_SOURCES),
        default=None,
        help="CI source to use (default: detect from the environment)",
    )
    ci_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def _run_parse(args: argparse.Namespace) -> int:
    parts = require_pull_request_url(args.url)
    print(f"platform: {parts.platform.value}")
    print(f"repo: {parts.repo}")
    print(f"number: {parts.pull_request_number}")
    return 0


def _format_ci_summary(source: CISource, token_source: str | None) -> str:
    lines = [
        f"name: {source.name}",
        f"is_ci: {str(source.is_ci).lower()}",
        f"is_pr: {str(source.is_pr).lower()}",
        f"use_event_dsl: {str(source.use_event_dsl).lower()}",
    ]
    context = source.pull_request_context()
    if context is not None:
        lines.append(f"repo_slug: {context.repo_slug}")
        lines.append(f"pull_request_id: {context.pull_request_id}")
    lines.append(f"review_token: {token_source or '(none)'}")
    return "\n".join(lines)


def _run_ci(args: argparse.Namespace) -> int:
    env = dict(os.environ)
    if args.source is not None:
        source = create_ci_source(args.source, env)
    else:
        source = detect_ci_source(env)
    if source is None:
        raise ConfigError("no supported CI environment detected")

    token_source = EnvTokenResolver(env).source
    print(_format_ci_summary(source, token_source.value if token_source is not None else None))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "parse":
            return _run_parse(args)
        return _run_ci(args)
    except UnrecognizedAddressError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, EventLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1

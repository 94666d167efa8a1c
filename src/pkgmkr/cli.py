"""Command line interface for pkgmkr."""

from __future__ import annotations

import argparse
import logging
import sys
import warnings
from pathlib import Path
from typing import Iterable, Sequence

from .config import CONFIG_KEYS, create_from_config, write_config
from .errors import PkgmkrError, StepWarning
from .orchestrator import create_package
from .schema import CreationResult
from .validation import LICENSES


def _parse_key_value_pairs(pairs: Iterable[str]) -> dict[str, str]:
    document: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise argparse.ArgumentTypeError(
                f"invalid key/value pair '{pair}'. Expected KEY=VALUE syntax."
            )
        key, value = pair.split("=", 1)
        key = key.strip()
        if key not in CONFIG_KEYS:
            raise argparse.ArgumentTypeError(
                f"unknown config key '{key}'. Expected one of: {', '.join(CONFIG_KEYS)}"
            )
        document[key] = value
    return document


def _coerce_value(value: str) -> str | bool:
    lowered = value.strip().lower()
    if lowered in {"true", "yes"}:
        return True
    if lowered in {"false", "no"}:
        return False
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scaffold new R packages")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every step")
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="create a new package")
    new_parser.add_argument("path", help="Target directory; its last segment is the package name")
    new_parser.add_argument("-a", "--author", required=True, help="Author name, e.g. 'Jane Doe'")
    new_parser.add_argument("-e", "--email", help="Author email address")
    new_parser.add_argument("--license", choices=LICENSES, default="MIT", help="License to apply")
    new_parser.add_argument("--git", action=argparse.BooleanOptionalAction, default=True, help="Initialise a git repository")
    new_parser.add_argument("--git-username", help="Project scoped git user.name")
    new_parser.add_argument("--git-email", help="Project scoped git user.email")
    new_parser.add_argument("--readme", dest="readme_md", action=argparse.BooleanOptionalAction, default=True, help="Create README.md")
    new_parser.add_argument(
        "--check-name",
        dest="check_pkg_name",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Check whether the name is already taken on CRAN",
    )
    new_parser.add_argument("--pkgdown", action=argparse.BooleanOptionalAction, default=True, help="Build a pkgdown site")

    config_parser = subparsers.add_parser("from-config", help="create a package described by a config file")
    config_parser.add_argument("config", type=Path, help="Path to the YAML or JSON config file")
    config_parser.add_argument("--format", choices=["yaml", "json"], help="Config format (default: from the file suffix)")
    config_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        help="Directory the package is created in (default: the current directory)",
    )

    write_parser = subparsers.add_parser("write-config", help="write a config file")
    write_parser.add_argument("config", type=Path, help="Destination of the config file")
    write_parser.add_argument(
        "-s",
        "--set",
        metavar="KEY=VALUE",
        action="append",
        default=[],
        help="Config entry to write",
    )
    write_parser.add_argument("--format", choices=["yaml", "json"], help="Config format (default: from the file suffix)")

    return parser


def _report(result: CreationResult) -> int:
    print(f"Package {result.package_name} created at {result.path}")
    for message in result.warnings:
        print(f"warning: {message}", file=sys.stderr)
    return 0


def _handle_new(args: argparse.Namespace) -> int:
    result = create_package(
        args.path,
        args.author,
        args.email,
        git=args.git,
        git_username=args.git_username,
        git_email=args.git_email,
        readme_md=args.readme_md,
        check_pkg_name=args.check_pkg_name,
        license=args.license,
        pkgdown=args.pkgdown,
    )
    return _report(result)


def _handle_from_config(args: argparse.Namespace) -> int:
    result = create_from_config(args.config, args.format, base_dir=args.directory)
    return _report(result)


def _handle_write_config(args: argparse.Namespace) -> int:
    pairs = _parse_key_value_pairs(args.set)
    document = {key: _coerce_value(value) for key, value in pairs.items()}
    path = write_config(args.config, document, args.format)
    print(f"Config written to {path}")
    return 0


_HANDLERS = {
    "new": _handle_new,
    "from-config": _handle_from_config,
    "write-config": _handle_write_config,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.error("no command provided")
        return 2

    # Step warnings are printed from the result instead.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", StepWarning)
        try:
            return handler(args)
        except argparse.ArgumentTypeError as error:
            parser.error(str(error))
            return 2
        except PkgmkrError as error:
            print(f"error: {error}", file=sys.stderr)
            return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

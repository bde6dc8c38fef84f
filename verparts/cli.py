# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command-line interface for verparts.

This module provides the main CLI entry point for the verparts tool,
offering commands for comparing, sorting and inspecting free-form version
strings.

Commands:

    compare: Compare two versions
    sort: Sort versions oldest first (or newest first)
    newest: Print the newest version
    inspect: Show how a version is tokenized and read

Example:
    Compare two versions:
        ```bash
        $ verparts compare 1.9.0 1.10.0
        ```

    Sort versions from the command line or a YAML list:
        ```bash
        $ verparts sort 1.10 1.9 1.9-beta
        $ verparts sort --file releases.yaml --reverse --unique
        ```

    Pick the newest stable release:
        ```bash
        $ verparts newest --file releases.yaml --stable
        ```

    Enable debug output:
        ```bash
        $ verparts inspect 17.5.0-preview-20221221-03 --debug
        ```

Exit Codes:

- 0: Success
- 1: Error (invalid version, conversion failure or configuration problem)

Note:
    The CLI uses argparse for command parsing (stdlib, zero dependencies).
    Each command has its own handler function (cmd_<command>).
    Verbose mode shows full tracebacks on errors for debugging.
    Debug mode implies verbose mode and shows per-version tokenization.

"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys
import traceback

from verparts.config import DEFAULT_OPTIONS, load_effective_config
from verparts.core import (
    compare_versions,
    inspect_version,
    newest_version,
    sort_versions,
)
from verparts.exceptions import ConfigError, VerPartsError
from verparts.logging import get_logger, set_global_logger

_RELATION = {-1: "<", 0: "==", 1: ">"}


def _configure_logger(args: argparse.Namespace) -> None:
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)


def _print_error(err: Exception, args: argparse.Namespace) -> None:
    print(f"Error: {err}")
    if args.verbose or args.debug:
        traceback.print_exc()


def _gather_versions(args: argparse.Namespace) -> tuple[list[str], dict[str, bool]]:
    """Collect versions from positional arguments and the optional --file.

    Returns:
        The versions (file entries first) and the effective options.

    Raises:
        ConfigError: If the file is invalid or no versions were given.
    """
    versions: list[str] = []
    options = dict(DEFAULT_OPTIONS)
    if args.file:
        cfg = load_effective_config(Path(args.file))
        versions.extend(cfg["versions"])
        options.update(cfg["options"])
    versions.extend(args.versions)
    if not versions:
        raise ConfigError("no versions given (pass them as arguments or use --file)")
    return versions, options


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'verparts compare' command.

    Prints the relation between the two versions, e.g. ``1.9.0 < 1.10.0``.

    Args:
        args: Parsed command-line arguments containing the two versions.

    Returns:
        Exit code (0 for success, 1 for failure).

    """
    _configure_logger(args)

    try:
        result = compare_versions(args.left, args.right)
    except VerPartsError as err:
        _print_error(err, args)
        return 1

    print(f"{args.left} {_RELATION[result]} {args.right}")
    return 0


def cmd_sort(args: argparse.Namespace) -> int:
    """Handler for 'verparts sort' command.

    Prints one version per line in sorted order. Command-line flags switch
    options on; options set in the YAML file apply otherwise.

    Args:
        args: Parsed command-line arguments containing versions, optional
            file path and ordering flags.

    Returns:
        Exit code (0 for success, 1 for failure).

    """
    _configure_logger(args)

    try:
        versions, options = _gather_versions(args)
        result = sort_versions(
            versions,
            reverse=args.reverse or options["reverse"],
            unique=args.unique or options["unique"],
        )
    except VerPartsError as err:
        _print_error(err, args)
        return 1

    for v in result.versions:
        print(v)
    if result.duplicates_removed:
        print(f"({result.duplicates_removed} duplicate(s) removed)", file=sys.stderr)
    return 0


def cmd_newest(args: argparse.Namespace) -> int:
    """Handler for 'verparts newest' command.

    Args:
        args: Parsed command-line arguments containing versions, optional
            file path and the stable flag.

    Returns:
        Exit code (0 for success, 1 for failure or no candidate).

    """
    _configure_logger(args)

    try:
        versions, options = _gather_versions(args)
        include_prerelease = options["include_prerelease"] and not args.stable
        result = newest_version(versions, include_prerelease=include_prerelease)
    except VerPartsError as err:
        _print_error(err, args)
        return 1

    if result is None:
        print("Error: no stable version found")
        return 1
    print(result)
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    """Handler for 'verparts inspect' command.

    Prints every part with its typed readings and the fixed 4-number form.

    Args:
        args: Parsed command-line arguments containing the version.

    Returns:
        Exit code (0 for success, 1 for failure).

    """
    _configure_logger(args)

    try:
        result = inspect_version(args.version)
    except VerPartsError as err:
        _print_error(err, args)
        return 1

    print("=" * 70)
    print("VERSION PARTS")
    print("=" * 70)
    print(f"Version:      {result.original}")
    print(f"Parts:        {len(result.parts)}")
    print(f"Prerelease:   {'yes' if result.is_prerelease else 'no'}")
    if result.fixed4 is not None:
        print(f"Fixed 4-part: {result.fixed4}")
    else:
        print(f"Fixed 4-part: n/a ({result.fixed4_error})")
    print()
    for part in result.parts:
        if part.is_prerelease:
            kind = "text"
        elif part.value_int is not None:
            kind = "int32"
        elif part.value_long is not None:
            kind = "int64"
        else:
            kind = "bigint"
        line = f"  [{part.index}] {part.value!r:<24} {kind}"
        if part.value_date is not None:
            line += f" date={part.value_date.isoformat()}"
        print(line)
    print("=" * 70)
    return 0


def _add_verbosity(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )


def _add_version_sources(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "versions",
        nargs="*",
        help="Version strings",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        help="YAML file with a 'versions' list (and optional 'options')",
    )


def _package_version() -> str:
    try:
        return version("verparts")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        prog="verparts",
        description="verparts - compare and sort free-form version strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"verparts {_package_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two versions",
        description="Print whether the first version is older, equal or newer.",
    )
    parser_compare.add_argument("left", help="First version")
    parser_compare.add_argument("right", help="Second version")
    _add_verbosity(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    # 'sort' command
    parser_sort = subparsers.add_parser(
        "sort",
        help="Sort versions",
        description="Print versions oldest first, one per line.",
    )
    _add_version_sources(parser_sort)
    parser_sort.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Newest first",
    )
    parser_sort.add_argument(
        "-u",
        "--unique",
        action="store_true",
        help="Drop versions equal to one already printed (e.g. 1.0 and 1.0.0)",
    )
    _add_verbosity(parser_sort)
    parser_sort.set_defaults(func=cmd_sort)

    # 'newest' command
    parser_newest = subparsers.add_parser(
        "newest",
        help="Print the newest version",
        description="Print the newest of the given versions.",
    )
    _add_version_sources(parser_newest)
    parser_newest.add_argument(
        "--stable",
        action="store_true",
        help="Skip versions with non-numeric parts (alpha, beta, rc, ...)",
    )
    _add_verbosity(parser_newest)
    parser_newest.set_defaults(func=cmd_newest)

    # 'inspect' command
    parser_inspect = subparsers.add_parser(
        "inspect",
        help="Show how a version is parsed",
        description="Show each part of a version with its numeric and date readings.",
    )
    parser_inspect.add_argument("version", help="Version string")
    _add_verbosity(parser_inspect)
    parser_inspect.set_defaults(func=cmd_inspect)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the verparts CLI.

    This function is registered as the 'verparts' console script in
    pyproject.toml.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

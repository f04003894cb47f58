# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

import argparse
import sys
from pathlib import Path

from . import ParseVersionError, Version, VersionEntry
from .gh_logging import Logger
from .version_files import (
    analyze_order,
    parse_version_lines,
    read_version_lines,
    sort_entries,
    try_read_metadata_versions,
)

log = Logger(__name__)

_COMPARE_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="appversion",
        description="Parse, compare and sort loosely formatted version strings.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser(
        "parse", help="Print the canonical dotted form of each version."
    )
    parse_cmd.add_argument("versions", nargs="+")

    compare_cmd = commands.add_parser(
        "compare", help="Print '<', '=' or '>' for two versions."
    )
    compare_cmd.add_argument("left")
    compare_cmd.add_argument("right")

    sort_cmd = commands.add_parser("sort", help="Print versions in ascending order.")
    sort_cmd.add_argument("versions", nargs="*")
    sort_cmd.add_argument(
        "--file",
        type=str,
        default=None,
        help="Read one version per line from this file ('-' for stdin).",
    )
    sort_cmd.add_argument(
        "--reverse", action="store_true", help="Highest version first."
    )
    sort_cmd.add_argument(
        "--unique",
        action="store_true",
        help="Drop versions equal to an earlier one (e.g. 1.2 and 1.2.0).",
    )

    check_cmd = commands.add_parser(
        "check",
        help="Verify metadata.json version lists are parsable, "
        "sorted highest first and free of duplicates.",
    )
    check_cmd.add_argument("paths", nargs="+", type=Path)

    return parser.parse_args(args)


def cmd_parse(p: argparse.Namespace) -> None:
    for text in p.versions:
        try:
            print(Version(text))
        except ParseVersionError as e:
            log.warning(f"{text!r}: {e}")


def cmd_compare(p: argparse.Namespace) -> None:
    try:
        left = Version(p.left)
        right = Version(p.right)
    except ParseVersionError as e:
        log.fatal(str(e))

    print(_COMPARE_SYMBOLS[left.compare(right)])


def collect_sort_input(p: argparse.Namespace) -> list[VersionEntry]:
    entries: list[VersionEntry] = []
    for text in p.versions:
        try:
            entries.append(VersionEntry(text=text, version=Version(text)))
        except ParseVersionError as e:
            log.warning(f"{text!r}: {e}")

    if p.file == "-":
        entries += parse_version_lines(sys.stdin.read(), logger=log).entries
    elif p.file:
        try:
            entries += read_version_lines(Path(p.file), logger=log).entries
        except OSError as e:
            log.warning(f"{p.file} could not be read: {e}")

    return entries


def cmd_sort(p: argparse.Namespace) -> None:
    entries = collect_sort_input(p)
    for entry in sort_entries(entries, reverse=p.reverse, unique=p.unique):
        print(entry.text)


def cmd_check(p: argparse.Namespace) -> None:
    for path in p.paths:
        versions = try_read_metadata_versions(path, logger=log)
        if versions is None:
            continue

        problems = [r for r in analyze_order(versions) if r.type != "ok"]
        for r in problems:
            log.warning(r.msg, r.where)

        if not problems:
            log.ok(f"{path}: {len(versions.entries)} versions in order")


COMMANDS = {
    "parse": cmd_parse,
    "compare": cmd_compare,
    "sort": cmd_sort,
    "check": cmd_check,
}


def main(args: list[str]) -> None:
    """Main entry point for the appversion command line tool."""
    p = parse_args(args)
    # main() may run several times in one process
    log.warnings.clear()

    COMMANDS[p.command](p)

    if log.warnings:
        # If any warnings were issued, exit with non-zero code
        log.fatal(f"Completed with {len(log.warnings)} warnings.")


def run() -> None:
    main(args=sys.argv[1:])


if __name__ == "__main__":
    run()

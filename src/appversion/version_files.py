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

import json
from dataclasses import dataclass
from pathlib import Path

from . import ParseVersionError, Version, VersionEntry, VersionList
from .gh_logging import Location, Logger

log = Logger(__name__)


@dataclass
class CheckResult:
    type: str  # 'ok', 'warning'
    where: Location
    msg: str


def _find_line(content: str, text: str, start: int = 0) -> int | None:
    """Locate the first line after line `start` holding the JSON string literal `text`."""
    needle = json.dumps(text)
    lines = content.splitlines()[start:]
    for number, line in enumerate(lines, start=start + 1):
        if needle in line:
            return number
    return None


def _error_column(raw: str, err: ParseVersionError) -> int:
    # 1-based column of the offending fragment within the unstripped line
    return len(raw.rstrip()) - len(err.remainder) + 1


def parse_version_lines(
    content: str, path: Path | None = None, logger: Logger | None = None
) -> VersionList:
    """Parse one version per line, skipping blank lines and # comments.

    Lines that fail to parse are reported as warnings and left out.
    """
    logger = logger or log
    result = VersionList(path=path)
    for number, raw in enumerate(content.splitlines(), start=1):
        text = raw.strip()
        if not text or text.startswith("#"):
            continue

        try:
            version = Version(text)
        except ParseVersionError as e:
            where = Location(path or Path("<stdin>"), number, _error_column(raw, e))
            logger.warning(f"{e}", where)
            continue

        result.entries.append(VersionEntry(text=text, version=version, line=number))
    return result


def read_version_lines(path: Path, logger: Logger | None = None) -> VersionList:
    with open(path) as f:
        return parse_version_lines(f.read(), path, logger)


def try_read_metadata_versions(
    metadata_json: Path, logger: Logger | None = None
) -> VersionList | None:
    """Read the "versions" list of a metadata.json file.

    Returns None (after a warning) if the file is missing or malformed.
    Unparsable versions are reported and left out of the result.
    """
    logger = logger or log

    if not metadata_json.exists():
        logger.warning(f"{metadata_json} does not exist; skipping")
        return None

    try:
        with open(metadata_json) as f:
            content = f.read()
        data = json.loads(content)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"{metadata_json} could not be parsed: {e}")
        return None

    raw_versions = data.get("versions", []) if isinstance(data, dict) else None
    if not isinstance(raw_versions, list):
        logger.warning(
            f"{metadata_json} has invalid versions field; expected list of version strings",
            Location(metadata_json),
        )
        return None

    result = VersionList(path=metadata_json)
    # Entries appear in source order, so each search resumes after the last match.
    last_line = 0
    for raw in raw_versions:  # pyright: ignore[reportUnknownVariableType]
        if not isinstance(raw, str):
            logger.warning(
                f"{metadata_json} has non-string version {raw!r}",
                Location(metadata_json),
            )
            continue

        line = _find_line(content, raw, last_line)
        if line:
            last_line = line
        try:
            version = Version(raw)
        except ParseVersionError as e:
            logger.warning(f"{e}", Location(metadata_json, line))
            continue

        result.entries.append(VersionEntry(text=raw, version=version, line=line))
    return result


def analyze_order(versions: VersionList) -> list[CheckResult]:
    """Check that versions are listed highest first, without duplicates.

    New versions get prepended to metadata.json, so the list is expected
    in strictly descending order.
    """
    path = versions.path or Path("<input>")
    results: list[CheckResult] = []
    seen: dict[Version, VersionEntry] = {}
    previous: VersionEntry | None = None

    for entry in versions.entries:
        where = Location(path, entry.line)
        if entry.version in seen:
            first = seen[entry.version]
            results.append(
                CheckResult(
                    type="warning",
                    where=where,
                    msg=f"version {entry.text} duplicates {first.text}",
                )
            )
        elif previous and previous.version < entry.version:
            results.append(
                CheckResult(
                    type="warning",
                    where=where,
                    msg=f"version {entry.text} is listed after lower version {previous.text}",
                )
            )
        else:
            results.append(
                CheckResult(type="ok", where=where, msg=f"version {entry.text} in order")
            )

        seen.setdefault(entry.version, entry)
        previous = entry
    return results


def sort_entries(
    entries: list[VersionEntry], reverse: bool = False, unique: bool = False
) -> list[VersionEntry]:
    """Stable sort by version; `unique` keeps the first of equal versions."""
    if unique:
        kept: dict[Version, VersionEntry] = {}
        for entry in entries:
            kept.setdefault(entry.version, entry)
        entries = list(kept.values())
    return sorted(entries, key=lambda e: e.version, reverse=reverse)


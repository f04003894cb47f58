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

from dataclasses import dataclass, field
from pathlib import Path

from .component import COMPONENT_SEPARATORS, MAX_NUMBER, Component
from .scanner import ComponentScanner, ParseVersionError
from .version import Version

__all__ = [
    "COMPONENT_SEPARATORS",
    "MAX_NUMBER",
    "Component",
    "ComponentScanner",
    "ParseVersionError",
    "Version",
    "VersionEntry",
    "VersionList",
]


@dataclass
class VersionEntry:
    # Text as written in the source, before canonicalization
    text: str
    version: Version
    # 1-based line in the source file, if known
    line: int | None = None


@dataclass
class VersionList:
    path: Path | None
    # Entries in source order
    entries: list[VersionEntry] = field(default_factory=list)

    @property
    def versions(self) -> list[Version]:
        return [e.version for e in self.entries]

    @property
    def latest(self) -> Version:
        """Highest version in the list, regardless of its position."""
        if not self.entries:
            raise ValueError("No versions available")
        return max(self.versions)

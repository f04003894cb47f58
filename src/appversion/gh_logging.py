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

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

_GITHUB_COMMANDS = {
    "debug": "debug",
    "info": "notice",
    "warning": "warning",
    "error": "error",
    "success": "notice",
}

_LOCAL_PREFIXES = {
    "debug": "DEBUG",
    "info": "INFO",
    "warning": "WARNING",
    "error": "ERROR",
    "success": "SUCCESS",
}


def is_running_in_github_actions() -> bool:
    return "GITHUB_ACTIONS" in os.environ


@dataclass(frozen=True)
class Location:
    """Points at a version inside an input file."""

    file: Path
    line: int | None = None
    col: int | None = None

    def display_path(self) -> Path:
        if self.file.is_absolute():
            try:
                return self.file.relative_to(Path.cwd())
            except ValueError:
                return self.file
        return self.file

    def as_annotation(self) -> str:
        parts = [f"file={self.display_path()}"]
        if self.line:
            parts.append(f"line={self.line}")
            if self.col:
                parts.append(f"col={self.col}")
        return ",".join(parts)

    def __str__(self) -> str:
        s = str(self.display_path())
        if self.line:
            s += f":{self.line}"
            if self.col:
                s += f":{self.col}"
        return s


class Logger:
    """Minimal logger that prints locally and emits annotations on GitHub Actions."""

    def __init__(self, name: str):
        self.name = name
        self.warnings: list[str] = []

    def _print(self, prefix: str, msg: str, where: Location | None = None) -> None:
        if is_running_in_github_actions():
            annotation = f" {where.as_annotation()}" if where else ""
            print(f"::{_GITHUB_COMMANDS.get(prefix, prefix)}{annotation}::{self.name} {msg}")
            return

        location = f" {where}" if where else ""
        # Diagnostics go to stderr so stdout only carries results.
        print(
            f"{_LOCAL_PREFIXES.get(prefix, prefix)}:{location} {self.name} {msg}",
            file=sys.stderr,
        )

    def debug(self, msg: str) -> None:
        self._print("debug", msg)

    def info(self, msg: str) -> None:
        self._print("info", msg)

    def ok(self, msg: str) -> None:
        self._print("success", msg)

    def warning(self, msg: str, where: Location | None = None) -> None:
        self.warnings.append(msg)
        self._print("warning", msg, where)

    def fatal(self, msg: str, where: Location | None = None) -> NoReturn:
        self._print("error", msg, where)
        raise SystemExit(1)

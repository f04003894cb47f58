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
from typing import Any
from unittest.mock import patch

import pytest

from appversion.gh_logging import Location, Logger


class MockLogger(Logger):
    """Logger that captures messages for testing."""

    def __init__(self):
        super().__init__("test")
        self.debug_messages: list[str] = []
        self.info_messages: list[str] = []
        self.warning_messages: list[str] = []
        self.error_messages: list[str] = []
        self.success_messages: list[str] = []
        self.locations: list[Location | None] = []

    def _print(self, prefix: str, msg: str, where: Location | None = None) -> None:
        if prefix == "debug":
            self.debug_messages.append(msg)
        elif prefix == "info":
            self.info_messages.append(msg)
        elif prefix == "warning":
            self.warning_messages.append(msg)
            self.locations.append(where)
        elif prefix == "error":
            self.error_messages.append(msg)
        elif prefix == "success":
            self.success_messages.append(msg)


@pytest.fixture
def mock_logger() -> MockLogger:
    """Create a mock logger for testing."""
    return MockLogger()


@pytest.fixture
def cli_logger(mock_logger: MockLogger):
    """Route the command line tool's output through a MockLogger."""
    with patch("appversion.main.log", mock_logger):
        yield mock_logger


@pytest.fixture
def build_fake_filesystem(fs: Any):
    """Convenience helper to build a fake filesystem from a nested dict."""

    def _build(structure: dict[str, object], base_path: str = "") -> None:
        base = base_path or "/"
        for name, value in structure.items():
            path = f"{base.rstrip('/')}/{name}"
            if isinstance(value, dict):
                fs.makedirs(path, exist_ok=True)
                _build(value, path)
            else:
                fs.create_file(path, contents=value)

    return _build


@pytest.fixture
def metadata_file(build_fake_filesystem):
    """Write /modules/<name>/metadata.json with the given versions list."""

    def _setup(versions: list[object], name: str = "demo") -> str:
        build_fake_filesystem(
            {"modules": {name: {"metadata.json": json.dumps({"versions": versions}, indent=4)}}}
        )
        return f"/modules/{name}/metadata.json"

    return _setup

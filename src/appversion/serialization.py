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

"""JSON adapter for versions.

Versions travel as their canonical text, e.g. Version("1.0-rc1") is "1.0.rc.1".
"""

import json
from typing import Any

from .version import Version


def to_json_value(version: Version) -> str:
    return str(version)


def from_json_value(value: object) -> Version:
    if not isinstance(value, str):
        raise TypeError(f"Expected a version string, got {type(value).__name__}")
    return Version(value)


class VersionJSONEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:
        if isinstance(o, Version):
            return to_json_value(o)
        return super().default(o)


def dumps(obj: object, **kwargs: Any) -> str:
    """json.dumps that renders any nested Version as a string."""
    return json.dumps(obj, cls=VersionJSONEncoder, **kwargs)


def loads_versions(text: str) -> list[Version]:
    """Decode a JSON array of version strings."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise TypeError("Expected a JSON array of version strings")
    return [from_json_value(v) for v in data]  # pyright: ignore[reportUnknownVariableType]

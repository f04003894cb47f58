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

from functools import total_ordering

from .component import Component
from .scanner import ComponentScanner, ParseVersionError


@total_ordering
class Version:
    """A parsed version, made of one or more components.

    Missing trailing components count as zero, so "1.2" == "1.2.0".
    A missing component is newer than an identifier: "1.0" > "1.0.rc1".
    """

    def __init__(self, s: str = "0.0.0") -> None:
        if not isinstance(s, str):
            raise TypeError("Version must be a string")

        if not s:
            raise ParseVersionError(s)

        self._components = tuple(ComponentScanner(s))

    @classmethod
    def parse(cls, s: str) -> "Version":
        return cls(s)

    @property
    def components(self) -> tuple[Component, ...]:
        return self._components

    def compare(self, other: "Version") -> int:
        """Return -1, 0 or 1 as self is lower than, equal to or higher than other."""
        mine = iter(self._components)
        theirs = iter(other._components)

        while True:
            a = next(mine, None)
            b = next(theirs, None)

            if a is None and b is None:
                return 0

            if a is None or b is None:
                if a is None:
                    present = b
                else:
                    present = a
                if present.is_zero:
                    continue
                # A missing component loses to a number but beats an identifier.
                missing_is_lower = present.is_number
                if a is None:
                    return -1 if missing_is_lower else 1
                return 1 if missing_is_lower else -1

            if a != b:
                return -1 if a < b else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        # Trailing zeros do not take part in equality.
        components = list(self._components)
        while components and components[-1].is_zero:
            components.pop()
        return hash(tuple(components))

    def __len__(self) -> int:
        return len(self._components)

    def __str__(self) -> str:
        return ".".join(str(c) for c in self._components)

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

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

from dataclasses import dataclass
from functools import total_ordering

# Characters that are hard delimiters between components.
COMPONENT_SEPARATORS = ".-_+:"

# Numbers are limited to the unsigned 64-bit range.
MAX_NUMBER = 2**64 - 1


def is_ascii_letters(s: str) -> bool:
    return s.isascii() and s.isalpha()


@total_ordering
@dataclass(frozen=True)
class Component:
    """An indivisible part of a version: a number or an alphabetic identifier.

    Numbers compare by magnitude, identifiers lexicographically.
    An identifier always orders before a number.
    """

    value: int | str = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, str)):
            raise TypeError("Component must be an int or a str")

        if isinstance(self.value, int):
            if not 0 <= self.value <= MAX_NUMBER:
                raise ValueError(f"Number component out of range: {self.value}")
        elif not is_ascii_letters(self.value):
            raise ValueError(f"Invalid identifier component: {self.value!r}")

    @property
    def is_number(self) -> bool:
        return isinstance(self.value, int)

    @property
    def is_identifier(self) -> bool:
        return isinstance(self.value, str)

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    def _key(self) -> tuple[int, int | str]:
        return (1, self.value) if self.is_number else (0, self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return str(self.value)

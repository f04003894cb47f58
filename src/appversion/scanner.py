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

import re
from collections.abc import Iterator
from typing import NoReturn

from .component import COMPONENT_SEPARATORS, MAX_NUMBER, Component

_DIGITS = re.compile(r"[0-9]+")
_LETTERS = re.compile(r"[A-Za-z]+")

# Some versions carry a trailing annotation, e.g. "7.4.1 (4452929)".
_SUFFIX_START = " ("


class ParseVersionError(ValueError):
    """Raised when a version string cannot be parsed.

    `remainder` holds the input that was left unconsumed at the failure point.
    """

    def __init__(self, remainder: str) -> None:
        super().__init__(f"invalid version: {remainder}")
        self.remainder = remainder


class ComponentScanner(Iterator[Component]):
    """Lazily splits a version string into components, left to right.

    Separators are only accepted between components. Iteration raises
    ParseVersionError on the first malformed fragment and is exhausted after.
    """

    def __init__(self, text: str) -> None:
        self._input = text
        self._first = True
        self._done = False

    @property
    def remainder(self) -> str:
        return self._input

    def __iter__(self) -> "ComponentScanner":
        return self

    def __next__(self) -> Component:
        if self._done or not self._input:
            self._done = True
            raise StopIteration

        if self._first:
            self._first = False
        elif self._input[0] in COMPONENT_SEPARATORS:
            self._input = self._input[1:]
        elif self._input.startswith(_SUFFIX_START):
            tail = self._input[len(_SUFFIX_START) :]
            if tail.endswith(")") and tail.find(")") == len(tail) - 1:
                self._input = ""
                self._done = True
                raise StopIteration
            self._fail()

        component = self._parse_number() or self._parse_identifier()
        if component is None:
            self._fail()
        return component

    def _parse_number(self) -> Component | None:
        m = _DIGITS.match(self._input)
        if not m:
            return None

        number = int(m.group())
        if number > MAX_NUMBER:
            return None

        self._input = self._input[m.end() :]
        return Component(number)

    def _parse_identifier(self) -> Component | None:
        m = _LETTERS.match(self._input)
        if not m:
            return None

        self._input = self._input[m.end() :]
        return Component(m.group())

    def _fail(self) -> NoReturn:
        self._done = True
        raise ParseVersionError(self._input)

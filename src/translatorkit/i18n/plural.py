# Copyright 2026 Firefly Software Solutions Inc.
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
"""Plural rules in the gettext ``Plural-Forms`` syntax."""

from __future__ import annotations

import gettext
import re
from collections.abc import Callable

from translatorkit.i18n.exceptions import PluralRuleError

_RULE_RE = re.compile(
    r"^\s*nplurals\s*=\s*(?P<count>\d+)\s*;\s*plural\s*=\s*(?P<expr>[^;]+?)\s*;?\s*$",
)

DEFAULT_RULE = "nplurals=2; plural=(n != 1);"


class PluralRule:
    """Maps a number to the index of the plural form to use.

    Parsed from a header such as ``nplurals=3; plural=(n==1 ? 0 : n<5 ? 1 : 2);``.
    The C expression is compiled with :func:`gettext.c2py`.
    """

    __slots__ = ("_expression", "_func", "_num_plurals")

    def __init__(self, num_plurals: int, expression: str) -> None:
        if num_plurals < 1:
            raise PluralRuleError(f"nplurals must be at least 1, got {num_plurals}")
        try:
            func: Callable[[int], int] = gettext.c2py(expression)
        except (ValueError, SyntaxError) as exc:
            raise PluralRuleError(f"Invalid plural expression '{expression}': {exc}") from exc
        self._num_plurals = num_plurals
        self._expression = expression
        self._func = func

    @classmethod
    def from_string(cls, rule: str) -> PluralRule:
        match = _RULE_RE.match(rule)
        if match is None:
            raise PluralRuleError(f"Malformed plural rule '{rule}'")
        return cls(int(match.group("count")), match.group("expr"))

    @classmethod
    def default(cls) -> PluralRule:
        return cls.from_string(DEFAULT_RULE)

    @property
    def num_plurals(self) -> int:
        return self._num_plurals

    @property
    def expression(self) -> str:
        return self._expression

    def evaluate(self, number: int) -> int:
        """Return the plural-form index for *number*."""
        index = int(self._func(abs(int(number))))
        if not 0 <= index < self._num_plurals:
            raise PluralRuleError(
                f"Plural rule '{self}' selected form {index} for n={number}, "
                f"but only {self._num_plurals} forms exist"
            )
        return index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PluralRule):
            return NotImplemented
        return (self._num_plurals, self._expression) == (other._num_plurals, other._expression)

    def __hash__(self) -> int:
        return hash((self._num_plurals, self._expression))

    def __str__(self) -> str:
        return f"nplurals={self._num_plurals}; plural={self._expression};"

    def __repr__(self) -> str:
        return f"PluralRule({self._num_plurals!r}, {self._expression!r})"

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
"""TextDomain — the messages of one text domain for one locale."""

from __future__ import annotations

from translatorkit.i18n.exceptions import PluralRuleError
from translatorkit.i18n.plural import PluralRule

Message = str | list[str]


class TextDomain(dict[str, Message]):
    """Message id to translation mapping with an attached plural rule.

    Plural entries hold one string per plural form. A domain created
    without an explicit rule uses the English default and adopts the rule
    of the first explicit domain merged into it.
    """

    def __init__(
        self,
        messages: dict[str, Message] | None = None,
        plural_rule: PluralRule | None = None,
    ) -> None:
        super().__init__(messages or {})
        self._plural_rule = plural_rule

    @property
    def plural_rule(self) -> PluralRule:
        return self._plural_rule or PluralRule.default()

    @plural_rule.setter
    def plural_rule(self, rule: PluralRule) -> None:
        self._plural_rule = rule

    @property
    def has_plural_rule(self) -> bool:
        """Whether the rule was set explicitly rather than defaulted."""
        return self._plural_rule is not None

    def merge(self, other: TextDomain) -> TextDomain:
        """Copy *other*'s messages into this domain; later entries win."""
        if other.has_plural_rule:
            if not self.has_plural_rule:
                self._plural_rule = other.plural_rule
            elif self.plural_rule.num_plurals != other.plural_rule.num_plurals:
                raise PluralRuleError(
                    "Cannot merge text domains with different plural-form counts: "
                    f"{self.plural_rule.num_plurals} vs {other.plural_rule.num_plurals}"
                )
        self.update(other)
        return self

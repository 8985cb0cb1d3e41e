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
"""Tests for TextDomain catalogues."""

import pytest

from translatorkit.i18n.exceptions import PluralRuleError
from translatorkit.i18n.plural import PluralRule
from translatorkit.i18n.text_domain import TextDomain

THREE_FORMS = PluralRule.from_string("nplurals=3; plural=(n==1 ? 0 : n<5 ? 1 : 2);")


class TestTextDomain:
    def test_behaves_like_a_dict(self):
        domain = TextDomain({"Hello": "Hallo"})
        assert domain["Hello"] == "Hallo"
        assert domain == {"Hello": "Hallo"}

    def test_defaults_to_english_rule(self):
        domain = TextDomain()
        assert not domain.has_plural_rule
        assert domain.plural_rule == PluralRule.default()

    def test_explicit_rule(self):
        domain = TextDomain(plural_rule=THREE_FORMS)
        assert domain.has_plural_rule
        assert domain.plural_rule.num_plurals == 3


class TestTextDomainMerge:
    def test_later_entries_win(self):
        domain = TextDomain({"Hello": "Hallo", "Bye": "Tschüss"})
        domain.merge(TextDomain({"Hello": "Servus"}))
        assert domain == {"Hello": "Servus", "Bye": "Tschüss"}

    def test_adopts_explicit_rule(self):
        domain = TextDomain({"a": "b"})
        domain.merge(TextDomain(plural_rule=THREE_FORMS))
        assert domain.plural_rule == THREE_FORMS

    def test_keeps_own_rule_when_other_has_none(self):
        domain = TextDomain(plural_rule=THREE_FORMS)
        domain.merge(TextDomain({"x": "y"}))
        assert domain.plural_rule == THREE_FORMS

    def test_mismatched_plural_counts(self):
        domain = TextDomain(plural_rule=THREE_FORMS)
        with pytest.raises(PluralRuleError, match="different plural-form counts"):
            domain.merge(TextDomain(plural_rule=PluralRule.default()))

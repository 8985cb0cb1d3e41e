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
"""Tests for resolve_translator, the registry-free decision procedure."""

import pytest

from translatorkit.i18n.capability import IntlCapability
from translatorkit.i18n.dummy import DummyTranslator
from translatorkit.i18n.loaders.plugin_manager import LoaderPluginManager
from translatorkit.i18n.translator import Translator
from translatorkit.mvc.service import resolve_translator
from translatorkit.mvc.translator import MvcTranslator

INTL = IntlCapability.enabled()
NO_INTL = IntlCapability.disabled()


class TestResolveTranslator:
    def test_given_translator_wins_over_config(self):
        inner = DummyTranslator()
        adapter = resolve_translator(inner, {"locale": "en_US"}, intl=INTL)
        assert isinstance(adapter, MvcTranslator)
        assert adapter.get_translator() is inner

    def test_given_translator_used_without_intl(self):
        inner = Translator(locale="en_US")
        assert resolve_translator(inner, intl=NO_INTL).get_translator() is inner

    @pytest.mark.parametrize("config", [None, {}, False, "en_US", 42])
    def test_dummy_without_usable_config(self, config):
        adapter = resolve_translator(config=config, intl=INTL)
        assert isinstance(adapter.get_translator(), DummyTranslator)

    def test_dummy_when_intl_unavailable(self):
        adapter = resolve_translator(config={"locale": "en_US"}, intl=NO_INTL)
        assert isinstance(adapter.get_translator(), DummyTranslator)

    def test_translator_built_from_mapping(self):
        adapter = resolve_translator(config={"locale": "en_US"}, intl=INTL)
        translator = adapter.get_translator()
        assert isinstance(translator, Translator)
        assert translator.get_locale() == "en_US"

    def test_default_locale_applies_when_mapping_has_none(self):
        adapter = resolve_translator(
            config={"fallback_locale": "en"}, intl=INTL, default_locale="de_DE"
        )
        assert adapter.get_translator().get_locale() == "de_DE"

    def test_plugin_manager_provider_injected(self):
        manager = LoaderPluginManager()
        adapter = resolve_translator(
            config={"locale": "en_US"}, plugin_manager_provider=lambda: manager, intl=INTL
        )
        assert adapter.get_plugin_manager() is manager

    def test_plugin_manager_provider_not_called_for_dummy(self):
        def provider():
            raise AssertionError("provider should not be called")

        resolve_translator(config=False, plugin_manager_provider=provider, intl=INTL)
        resolve_translator(config={"locale": "en_US"}, plugin_manager_provider=provider, intl=NO_INTL)

    def test_each_call_builds_a_new_translator(self):
        first = resolve_translator(config={"locale": "en_US"}, intl=INTL)
        second = resolve_translator(config={"locale": "en_US"}, intl=INTL)
        assert first.get_translator() is not second.get_translator()

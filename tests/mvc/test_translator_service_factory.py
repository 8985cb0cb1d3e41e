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
"""Tests for TranslatorServiceFactory and TranslatorPluginManagerFactory."""

import pytest

from translatorkit.container.exceptions import ServiceFactoryError
from translatorkit.container.registry import ServiceRegistry
from translatorkit.core.config import Config
from translatorkit.i18n.capability import IntlCapability
from translatorkit.i18n.dummy import DummyTranslator
from translatorkit.i18n.exceptions import InvalidTranslatorConfigError
from translatorkit.i18n.loaders.plugin_manager import LoaderPluginManager
from translatorkit.i18n.translator import Translator
from translatorkit.mvc.service import (
    CONFIG,
    TRANSLATOR_INTERFACE,
    TRANSLATOR_PLUGIN_MANAGER,
    TranslatorPluginManagerFactory,
    TranslatorServiceFactory,
)
from translatorkit.mvc.translator import MvcTranslator


@pytest.fixture
def registry():
    services = ServiceRegistry()
    services.set_factory(TRANSLATOR_PLUGIN_MANAGER, TranslatorPluginManagerFactory())
    return services


@pytest.fixture
def factory():
    return TranslatorServiceFactory(intl=IntlCapability.enabled())


class TestExistingTranslatorService:
    def test_prefers_registered_translator_over_config(self, registry, factory):
        inner = DummyTranslator()
        registry.set_service(TRANSLATOR_INTERFACE, inner)
        registry.set_service(CONFIG, {"translator": {"locale": "en_US"}})

        adapter = factory.create_service(registry)

        assert isinstance(adapter, MvcTranslator)
        assert adapter.get_translator() is inner

    def test_registered_translator_used_without_intl(self, registry):
        inner = Translator(locale="en_US")
        registry.set_service(TRANSLATOR_INTERFACE, inner)
        factory = TranslatorServiceFactory(intl=IntlCapability.disabled())
        assert factory.create_service(registry).get_translator() is inner


class TestDummyTranslator:
    def test_no_config_service(self, registry, factory):
        adapter = factory.create_service(registry)
        assert isinstance(adapter.get_translator(), DummyTranslator)
        assert not registry.has(TRANSLATOR_INTERFACE)

    def test_config_without_translator_key(self, registry, factory):
        registry.set_service(CONFIG, {"view_manager": {}})
        assert isinstance(factory.create_service(registry).get_translator(), DummyTranslator)

    def test_translator_disabled(self, registry, factory):
        registry.set_service(CONFIG, {"translator": False})
        adapter = factory.create_service(registry)
        assert isinstance(adapter.get_translator(), DummyTranslator)
        assert not registry.has(TRANSLATOR_INTERFACE)

    def test_translator_disabled_in_typed_config(self, registry, factory):
        registry.set_service(CONFIG, Config({"translator": False}))
        assert isinstance(factory.create_service(registry).get_translator(), DummyTranslator)

    def test_empty_translator_mapping(self, registry, factory):
        registry.set_service(CONFIG, {"translator": {}})
        assert isinstance(factory.create_service(registry).get_translator(), DummyTranslator)

    def test_intl_unavailable_ignores_mapping(self, registry):
        registry.set_service(CONFIG, {"translator": {"locale": "en_US"}})
        factory = TranslatorServiceFactory(intl=IntlCapability.disabled())

        adapter = factory.create_service(registry)

        assert isinstance(adapter.get_translator(), DummyTranslator)
        assert not registry.has(TRANSLATOR_INTERFACE)

    def test_unusable_config_service(self, registry, factory):
        registry.set_service(CONFIG, ["translator"])
        assert isinstance(factory.create_service(registry).get_translator(), DummyTranslator)


class TestConfiguredTranslator:
    def test_builds_translator_from_mapping(self, registry, factory):
        registry.set_service(CONFIG, {"translator": {"locale": "en_US"}})

        adapter = factory.create_service(registry)

        translator = adapter.get_translator()
        assert isinstance(translator, Translator)
        assert translator.get_locale() == "en_US"

    def test_stores_built_translator_in_registry(self, registry, factory):
        registry.set_service(CONFIG, {"translator": {"locale": "en_US"}})

        adapter = factory.create_service(registry)

        assert registry.has(TRANSLATOR_INTERFACE)
        assert registry.get(TRANSLATOR_INTERFACE) is adapter.get_translator()

    def test_uses_plugin_manager_from_registry(self, registry, factory):
        registry.set_service(CONFIG, {"translator": {"locale": "en_US"}})

        adapter = factory.create_service(registry)

        assert adapter.get_plugin_manager() is registry.get(TRANSLATOR_PLUGIN_MANAGER)

    def test_typed_config(self, registry, factory):
        registry.set_service(CONFIG, Config({"translator": {"locale": "fr_FR"}}))
        assert factory.create_service(registry).get_translator().get_locale() == "fr_FR"

    def test_default_locale(self, registry):
        registry.set_service(CONFIG, {"translator": {"fallback_locale": "en"}})
        factory = TranslatorServiceFactory(intl=IntlCapability.enabled(), default_locale="nl_NL")
        assert factory.create_service(registry).get_translator().get_locale() == "nl_NL"

    def test_second_call_reuses_stored_translator(self, registry, factory):
        registry.set_service(CONFIG, {"translator": {"locale": "en_US"}})

        first = factory.create_service(registry)
        second = factory.create_service(registry)

        assert first is not second
        assert first.get_translator() is second.get_translator()

    def test_invalid_mapping_raises(self, registry, factory):
        registry.set_service(CONFIG, {"translator": {"translation_files": [{"type": "yaml"}]}})
        with pytest.raises(InvalidTranslatorConfigError):
            factory.create_service(registry)
        assert not registry.has(TRANSLATOR_INTERFACE)

    def test_factory_is_callable(self, registry, factory):
        registry.set_service(CONFIG, {"translator": {"locale": "en_US"}})
        assert isinstance(factory(registry).get_translator(), Translator)


class TestFactoryInRegistry:
    def test_shared_service(self, registry, factory):
        registry.set_service(CONFIG, {"translator": {"locale": "en_US"}})
        registry.set_factory("MvcTranslator", factory)
        assert registry.get("MvcTranslator") is registry.get("MvcTranslator")

    def test_config_errors_are_wrapped(self, registry, factory):
        registry.set_service(CONFIG, {"translator": {"translation_files": "nope"}})
        registry.set_factory("MvcTranslator", factory)
        with pytest.raises(ServiceFactoryError, match="MvcTranslator"):
            registry.get("MvcTranslator")

    def test_capability_detected_when_not_given(self, monkeypatch):
        monkeypatch.setattr(IntlCapability, "is_available", staticmethod(lambda module=None: False))
        assert TranslatorServiceFactory().intl == IntlCapability(False, "detected")


class TestTranslatorPluginManagerFactory:
    def test_without_config(self):
        manager = TranslatorPluginManagerFactory().create_service(ServiceRegistry())
        assert isinstance(manager, LoaderPluginManager)
        assert manager.has("gettext")

    def test_plugins_from_mapping_config(self):
        services = ServiceRegistry()
        services.set_service(CONFIG, {"translator_plugins": {"aliases": {"po": "gettext"}}})
        manager = TranslatorPluginManagerFactory()(services)
        assert manager.has("po")

    def test_plugins_from_typed_config(self):
        services = ServiceRegistry()
        services.set_service(CONFIG, Config({"translator_plugins": {"aliases": {"po": "gettext"}}}))
        assert TranslatorPluginManagerFactory().create_service(services).has("po")

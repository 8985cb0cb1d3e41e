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
"""Translator service factories — choose and build the MVC translator.

Resolution order, first match wins:

1. a ``TranslatorInterface`` service already in the registry is wrapped as-is;
2. ``translator: false`` in the configuration opts out with a dummy;
3. no usable ``translator`` mapping, or no locale capability, gives a dummy;
4. otherwise a :class:`Translator` is built from the mapping, given the
   registry's ``TranslatorPluginManager``, and stored back under
   ``TranslatorInterface`` so later lookups share it.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import structlog

from translatorkit.container.registry import ServiceLocator
from translatorkit.core.config import Config
from translatorkit.i18n.capability import IntlCapability
from translatorkit.i18n.dummy import DummyTranslator
from translatorkit.i18n.loaders.plugin_manager import LoaderPluginManager
from translatorkit.i18n.ports.outbound import TranslatorInterface
from translatorkit.i18n.translator import Translator
from translatorkit.mvc.translator import MvcTranslator

logger = structlog.get_logger("translatorkit.mvc.service")

TRANSLATOR_INTERFACE = "TranslatorInterface"
TRANSLATOR_PLUGIN_MANAGER = "TranslatorPluginManager"
CONFIG = "Config"


def resolve_translator(
    translator: TranslatorInterface | None = None,
    config: Any = None,
    plugin_manager_provider: Callable[[], LoaderPluginManager] | None = None,
    *,
    intl: IntlCapability,
    default_locale: str | None = None,
) -> MvcTranslator:
    """Pick the translator to wrap from explicit collaborators.

    Args:
        translator: A ready translator; wins over everything else.
        config: The ``translator`` configuration entry: ``None``, ``False``,
            or a mapping accepted by :meth:`Translator.from_config`.
        plugin_manager_provider: Called only when a translator is built from
            *config*; its result becomes that translator's loader registry.
        intl: Whether locale-aware translation is available.
        default_locale: Locale for a built translator whose mapping has none.
    """
    if translator is not None:
        logger.debug("translator_resolved", strategy="service", type=type(translator).__name__)
        return MvcTranslator(translator)

    if config is False:
        return _dummy("disabled")

    if config is not None and not isinstance(config, Mapping):
        logger.warning("translator_config_ignored", type=type(config).__name__)
        return _dummy("unsupported_config")

    if not config:
        return _dummy("not_configured")

    if not intl.available:
        return _dummy("intl_unavailable")

    i18n_translator = Translator.from_config(config, default_locale=default_locale)
    if plugin_manager_provider is not None:
        i18n_translator.set_plugin_manager(plugin_manager_provider())

    logger.info(
        "translator_resolved",
        strategy="configured",
        locale=i18n_translator.get_locale(),
        fallback_locale=i18n_translator.get_fallback_locale(),
    )
    return MvcTranslator(i18n_translator)


def _dummy(reason: str) -> MvcTranslator:
    logger.info("translator_resolved", strategy="dummy", reason=reason)
    return MvcTranslator(DummyTranslator())


class TranslatorServiceFactory:
    """Builds the MVC translator from a service registry.

    The capability flag is fixed when the factory is created. Instances are
    callable, so the factory can be registered directly with
    ``ServiceRegistry.set_factory``.
    """

    def __init__(
        self,
        intl: IntlCapability | None = None,
        default_locale: str | None = None,
    ) -> None:
        self._intl = intl if intl is not None else IntlCapability.detect()
        self._default_locale = default_locale

    @property
    def intl(self) -> IntlCapability:
        return self._intl

    def create_service(self, services: ServiceLocator) -> MvcTranslator:
        if services.has(TRANSLATOR_INTERFACE):
            return resolve_translator(services.get(TRANSLATOR_INTERFACE), intl=self._intl)

        mvc_translator = resolve_translator(
            config=_translator_config(services),
            plugin_manager_provider=lambda: services.get(TRANSLATOR_PLUGIN_MANAGER),
            intl=self._intl,
            default_locale=self._default_locale,
        )

        i18n_translator = mvc_translator.get_translator()
        if isinstance(i18n_translator, Translator):
            services.set_service(TRANSLATOR_INTERFACE, i18n_translator)
        return mvc_translator

    __call__ = create_service


class TranslatorPluginManagerFactory:
    """Builds the loader registry from the ``translator_plugins`` config section."""

    def create_service(self, services: ServiceLocator) -> LoaderPluginManager:
        plugins: Any = {}
        if services.has(CONFIG):
            config = services.get(CONFIG)
            if isinstance(config, Config):
                plugins = config.get_section("translator_plugins")
            elif isinstance(config, Mapping):
                plugins = config.get("translator_plugins") or {}
        return LoaderPluginManager(plugins if isinstance(plugins, Mapping) else {})

    __call__ = create_service


def _translator_config(services: ServiceLocator) -> Any:
    if not services.has(CONFIG):
        return None
    config = services.get(CONFIG)
    if isinstance(config, (Config, Mapping)):
        return config.get("translator")
    return None

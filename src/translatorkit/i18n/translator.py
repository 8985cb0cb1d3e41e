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
"""Translator — locale-aware translator backed by pluggable resource loaders."""

from __future__ import annotations

import locale as _locale_module
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from translatorkit.i18n.exceptions import InvalidLoaderError, PluralRuleError
from translatorkit.i18n.loaders.plugin_manager import LoaderPluginManager
from translatorkit.i18n.options import TranslatorOptions
from translatorkit.i18n.ports.outbound import FileLoader, RemoteLoader
from translatorkit.i18n.text_domain import Message, TextDomain

logger = structlog.get_logger("translatorkit.i18n.translator")

DEFAULT_LOCALE = "en_US"

# Files registered without a locale are loaded for every locale.
ANY_LOCALE = "*"


class Translator:
    """Translates message ids using catalogues loaded on demand.

    Resources are registered per text domain as explicit files, filename
    patterns (``{locale}`` is substituted), or remote loaders. The
    catalogue for a (text domain, locale) pair is loaded the first time it
    is needed: remote loaders first, then pattern files that exist, then
    explicit files for any locale, then explicit files for the locale
    itself. Later resources override earlier ones.

    Lookups try the requested locale, then the fallback locale, and return
    the message id unchanged when neither has an entry.
    """

    def __init__(
        self,
        locale: str | None = None,
        fallback_locale: str | None = None,
        plugin_manager: LoaderPluginManager | None = None,
        log_missing_translations: bool = False,
    ) -> None:
        self._locale = locale
        self._fallback_locale = fallback_locale
        self._plugin_manager = plugin_manager
        self._log_missing = log_missing_translations

        self._files: dict[str, dict[str, list[tuple[str, str]]]] = {}
        self._patterns: dict[str, list[tuple[str, str, str]]] = {}
        self._remote: dict[str, list[str]] = {}
        self._messages: dict[str, dict[str, TextDomain]] = {}

    @classmethod
    def from_config(
        cls,
        options: Mapping[str, Any],
        default_locale: str | None = None,
    ) -> Translator:
        """Build a translator from a ``translator`` configuration mapping.

        Raises ``InvalidTranslatorConfigError`` when the mapping is malformed.
        """
        opts = TranslatorOptions.parse(options)
        translator = cls(
            locale=opts.locale or default_locale,
            fallback_locale=opts.fallback_locale,
            log_missing_translations=opts.log_missing_translations,
        )
        for file in opts.translation_files:
            translator.add_translation_file(file.type, file.filename, file.text_domain, file.locale)
        for pattern in opts.translation_file_patterns:
            translator.add_translation_file_pattern(
                pattern.type, pattern.base_dir, pattern.pattern, pattern.text_domain
            )
        for remote in opts.remote_translation:
            translator.add_remote_translations(remote.type, remote.text_domain)
        return translator

    # ------------------------------------------------------------------
    # Locale & collaborators
    # ------------------------------------------------------------------

    def get_locale(self) -> str:
        if self._locale is None:
            self._locale = _system_locale()
        return self._locale

    def set_locale(self, locale: str) -> None:
        self._locale = locale

    def get_fallback_locale(self) -> str | None:
        return self._fallback_locale

    def set_fallback_locale(self, locale: str | None) -> None:
        self._fallback_locale = locale

    def get_plugin_manager(self) -> LoaderPluginManager:
        """Return the loader registry, creating the default one on first use."""
        if self._plugin_manager is None:
            self._plugin_manager = LoaderPluginManager()
        return self._plugin_manager

    def set_plugin_manager(self, plugin_manager: LoaderPluginManager) -> None:
        self._plugin_manager = plugin_manager

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    def add_translation_file(
        self,
        type: str,  # noqa: A002
        filename: str,
        text_domain: str = "default",
        locale: str | None = None,
    ) -> Translator:
        locale_key = locale or ANY_LOCALE
        self._files.setdefault(text_domain, {}).setdefault(locale_key, []).append((type, filename))
        self._messages.pop(text_domain, None)
        return self

    def add_translation_file_pattern(
        self,
        type: str,  # noqa: A002
        base_dir: str,
        pattern: str,
        text_domain: str = "default",
    ) -> Translator:
        self._patterns.setdefault(text_domain, []).append((type, base_dir, pattern))
        self._messages.pop(text_domain, None)
        return self

    def add_remote_translations(self, type: str, text_domain: str = "default") -> Translator:  # noqa: A002
        self._remote.setdefault(text_domain, []).append(type)
        self._messages.pop(text_domain, None)
        return self

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def translate(
        self,
        message: str,
        text_domain: str = "default",
        locale: str | None = None,
    ) -> str:
        found = self._find(message, text_domain, locale)
        if found is None:
            return message
        translation, _ = found
        if isinstance(translation, list):
            return translation[0] if translation else message
        return translation

    def translate_plural(
        self,
        singular: str,
        plural: str,
        number: int,
        text_domain: str = "default",
        locale: str | None = None,
    ) -> str:
        found = self._find(singular, text_domain, locale)
        if found is None:
            return singular if number == 1 else plural

        translation, domain = found
        forms = translation if isinstance(translation, list) else [translation]
        index = domain.plural_rule.evaluate(number)
        if index >= len(forms):
            raise PluralRuleError(
                f"Plural form {index} for '{singular}' is missing "
                f"(text domain '{text_domain}' has {len(forms)} forms)"
            )
        return forms[index]

    def get_all_messages(self, text_domain: str = "default", locale: str | None = None) -> TextDomain:
        """Return the loaded catalogue for *text_domain* in *locale*."""
        return self._domain(text_domain, locale or self.get_locale())

    def _find(
        self,
        message: str,
        text_domain: str,
        locale: str | None,
    ) -> tuple[Message, TextDomain] | None:
        locale = locale or self.get_locale()
        candidates = [locale]
        if self._fallback_locale and self._fallback_locale != locale:
            candidates.append(self._fallback_locale)

        for candidate in candidates:
            domain = self._domain(text_domain, candidate)
            translation = domain.get(message)
            if translation:
                return translation, domain

        if self._log_missing:
            logger.debug(
                "missing_translation",
                message=message,
                text_domain=text_domain,
                locale=locale,
                fallback_locale=self._fallback_locale,
            )
        return None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _domain(self, text_domain: str, locale: str) -> TextDomain:
        by_locale = self._messages.setdefault(text_domain, {})
        if locale not in by_locale:
            by_locale[locale] = self._load_messages(text_domain, locale)
        return by_locale[locale]

    def _load_messages(self, text_domain: str, locale: str) -> TextDomain:
        domain = TextDomain()

        for loader_type in self._remote.get(text_domain, []):
            loader = self._loader(loader_type, RemoteLoader)
            domain.merge(loader.load(locale, text_domain))

        for loader_type, base_dir, pattern in self._patterns.get(text_domain, []):
            filename = Path(base_dir) / pattern.replace("{locale}", locale)
            if filename.is_file():
                loader = self._loader(loader_type, FileLoader)
                domain.merge(loader.load(locale, str(filename)))

        files = self._files.get(text_domain, {})
        for locale_key in (ANY_LOCALE, locale):
            for loader_type, filename in files.get(locale_key, []):
                loader = self._loader(loader_type, FileLoader)
                domain.merge(loader.load(locale, filename))

        logger.debug(
            "translation_messages_loaded",
            text_domain=text_domain,
            locale=locale,
            count=len(domain),
        )
        return domain

    def _loader(self, loader_type: str, kind: type[Any]) -> Any:
        loader = self.get_plugin_manager().get(loader_type)
        if not isinstance(loader, kind):
            raise InvalidLoaderError(
                f"Loader '{loader_type}' is a {type(loader).__name__}, expected a {kind.__name__}",
                loader=loader_type,
            )
        return loader


def _system_locale() -> str:
    """The process locale (e.g. ``de_DE``), or ``en_US`` when none is set."""
    try:
        language, _ = _locale_module.getlocale()
    except ValueError:
        language = None
    return language or DEFAULT_LOCALE

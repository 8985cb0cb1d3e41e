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
"""MvcTranslator — the adapter handed to views, validators, and routes."""

from __future__ import annotations

from typing import Any

from translatorkit.i18n.ports.outbound import TranslatorInterface


class MvcTranslator:
    """Wraps exactly one translator behind a single, read-only interface.

    ``translate`` and ``translate_plural`` delegate to the wrapped
    translator; any other attribute is looked up on it as well, so
    translator-specific helpers (``get_locale``, ``get_all_messages``, ...)
    stay reachable through the adapter.
    """

    __slots__ = ("_translator",)

    def __init__(self, translator: TranslatorInterface) -> None:
        object.__setattr__(self, "_translator", translator)

    def get_translator(self) -> TranslatorInterface:
        return self._translator

    def get_plugin_manager(self) -> Any:
        """The wrapped translator's loader registry, or ``None`` if it has none."""
        getter = getattr(self._translator, "get_plugin_manager", None)
        if getter is None:
            return None
        return getter()

    def translate(
        self,
        message: str,
        text_domain: str = "default",
        locale: str | None = None,
    ) -> str:
        return self._translator.translate(message, text_domain, locale)

    def translate_plural(
        self,
        singular: str,
        plural: str,
        number: int,
        text_domain: str = "default",
        locale: str | None = None,
    ) -> str:
        return self._translator.translate_plural(singular, plural, number, text_domain, locale)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return getattr(self._translator, name)
        except AttributeError:
            raise AttributeError(
                f"Neither {type(self).__name__} nor the wrapped "
                f"{type(self._translator).__name__} has attribute '{name}'"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"MvcTranslator({self._translator!r})"

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
"""Outbound i18n ports — translator and resource loader ports."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from translatorkit.i18n.text_domain import TextDomain


@runtime_checkable
class TranslatorInterface(Protocol):
    """Anything that can translate a message id for a locale.

    Every translator wrapped by the MVC adapter (user-supplied, configured,
    or the dummy fallback) implements this protocol.
    """

    def translate(
        self,
        message: str,
        text_domain: str = "default",
        locale: str | None = None,
    ) -> str:
        """Translate *message*, returning it unchanged when no entry exists."""
        ...

    def translate_plural(
        self,
        singular: str,
        plural: str,
        number: int,
        text_domain: str = "default",
        locale: str | None = None,
    ) -> str:
        """Translate a plural message, selecting the form for *number*."""
        ...


class FileLoader(abc.ABC):
    """Loads a text domain from a file on disk."""

    @abc.abstractmethod
    def load(self, locale: str, filename: str) -> TextDomain:
        """Parse *filename* into a text domain for *locale*."""


class RemoteLoader(abc.ABC):
    """Loads a text domain from a non-file source (database, service, ...)."""

    @abc.abstractmethod
    def load(self, locale: str, text_domain: str) -> TextDomain:
        """Fetch the messages of *text_domain* for *locale*."""

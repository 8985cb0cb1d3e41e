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
"""JSON and YAML loaders for plain message mappings."""

from __future__ import annotations

import abc
import json
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from translatorkit.i18n.exceptions import PluralRuleError, TranslationLoadError
from translatorkit.i18n.plural import PluralRule
from translatorkit.i18n.ports.outbound import FileLoader
from translatorkit.i18n.text_domain import Message, TextDomain


class _MappingLoader(FileLoader):
    """Shared handling for loaders whose files decode to a mapping.

    The file holds ``message id -> translation``; a list value holds plural
    forms. Nested mappings are flattened with dots, so::

        greeting:
          hello: "Hallo"

    yields the id ``greeting.hello``. The empty key carries metadata::

        "":
          plural_forms: "nplurals=2; plural=(n != 1);"
    """

    def load(self, locale: str, filename: str) -> TextDomain:
        path = Path(filename)
        if not path.is_file():
            raise TranslationLoadError(f"Could not find or open file '{filename}' for reading", filename)

        data = self._read(path)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise TranslationLoadError(
                f"Expected a mapping at the top of '{filename}', got {type(data).__name__}",
                filename,
            )

        meta = data.pop("", None)
        domain = TextDomain(_flatten(data))
        if isinstance(meta, dict) and meta.get("plural_forms"):
            try:
                domain.plural_rule = PluralRule.from_string(str(meta["plural_forms"]))
            except PluralRuleError as exc:
                raise TranslationLoadError(str(exc), filename) from exc
        return domain

    @abc.abstractmethod
    def _read(self, path: Path) -> Any:
        """Decode *path*, raising ``TranslationLoadError`` on malformed content."""


class JsonLoader(_MappingLoader):
    def _read(self, path: Path) -> Any:
        try:
            with path.open(encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, ValueError) as exc:
            raise TranslationLoadError(f"Could not parse JSON file '{path}': {exc}", str(path)) from exc


class YamlLoader(_MappingLoader):
    def _read(self, path: Path) -> Any:
        try:
            with path.open(encoding="utf-8") as fh:
                return yaml.safe_load(fh)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise TranslationLoadError(f"Could not parse YAML file '{path}': {exc}", str(path)) from exc


def _flatten(data: dict[str, Any], prefix: str = "") -> dict[str, Message]:
    """Flatten nested mappings into dot-separated ids; lists stay plural forms."""
    items: dict[str, Message] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            items.update(_flatten(value, full_key))
        elif isinstance(value, list):
            items[full_key] = [str(form) for form in value]
        else:
            items[full_key] = str(value)
    return items

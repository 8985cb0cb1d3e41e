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
"""IniLoader — reads INI translation files."""

from __future__ import annotations

import configparser
from pathlib import Path

from translatorkit.i18n.exceptions import PluralRuleError, TranslationLoadError
from translatorkit.i18n.plural import PluralRule
from translatorkit.i18n.ports.outbound import FileLoader
from translatorkit.i18n.text_domain import TextDomain


class IniLoader(FileLoader):
    """Loads messages from an INI file.

    Layout::

        [meta]
        plural_forms = nplurals=2; plural=(n != 1);

        [messages]
        Hello = Hallo

        [plurals]
        apple =
            Apfel
            Äpfel

    Keys are case-sensitive; interpolation is disabled.
    """

    def load(self, locale: str, filename: str) -> TextDomain:
        path = Path(filename)
        if not path.is_file():
            raise TranslationLoadError(f"Could not find or open file '{filename}' for reading", filename)

        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        try:
            with path.open(encoding="utf-8") as fh:
                parser.read_file(fh)
        except (OSError, UnicodeDecodeError, configparser.Error) as exc:
            raise TranslationLoadError(f"Could not parse INI file '{filename}': {exc}", filename) from exc

        domain = TextDomain()
        if parser.has_option("meta", "plural_forms"):
            try:
                domain.plural_rule = PluralRule.from_string(parser.get("meta", "plural_forms"))
            except PluralRuleError as exc:
                raise TranslationLoadError(str(exc), filename) from exc

        if parser.has_section("messages"):
            for key, value in parser.items("messages"):
                domain[key] = value

        if parser.has_section("plurals"):
            for key, value in parser.items("plurals"):
                domain[key] = [line.strip() for line in value.splitlines() if line.strip()]

        return domain

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
"""GettextLoader — reads compiled GNU gettext ``.mo`` catalogues."""

from __future__ import annotations

import struct
from pathlib import Path

from translatorkit.i18n.exceptions import PluralRuleError, TranslationLoadError
from translatorkit.i18n.plural import PluralRule
from translatorkit.i18n.ports.outbound import FileLoader
from translatorkit.i18n.text_domain import TextDomain

_MAGIC = 0x950412DE


class GettextLoader(FileLoader):
    """Parses the binary ``.mo`` format in either byte order.

    Plural entries (``msgid`` with a ``msgid_plural``) become a list of
    forms keyed by the singular id. The ``Plural-Forms`` header sets the
    domain's plural rule and ``Content-Type`` selects the charset.
    """

    def load(self, locale: str, filename: str) -> TextDomain:
        path = Path(filename)
        if not path.is_file():
            raise TranslationLoadError(f"Could not find or open file '{filename}' for reading", filename)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise TranslationLoadError(f"Could not read '{filename}': {exc}", filename) from exc

        try:
            return self._parse(data)
        except (struct.error, UnicodeDecodeError, LookupError) as exc:
            raise TranslationLoadError(f"'{filename}' is not a valid gettext file: {exc}", filename) from exc

    def _parse(self, data: bytes) -> TextDomain:
        if len(data) < 20:
            raise struct.error("file too short for a .mo header")

        if struct.unpack("<I", data[:4])[0] == _MAGIC:
            order = "<"
        elif struct.unpack(">I", data[:4])[0] == _MAGIC:
            order = ">"
        else:
            raise struct.error("bad magic number")

        _, count, orig_table, trans_table = struct.unpack(f"{order}4I", data[4:20])

        raw: list[tuple[bytes, bytes]] = []
        for i in range(count):
            o_len, o_off = struct.unpack(f"{order}2I", data[orig_table + i * 8 : orig_table + i * 8 + 8])
            t_len, t_off = struct.unpack(f"{order}2I", data[trans_table + i * 8 : trans_table + i * 8 + 8])
            if o_off + o_len > len(data) or t_off + t_len > len(data):
                raise struct.error(f"entry {i} points outside the file")
            raw.append((data[o_off : o_off + o_len], data[t_off : t_off + t_len]))

        headers = _parse_headers(next((t for o, t in raw if o == b""), b""))
        charset = _charset(headers.get("content-type", ""))

        domain = TextDomain()
        plural_forms = headers.get("plural-forms")
        if plural_forms:
            try:
                domain.plural_rule = PluralRule.from_string(plural_forms)
            except PluralRuleError as exc:
                raise TranslationLoadError(str(exc)) from exc

        for original, translation in raw:
            if original == b"":
                continue
            if b"\x00" in original:
                singular = original.split(b"\x00", 1)[0].decode(charset)
                domain[singular] = [form.decode(charset) for form in translation.split(b"\x00")]
            else:
                domain[original.decode(charset)] = translation.decode(charset)
        return domain


def _parse_headers(header: bytes) -> dict[str, str]:
    headers: dict[str, str] = {}
    for line in header.decode("utf-8", errors="replace").splitlines():
        key, sep, value = line.partition(":")
        if sep:
            headers[key.strip().lower()] = value.strip()
    return headers


def _charset(content_type: str) -> str:
    for part in content_type.split(";"):
        key, sep, value = part.strip().partition("=")
        if sep and key.strip().lower() == "charset":
            return value.strip() or "utf-8"
    return "utf-8"

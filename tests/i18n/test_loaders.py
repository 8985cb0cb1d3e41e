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
"""Tests for the gettext, INI, JSON and YAML loaders."""

import json
import struct

import pytest

from translatorkit.i18n.exceptions import TranslationLoadError
from translatorkit.i18n.loaders.ini import IniLoader
from translatorkit.i18n.loaders.mapping import JsonLoader, YamlLoader, _MappingLoader
from translatorkit.i18n.loaders.mo import GettextLoader
from translatorkit.i18n.ports.outbound import FileLoader

MO_HEADER = b"Content-Type: text/plain; charset=UTF-8\nPlural-Forms: nplurals=3; plural=(n==1 ? 0 : n<5 ? 1 : 2);\n"


def build_mo(entries: dict[bytes, bytes], byteorder: str = "<") -> bytes:
    """Assemble a .mo file the way msgfmt lays it out."""
    keys = sorted(entries)
    ids = b""
    strs = b""
    offsets = []
    for key in keys:
        offsets.append((len(ids), len(key), len(strs), len(entries[key])))
        ids += key + b"\x00"
        strs += entries[key] + b"\x00"

    key_start = 7 * 4 + 16 * len(keys)
    value_start = key_start + len(ids)
    key_offsets: list[int] = []
    value_offsets: list[int] = []
    for id_off, id_len, str_off, str_len in offsets:
        key_offsets += [id_len, id_off + key_start]
        value_offsets += [str_len, str_off + value_start]

    header = struct.pack(
        f"{byteorder}7I", 0x950412DE, 0, len(keys), 7 * 4, 7 * 4 + len(keys) * 8, 0, 0
    )
    return (
        header
        + struct.pack(f"{byteorder}{len(key_offsets)}I", *key_offsets)
        + struct.pack(f"{byteorder}{len(value_offsets)}I", *value_offsets)
        + ids
        + strs
    )


MO_ENTRIES = {
    b"": MO_HEADER,
    b"Hello": b"Hallo",
    b"file\x00files": "Datei\x00Dateien\x00Dateien (viele)".encode(),
    b"Cheese": "Käse".encode(),
}


class TestGettextLoader:
    def test_is_file_loader(self):
        assert isinstance(GettextLoader(), FileLoader)

    @pytest.mark.parametrize("byteorder", ["<", ">"])
    def test_loads_messages_in_both_byte_orders(self, tmp_path, byteorder):
        path = tmp_path / "de_DE.mo"
        path.write_bytes(build_mo(MO_ENTRIES, byteorder))

        domain = GettextLoader().load("de_DE", str(path))
        assert domain["Hello"] == "Hallo"
        assert domain["Cheese"] == "Käse"
        assert "" not in domain

    def test_plural_entries_and_rule(self, tmp_path):
        path = tmp_path / "de_DE.mo"
        path.write_bytes(build_mo(MO_ENTRIES))

        domain = GettextLoader().load("de_DE", str(path))
        assert domain["file"] == ["Datei", "Dateien", "Dateien (viele)"]
        assert domain.has_plural_rule
        assert domain.plural_rule.num_plurals == 3

    def test_charset_from_header(self, tmp_path):
        path = tmp_path / "legacy.mo"
        entries = {
            b"": b"Content-Type: text/plain; charset=ISO-8859-1\n",
            b"Cheese": "Käse".encode("latin-1"),
        }
        path.write_bytes(build_mo(entries))
        assert GettextLoader().load("de_DE", str(path))["Cheese"] == "Käse"

    def test_missing_file(self, tmp_path):
        with pytest.raises(TranslationLoadError, match="Could not find"):
            GettextLoader().load("de_DE", str(tmp_path / "missing.mo"))

    def test_bad_magic(self, tmp_path):
        path = tmp_path / "bogus.mo"
        path.write_bytes(b"\x00" * 32)
        with pytest.raises(TranslationLoadError, match="not a valid gettext file"):
            GettextLoader().load("de_DE", str(path))

    def test_truncated_file(self, tmp_path):
        path = tmp_path / "short.mo"
        path.write_bytes(build_mo(MO_ENTRIES)[:40])
        with pytest.raises(TranslationLoadError):
            GettextLoader().load("de_DE", str(path))


class TestIniLoader:
    def test_messages_plurals_and_meta(self, tmp_path):
        path = tmp_path / "de_DE.ini"
        path.write_text(
            "[meta]\n"
            "plural_forms = nplurals=2; plural=(n != 1);\n"
            "\n"
            "[messages]\n"
            "Hello = Hallo\n"
            "Progress = 100% done\n"
            "\n"
            "[plurals]\n"
            "apple =\n"
            "    Apfel\n"
            "    Äpfel\n",
            encoding="utf-8",
        )

        domain = IniLoader().load("de_DE", str(path))
        assert domain["Hello"] == "Hallo"
        assert domain["Progress"] == "100% done"
        assert domain["apple"] == ["Apfel", "Äpfel"]
        assert domain.has_plural_rule

    def test_keys_keep_their_case(self, tmp_path):
        path = tmp_path / "de_DE.ini"
        path.write_text("[messages]\nSave File = Datei speichern\n", encoding="utf-8")
        assert "Save File" in IniLoader().load("de_DE", str(path))

    def test_malformed_ini(self, tmp_path):
        path = tmp_path / "broken.ini"
        path.write_text("no section header here\n", encoding="utf-8")
        with pytest.raises(TranslationLoadError, match="Could not parse INI"):
            IniLoader().load("de_DE", str(path))

    def test_bad_plural_rule_is_a_load_error(self, tmp_path):
        path = tmp_path / "bad.ini"
        path.write_text("[meta]\nplural_forms = nonsense\n", encoding="utf-8")
        with pytest.raises(TranslationLoadError):
            IniLoader().load("de_DE", str(path))


class TestJsonLoader:
    def test_flat_nested_and_plural_entries(self, tmp_path):
        path = tmp_path / "fr_FR.json"
        path.write_text(
            json.dumps(
                {
                    "": {"plural_forms": "nplurals=2; plural=(n > 1);"},
                    "Hello": "Bonjour",
                    "greeting": {"morning": "Bonjour matin"},
                    "apple": ["pomme", "pommes"],
                }
            ),
            encoding="utf-8",
        )

        domain = JsonLoader().load("fr_FR", str(path))
        assert domain["Hello"] == "Bonjour"
        assert domain["greeting.morning"] == "Bonjour matin"
        assert domain["apple"] == ["pomme", "pommes"]
        assert domain.plural_rule.evaluate(0) == 0

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(TranslationLoadError, match="Could not parse JSON"):
            JsonLoader().load("fr_FR", str(path))

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(TranslationLoadError, match="Expected a mapping"):
            JsonLoader().load("fr_FR", str(path))


class TestYamlLoader:
    def test_loads_yaml_messages(self, tmp_path):
        path = tmp_path / "es_ES.yaml"
        path.write_text(
            '"":\n'
            '  plural_forms: "nplurals=2; plural=(n != 1);"\n'
            "Hello: Hola\n"
            "errors:\n"
            "  required: Campo obligatorio\n"
            "apple:\n"
            "  - manzana\n"
            "  - manzanas\n",
            encoding="utf-8",
        )

        domain = YamlLoader().load("es_ES", str(path))
        assert domain["Hello"] == "Hola"
        assert domain["errors.required"] == "Campo obligatorio"
        assert domain["apple"] == ["manzana", "manzanas"]
        assert domain.has_plural_rule

    def test_empty_file_gives_empty_domain(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        domain = YamlLoader().load("es_ES", str(path))
        assert dict(domain) == {}
        assert not domain.has_plural_rule

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("key: [unclosed\n", encoding="utf-8")
        with pytest.raises(TranslationLoadError, match="Could not parse YAML"):
            YamlLoader().load("es_ES", str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(TranslationLoadError):
            YamlLoader().load("es_ES", str(tmp_path / "nope.yaml"))


class TestMappingLoaderBase:
    def test_reader_must_be_implemented(self):
        class NoReader(_MappingLoader):
            pass

        with pytest.raises(TypeError):
            NoReader()

    def test_custom_reader(self, tmp_path):
        class LinesLoader(_MappingLoader):
            def _read(self, path):
                return dict(line.split("=", 1) for line in path.read_text(encoding="utf-8").splitlines())

        path = tmp_path / "de.txt"
        path.write_text("Hello=Hallo\nBye=Tschuess\n", encoding="utf-8")
        domain = LinesLoader().load("de_DE", str(path))
        assert isinstance(domain, dict)
        assert domain["Bye"] == "Tschuess"

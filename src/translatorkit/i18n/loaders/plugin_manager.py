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
"""LoaderPluginManager — named registry of translation resource loaders."""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from typing import Any

import structlog

from translatorkit.i18n.exceptions import InvalidLoaderError
from translatorkit.i18n.ports.outbound import FileLoader, RemoteLoader

logger = structlog.get_logger("translatorkit.i18n.loaders")

LoaderSpec = type | str

_DEFAULT_INVOKABLES: dict[str, LoaderSpec] = {
    "gettext": "translatorkit.i18n.loaders.mo:GettextLoader",
    "ini": "translatorkit.i18n.loaders.ini:IniLoader",
    "json": "translatorkit.i18n.loaders.mapping:JsonLoader",
    "yaml": "translatorkit.i18n.loaders.mapping:YamlLoader",
}

_DEFAULT_ALIASES: dict[str, str] = {
    "mo": "gettext",
    "yml": "yaml",
}


class LoaderPluginManager:
    """Resolves loader names (``gettext``, ``yaml``, ...) to loader instances.

    Names are case-insensitive. Invokables are loader classes, or
    ``"package.module:ClassName"`` strings imported on first use; each name
    is instantiated once and reused. Every instance must be a
    :class:`FileLoader` or a :class:`RemoteLoader`.

    *config* may carry ``invokables``, ``aliases`` and ``services`` mappings
    that extend or replace the built-in loaders.
    """

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        self._invokables: dict[str, LoaderSpec] = dict(_DEFAULT_INVOKABLES)
        self._aliases: dict[str, str] = dict(_DEFAULT_ALIASES)
        self._instances: dict[str, FileLoader | RemoteLoader] = {}

        config = config or {}
        for name, spec in dict(config.get("invokables") or {}).items():
            self.set_invokable(name, spec)
        for alias, target in dict(config.get("aliases") or {}).items():
            self.set_alias(alias, target)
        for name, loader in dict(config.get("services") or {}).items():
            self.set_service(name, loader)

    def has(self, name: str) -> bool:
        key = self._canonical(name)
        return key in self._instances or key in self._invokables

    def get(self, name: str) -> FileLoader | RemoteLoader:
        """Return the loader registered under *name*, creating it on first use."""
        key = self._canonical(name)
        if key in self._instances:
            return self._instances[key]

        spec = self._invokables.get(key)
        if spec is None:
            raise InvalidLoaderError(
                f"No translation loader named '{name}' is registered "
                f"(available: {', '.join(self.registered_names())})",
                loader=name,
            )

        loader_cls = _import_spec(spec, name)
        try:
            instance = loader_cls()
        except TypeError as exc:
            raise InvalidLoaderError(f"Loader '{name}' could not be instantiated: {exc}", loader=name) from exc

        self.validate(instance, name)
        self._instances[key] = instance
        logger.debug("translation_loader_created", loader=key, type=type(instance).__name__)
        return instance

    def set_service(self, name: str, loader: Any) -> None:
        """Register a ready loader instance."""
        self.validate(loader, name)
        key = _normalize(name)
        self._aliases.pop(key, None)
        self._instances[key] = loader

    def set_invokable(self, name: str, spec: LoaderSpec) -> None:
        """Register a loader class (or import path) under *name*."""
        key = _normalize(name)
        self._aliases.pop(key, None)
        self._instances.pop(key, None)
        self._invokables[key] = spec

    def set_alias(self, alias: str, target: str) -> None:
        self._aliases[_normalize(alias)] = _normalize(target)

    def registered_names(self) -> list[str]:
        return sorted({*self._invokables, *self._instances, *self._aliases})

    @staticmethod
    def validate(loader: Any, name: str = "") -> None:
        if not isinstance(loader, (FileLoader, RemoteLoader)):
            raise InvalidLoaderError(
                f"Loader '{name}' is of type {type(loader).__name__}; "
                "expected a FileLoader or RemoteLoader",
                loader=name,
            )

    def _canonical(self, name: str) -> str:
        key = _normalize(name)
        seen: set[str] = set()
        while key in self._aliases and key not in seen:
            seen.add(key)
            key = self._aliases[key]
        return key


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "").replace("_", "")


def _import_spec(spec: LoaderSpec, name: str) -> type:
    if isinstance(spec, type):
        return spec
    module_name, sep, attr = str(spec).partition(":")
    if not sep:
        module_name, _, attr = str(spec).rpartition(".")
    try:
        module = importlib.import_module(module_name)
        return getattr(module, attr)
    except (ImportError, AttributeError, ValueError) as exc:
        raise InvalidLoaderError(f"Cannot import loader '{spec}' for '{name}': {exc}", loader=name) from exc

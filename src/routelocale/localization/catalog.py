"""Translation catalogue helpers backed by per-locale JSON/YAML resources."""

from __future__ import annotations

import json
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from functools import cache
from pathlib import Path
from typing import Any, Iterator, Mapping

import yaml

from routelocale.config.schema import ConfigurationError

_BASE_LOCALE = "en"
TRANSLATIONS_DIRECTORY = Path(__file__).resolve().parents[1] / "translations"
_SUFFIXES = (".json", ".yaml", ".yml")

_current_locale: ContextVar[str | None] = ContextVar("routelocale_locale", default=None)


def _read_payload(path: Path) -> dict[str, Any]:
    """Load the raw translation payload stored in ``path``."""

    with path.open("r", encoding="utf-8") as handle:
        if path.suffix == ".json":
            payload = json.load(handle)
        else:
            payload = yaml.safe_load(handle)

    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Translation file must define a mapping: {path}")

    # Rails-style catalogues wrap the messages in a key named after the locale.
    if len(payload) == 1 and path.stem in payload and isinstance(payload[path.stem], dict):
        return payload[path.stem]
    return payload


@dataclass
class Catalogue:
    """Locale catalogue backed by a directory of translation files."""

    directory: Path
    default_locale: str = _BASE_LOCALE
    _payloads: dict[str, dict[str, Any]] = field(default_factory=dict, repr=False)

    def available_locales(self) -> tuple[str, ...]:
        """Return the locales with a translation file in the directory."""

        if not self.directory.is_dir():
            return (self.default_locale,)

        locales = sorted(
            {entry.stem for entry in self.directory.iterdir() if entry.suffix in _SUFFIXES}
        )
        return tuple(locales) or (self.default_locale,)

    def messages(self, locale: str) -> Mapping[str, Any]:
        """Return the full message mapping for ``locale`` (empty when unknown)."""

        payload = self._payloads.get(locale)
        if payload is None:
            payload = {}
            for suffix in _SUFFIXES:
                candidate = self.directory / f"{locale}{suffix}"
                if candidate.is_file():
                    payload = _read_payload(candidate)
                    break
            self._payloads[locale] = payload
        return payload

    def resolve(self, locale: str, key: str) -> Any | None:
        """Look up a dotted ``key`` such as ``"url"`` or ``"url.products"``."""

        cursor: Any = self.messages(str(locale))
        for part in key.split("."):
            if not isinstance(cursor, Mapping) or part not in cursor:
                return None
            cursor = cursor[part]
        return cursor


@cache
def get_catalogue() -> Catalogue:
    """Return the catalogue shipped with the package."""

    return Catalogue(directory=TRANSLATIONS_DIRECTORY)


def current_locale(default: str | None = None) -> str | None:
    """Return the locale active in the current context."""

    locale = _current_locale.get()
    return locale if locale is not None else default


def set_locale(locale: str | None) -> Token[str | None]:
    """Activate ``locale``; pass the returned token to :func:`reset_locale`."""

    return _current_locale.set(locale)


def reset_locale(token: Token[str | None]) -> None:
    _current_locale.reset(token)


@contextmanager
def with_locale(locale: str | None) -> Iterator[str | None]:
    """Temporarily activate ``locale`` for the enclosed block."""

    token = _current_locale.set(locale)
    try:
        yield locale
    finally:
        _current_locale.reset(token)


__all__ = [
    "Catalogue",
    "current_locale",
    "get_catalogue",
    "reset_locale",
    "set_locale",
    "with_locale",
]

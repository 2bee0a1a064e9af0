"""Locale prefix handling and path translation around a routing pipeline.

On recognition the leading locale segment is removed and localized segments
are rewritten to their canonical form before routing runs::

    incoming path:  /pt-PT/produtos/novidades
    routed path:    /products/latest
    params:         {"locale": "pt-PT"}

On generation the canonical path produced by the router is translated for the
requested locale and the locale segment is prepended when required::

    url_for("latest", locale="es")  ->  /es/productos/recientes
"""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable, MutableMapping, Sequence
from urllib.parse import urlsplit, urlunsplit

from routelocale.config.schema import ConfigurationError, LocalizationSettings
from routelocale.localization.catalog import Catalogue, current_locale, get_catalogue

from .cache import TreeCache
from .matcher import match_with_tree
from .tree import URL_KEY

LOCALE_PARAM = "locale"


def build_locales_pattern(locales: Sequence[str]) -> re.Pattern[str]:
    """Compile a pattern matching a leading ``/<locale>`` segment."""

    if not locales:
        return re.compile(r"(?!)")
    # Longer identifiers first so ``pt-PT`` wins over ``pt``.
    alternatives = "|".join(re.escape(locale) for locale in sorted(locales, key=len, reverse=True))
    return re.compile(rf"^/({alternatives})(?=/|$)")


def extract_segment(pattern: re.Pattern[str], path: str) -> tuple[str, str | None]:
    """Remove the first match of ``pattern`` from ``path``.

    Returns the remaining path (``/`` when nothing is left) and the captured
    segment, or the untouched path and ``None`` when there is no match.
    """

    match = pattern.match(path)
    if match is None:
        return path, None
    return path[match.end():] or "/", match.group(1)


def prepend_segment(url: str, segment: str) -> str:
    """Insert ``/segment`` in front of the path portion of ``url``."""

    parts = urlsplit(url)
    path = parts.path
    if path in ("", "/"):
        path = f"/{segment}"
    elif path.startswith("/"):
        path = f"/{segment}{path}"
    else:
        path = f"/{segment}/{path}"
    return urlunsplit(parts._replace(path=path))


class RoutesLocalization:
    """Translate localized paths to canonical ones and back.

    ``locales`` and ``default_locale`` fall back to the catalogue when the
    settings leave them empty. The resolved default locale must be one of the
    resolved locales, otherwise :class:`ConfigurationError` is raised.
    """

    def __init__(
        self,
        settings: LocalizationSettings | None = None,
        catalogue: Catalogue | None = None,
    ) -> None:
        self.settings = settings or LocalizationSettings()
        if catalogue is None:
            if self.settings.translations_dir is not None:
                catalogue = Catalogue(directory=self.settings.translations_dir)
            else:
                catalogue = get_catalogue()
        self.catalogue = catalogue
        self.trees = TreeCache(catalogue)
        self.include_default_locale = self.settings.include_default_locale
        self.default_locale = self.settings.default_locale or catalogue.default_locale
        self.locales = self.settings.locales or catalogue.available_locales()
        if self.default_locale not in self.locales:
            raise ConfigurationError(
                f"Default locale '{self.default_locale}' is not one of the configured "
                f"locales: {', '.join(self.locales) or '(none)'}"
            )

    @property
    def locales(self) -> tuple[str, ...]:
        return self._locales

    @locales.setter
    def locales(self, locales: Iterable[str]) -> None:
        self._locales = tuple(str(locale) for locale in locales)
        self._locales_pattern = build_locales_pattern(self._locales)

    @property
    def locales_pattern(self) -> re.Pattern[str]:
        return self._locales_pattern

    def is_valid_locale(self, locale: Any) -> bool:
        return bool(locale) and str(locale) in self._locales

    def is_default_locale(self, locale: Any) -> bool:
        return locale is not None and str(locale) == str(self.default_locale)

    def prepend_locale(self, locale: str | None) -> bool:
        """Whether generated paths for ``locale`` carry the locale segment."""

        return locale is not None and (
            self.include_default_locale or not self.is_default_locale(locale)
        )

    def resolve_locale(self, locale: Any = None) -> str | None:
        """Pick the generation locale: explicit, else active, else none."""

        if locale is None:
            locale = current_locale(self.default_locale)
        if not self.is_valid_locale(locale):
            return None
        return str(locale)

    def has_translations(self, locale: str) -> bool:
        return bool(self.catalogue.resolve(locale, URL_KEY))

    def extract_locale(self, path: str) -> tuple[str, str | None]:
        return extract_segment(self._locales_pattern, path)

    def translate_path(self, path: str, locale: str | None) -> str:
        """Rewrite a canonical path into its ``locale`` form."""

        if not locale or not self.has_translations(locale):
            return path
        return match_with_tree(path, self.trees.translations_tree(locale))

    def untranslate_path(self, path: str, locale: str | None) -> str:
        """Rewrite a localized path back into its canonical form."""

        locale = locale or self.default_locale
        if not self.has_translations(locale):
            return path
        return match_with_tree(path, self.trees.reverse_translations_tree(locale))

    def recognize(self, path: str) -> tuple[str, str | None]:
        """Return the canonical path and the locale found in ``path``."""

        path, locale = self.extract_locale(path)
        return self.untranslate_path(path, locale), locale

    def generate(self, url: str, locale: str | None) -> str:
        """Localize a canonical ``url`` (path, query and fragment are kept)."""

        parts = urlsplit(url)
        path = self.translate_path(parts.path or "/", locale)
        url = urlunsplit(parts._replace(path=path))
        if self.prepend_locale(locale):
            url = prepend_segment(url, locale)
        return url

    def around_recognize(
        self,
        path: str,
        env: Any,
        call_next: Callable[[str], MutableMapping[str, Any]],
    ) -> MutableMapping[str, Any]:
        """Run ``call_next`` on the canonical path and attach the recognized locale."""

        canonical, locale = self.recognize(path)
        params = call_next(canonical)
        if locale:
            params[LOCALE_PARAM] = locale
        return params

    def around_generate(
        self,
        params: MutableMapping[str, Any],
        call_next: Callable[[MutableMapping[str, Any]], str],
    ) -> str:
        """Run ``call_next`` without the ``locale`` option and localize its result."""

        locale = self.resolve_locale(params.pop(LOCALE_PARAM, None))
        return self.generate(call_next(params), locale)


__all__ = [
    "LOCALE_PARAM",
    "RoutesLocalization",
    "build_locales_pattern",
    "extract_segment",
    "prepend_segment",
]

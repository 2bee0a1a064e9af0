"""Settings loader combining an optional YAML file with environment overrides."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .schema import ConfigurationError, LocalizationSettings

logger = logging.getLogger(__name__)

SETTINGS_ENV = "ROUTELOCALE_SETTINGS"
LOCALES_ENV = "ROUTELOCALE_LOCALES"
DEFAULT_LOCALE_ENV = "ROUTELOCALE_DEFAULT_LOCALE"
INCLUDE_DEFAULT_LOCALE_ENV = "ROUTELOCALE_INCLUDE_DEFAULT_LOCALE"
TRANSLATIONS_DIR_ENV = "ROUTELOCALE_TRANSLATIONS_DIR"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Settings file must define a mapping at the top level")
    return data


def _parse_locales(raw: str | None) -> list[str] | None:
    """Convert a comma separated environment value into locale identifiers."""

    if raw is None:
        return None

    return [locale.strip() for locale in raw.split(",") if locale.strip()]


def _parse_flag(env: str, raw: str | None) -> bool | None:
    if raw is None:
        return None

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False

    logger.warning("Ignoring invalid value for %s: %s", env, raw)
    return None


def _environment_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    locales = _parse_locales(environ.get(LOCALES_ENV))
    if locales:
        overrides["locales"] = locales

    default_locale = environ.get(DEFAULT_LOCALE_ENV)
    if default_locale and default_locale.strip():
        overrides["default_locale"] = default_locale.strip()

    include_default = _parse_flag(
        INCLUDE_DEFAULT_LOCALE_ENV, environ.get(INCLUDE_DEFAULT_LOCALE_ENV)
    )
    if include_default is not None:
        overrides["include_default_locale"] = include_default

    translations_dir = environ.get(TRANSLATIONS_DIR_ENV)
    if translations_dir and translations_dir.strip():
        overrides["translations_dir"] = translations_dir.strip()

    return overrides


def load_settings(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> LocalizationSettings:
    """Build :class:`LocalizationSettings` from a YAML file and the environment.

    ``path`` defaults to the file named by ``ROUTELOCALE_SETTINGS``. Environment
    variables take precedence over values read from the file.
    """

    environ = os.environ if environ is None else environ

    if path is None:
        path = environ.get(SETTINGS_ENV) or None

    raw: dict[str, Any] = {}
    if path is not None:
        settings_file = Path(path)
        if not settings_file.exists():
            raise FileNotFoundError(f"Settings file not found: {settings_file}")
        raw = _load_yaml(settings_file)

    raw.update(_environment_overrides(environ))

    try:
        return LocalizationSettings.model_validate(raw)
    except ValidationError as error:
        raise ConfigurationError(f"Settings validation failed: {error}") from error


__all__ = [
    "DEFAULT_LOCALE_ENV",
    "INCLUDE_DEFAULT_LOCALE_ENV",
    "LOCALES_ENV",
    "SETTINGS_ENV",
    "TRANSLATIONS_DIR_ENV",
    "load_settings",
]

"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from routelocale.app import create_app  # noqa: E402
from routelocale.config import LocalizationSettings  # noqa: E402
from routelocale.localization import Catalogue  # noqa: E402
from routelocale.routing import RoutesLocalization  # noqa: E402

TRANSLATIONS_DIR = SRC / "routelocale" / "translations"


class StaticCatalogue:
    """In-memory stand-in for :class:`Catalogue` used by unit tests."""

    def __init__(self, messages: dict, default_locale: str = "en") -> None:
        self._messages = messages
        self.default_locale = default_locale
        self.lookups: list[tuple[str, str]] = []

    def available_locales(self) -> tuple[str, ...]:
        return tuple(sorted(self._messages))

    def resolve(self, locale: str, key: str):
        self.lookups.append((locale, key))
        cursor = self._messages.get(locale, {})
        for part in key.split("."):
            if not isinstance(cursor, dict) or part not in cursor:
                return None
            cursor = cursor[part]
        return cursor


@pytest.fixture()
def catalogue() -> Catalogue:
    """Catalogue backed by the translations shipped with the package."""

    return Catalogue(directory=TRANSLATIONS_DIR)


@pytest.fixture()
def portuguese_localization(catalogue: Catalogue) -> RoutesLocalization:
    """Localization configured for ``pt-PT`` (default) and ``es``."""

    settings = LocalizationSettings(locales=("pt-PT", "es"), default_locale="pt-PT")
    return RoutesLocalization(settings, catalogue)


@pytest.fixture()
def app() -> Flask:
    """Return a configured Flask application for integration tests."""

    settings = LocalizationSettings(
        locales=("pt-PT", "es", "de", "en"),
        default_locale="en",
        translations_dir=TRANSLATIONS_DIR,
    )
    application = create_app(settings)
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()


@pytest.fixture()
def make_catalogue():
    """Factory building :class:`StaticCatalogue` instances."""

    return StaticCatalogue

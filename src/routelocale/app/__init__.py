"""Application factory for the localized routing demo service."""

from __future__ import annotations

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import NotFound

from routelocale.config import LocalizationSettings, load_settings
from routelocale.routing import RoutesLocalization
from routelocale.version import get_project_version

from .extension import LocalizedRouting, localized_url_for
from .routes import register_routes


def create_app(settings: LocalizationSettings | None = None) -> Flask:
    """Create and configure the Flask application instance.

    ``settings`` defaults to :func:`routelocale.config.load_settings`, which
    reads ``ROUTELOCALE_SETTINGS`` and the ``ROUTELOCALE_*`` overrides.
    """

    app = Flask(__name__)

    localization = RoutesLocalization(settings or load_settings())
    LocalizedRouting(app, localization)

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        return jsonify(
            {
                "status": "ok",
                "version": get_project_version(),
                "locales": list(localization.locales),
                "default_locale": localization.default_locale,
            }
        )

    @app.errorhandler(NotFound)
    def handle_not_found(error: NotFound):
        """Return consistent JSON responses for unknown paths."""

        return (
            jsonify(
                {
                    "error": "not_found",
                    "message": error.description,
                    "path": request.path,
                    "locale": g.get("locale"),
                }
            ),
            404,
        )

    return app


__all__ = ["LocalizedRouting", "create_app", "localized_url_for"]

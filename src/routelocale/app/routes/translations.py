"""Expose the URL translation trees to front-end consumers."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from routelocale.app.extension import EXTENSION_NAME

blueprint = Blueprint("url_translations", __name__, url_prefix="/api/v1/url-translations")


def _payload(locale: str | None) -> tuple[dict, int]:
    localization = current_app.extensions[EXTENSION_NAME].localization
    resolved = localization.resolve_locale(locale) if locale else localization.default_locale

    if resolved is None:
        return {
            "error": "unknown_locale",
            "message": f"Locale '{locale}' is not configured",
            "available_locales": list(localization.locales),
        }, 404

    return {
        "locale": resolved,
        "default_locale": localization.default_locale,
        "available_locales": list(localization.locales),
        "include_default_locale": localization.include_default_locale,
        "tree": localization.trees.translations_tree(resolved),
        "reverse_tree": localization.trees.reverse_translations_tree(resolved),
    }, 200


@blueprint.get("/")
def get_default_translations():
    """Return trees for the requested (``?locale=``) or default locale."""

    payload, status = _payload(request.args.get("locale"))
    return jsonify(payload), status


@blueprint.get("/<locale>")
def get_locale_translations(locale: str):
    """Return trees for a specific locale slug."""

    payload, status = _payload(locale)
    return jsonify(payload), status

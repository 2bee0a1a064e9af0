"""Flask integration installing route localization around Werkzeug routing."""

from __future__ import annotations

from typing import Any, Callable, Iterable, MutableMapping
from urllib.parse import urlsplit, urlunsplit

from flask import Flask, current_app, g, has_request_context, request
from flask import url_for as flask_url_for

from routelocale.config.settings import load_settings
from routelocale.localization import reset_locale, set_locale
from routelocale.routing import LOCALE_PARAM, RoutesLocalization

ENVIRON_PARAMS = "routelocale.params"
EXTENSION_NAME = "routelocale"

WSGIApp = Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]


def _decode_path(raw: str) -> str:
    # WSGI exposes PATH_INFO as latin-1 decoded bytes.
    return raw.encode("latin-1").decode("utf-8", "replace")


def _encode_path(path: str) -> str:
    return path.encode("utf-8").decode("latin-1")


class LocaleRecognitionMiddleware:
    """Rewrite ``PATH_INFO`` to its canonical form before Flask routes it."""

    def __init__(self, wsgi_app: WSGIApp, localization: RoutesLocalization) -> None:
        self.wsgi_app = wsgi_app
        self.localization = localization

    def __call__(self, environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        def route(path: str) -> MutableMapping[str, Any]:
            environ["PATH_INFO"] = _encode_path(path)
            return environ.setdefault(ENVIRON_PARAMS, {})

        path = _decode_path(environ.get("PATH_INFO") or "/")
        self.localization.around_recognize(path, environ, route)
        return self.wsgi_app(environ, start_response)


def _strip_script_root(url: str, script_root: str) -> str:
    if not script_root:
        return url
    parts = urlsplit(url)
    if parts.path.startswith(script_root):
        return urlunsplit(parts._replace(path=parts.path[len(script_root):] or "/"))
    return url


def _restore_script_root(url: str, script_root: str) -> str:
    if not script_root:
        return url
    parts = urlsplit(url)
    return urlunsplit(parts._replace(path=f"{script_root}{parts.path}"))


class LocalizedRouting:
    """Flask extension localizing recognized and generated paths.

    Incoming requests are stripped of their locale segment and untranslated by
    :class:`LocaleRecognitionMiddleware`; the recognized locale is exposed as
    ``g.locale`` and activated for the request. Links built through
    :meth:`url_for` (``localized_url_for`` in templates) are translated for the
    requested or active locale.
    """

    def __init__(self, app: Flask | None = None, localization: RoutesLocalization | None = None) -> None:
        self.localization = localization
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        if self.localization is None:
            self.localization = RoutesLocalization(load_settings())

        app.wsgi_app = LocaleRecognitionMiddleware(app.wsgi_app, self.localization)  # type: ignore[method-assign]
        app.extensions[EXTENSION_NAME] = self
        app.before_request(self._activate_locale)
        app.teardown_request(self._restore_locale)
        app.jinja_env.globals["localized_url_for"] = self.url_for

    def _activate_locale(self) -> None:
        params = request.environ.get(ENVIRON_PARAMS) or {}
        locale = params.get(LOCALE_PARAM)
        g.locale = locale
        g.routelocale_token = set_locale(locale or self.localization.default_locale)

    def _restore_locale(self, error: BaseException | None = None) -> None:
        token = g.pop("routelocale_token", None)
        if token is not None:
            reset_locale(token)

    def url_for(self, endpoint: str, **values: Any) -> str:
        """Build a localized URL; accepts ``locale`` next to Flask's options."""

        script_root = request.root_path if has_request_context() else ""

        def build(params: MutableMapping[str, Any]) -> str:
            return _strip_script_root(flask_url_for(endpoint, **params), script_root)

        url = self.localization.around_generate(values, build)
        return _restore_script_root(url, script_root)


def localized_url_for(endpoint: str, **values: Any) -> str:
    """Module-level shortcut for the extension bound to the current app."""

    extension: LocalizedRouting = current_app.extensions[EXTENSION_NAME]
    return extension.url_for(endpoint, **values)


__all__ = [
    "ENVIRON_PARAMS",
    "LocaleRecognitionMiddleware",
    "LocalizedRouting",
    "localized_url_for",
]

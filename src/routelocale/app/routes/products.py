"""Sample catalogue pages whose paths are localized by the extension."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, g, jsonify

from routelocale.app.extension import localized_url_for
from routelocale.localization import current_locale

blueprint = Blueprint("products", __name__)

_PRODUCTS: dict[int, str] = {1: "Notebook", 2: "Fountain pen", 3: "Desk lamp"}


def _page(endpoint: str, **values: Any) -> dict[str, Any]:
    """Describe the current page and its canonical/localized links."""

    return {
        "endpoint": endpoint,
        "locale": g.get("locale"),
        "active_locale": current_locale(),
        "links": {
            "self": localized_url_for(endpoint, **values),
            "products": localized_url_for("products.index"),
            "latest": localized_url_for("products.latest"),
        },
    }


@blueprint.get("/")
def home():
    """Landing page."""

    return jsonify(_page("products.home"))


@blueprint.get("/products/")
def index():
    """List every product with a localized detail link."""

    payload = _page("products.index")
    payload["products"] = [
        {
            "id": product_id,
            "name": name,
            "url": localized_url_for("products.detail", product_id=product_id),
        }
        for product_id, name in sorted(_PRODUCTS.items())
    ]
    return jsonify(payload)


@blueprint.get("/products/latest")
def latest():
    payload = _page("products.latest")
    product_id = max(_PRODUCTS)
    payload["product"] = {"id": product_id, "name": _PRODUCTS[product_id]}
    return jsonify(payload)


@blueprint.get("/products/<int:product_id>")
def detail(product_id: int):
    if product_id not in _PRODUCTS:
        return jsonify({"error": "not_found", "message": "Unknown product"}), 404

    payload = _page("products.detail", product_id=product_id)
    payload["product"] = {"id": product_id, "name": _PRODUCTS[product_id]}
    return jsonify(payload)


@blueprint.get("/about")
def about():
    return jsonify(_page("products.about"))

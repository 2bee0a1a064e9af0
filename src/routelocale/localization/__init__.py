"""Catalogue helpers supplying per-locale URL translations."""

from .catalog import (
    Catalogue,
    current_locale,
    get_catalogue,
    reset_locale,
    set_locale,
    with_locale,
)

__all__ = [
    "Catalogue",
    "current_locale",
    "get_catalogue",
    "reset_locale",
    "set_locale",
    "with_locale",
]

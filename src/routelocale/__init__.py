"""Localized URL paths for Flask applications.

Path segments are translated through per-locale trees read from the ``url``
section of the translation catalogue, and a leading locale segment is
extracted from incoming paths and prepended to generated ones.
"""

from .config import ConfigurationError, LocalizationSettings, load_settings
from .routing import RoutesLocalization, invert_tree, match_with_tree

__all__ = [
    "ConfigurationError",
    "LocalizationSettings",
    "RoutesLocalization",
    "invert_tree",
    "load_settings",
    "match_with_tree",
]

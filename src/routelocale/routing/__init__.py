"""Hierarchical URL segment translation and locale prefix handling."""

from .cache import TreeCache
from .filter import (
    LOCALE_PARAM,
    RoutesLocalization,
    build_locales_pattern,
    extract_segment,
    prepend_segment,
)
from .matcher import match_with_tree, tree_segment_node
from .tree import OWN_NAME, build_tree, invert_tree, stringify_keys

__all__ = [
    "LOCALE_PARAM",
    "OWN_NAME",
    "RoutesLocalization",
    "TreeCache",
    "build_locales_pattern",
    "build_tree",
    "extract_segment",
    "invert_tree",
    "match_with_tree",
    "prepend_segment",
    "stringify_keys",
    "tree_segment_node",
]

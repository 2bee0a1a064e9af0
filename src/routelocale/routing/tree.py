"""Hierarchical URL translation trees.

A translation tree mirrors the ``url`` section of a locale catalogue::

    {"products": {"_": "produtos", "latest": {"_": "novidades"}}}

Every mapping node describes one canonical path segment. Its reserved ``_``
entry holds the node's own translated name and the remaining entries are the
nested segments. The reverse tree has the same shape but is indexed by the
translated names, with ``_`` holding the canonical segment instead.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

logger = logging.getLogger(__name__)

OWN_NAME = "_"
URL_KEY = "url"

TranslationTree = dict[str, Union[str, "TranslationTree"]]


def stringify_keys(node: Any) -> Any:
    """Return a copy of ``node`` with every mapping key converted to ``str``."""

    if not isinstance(node, Mapping):
        return node
    return {str(key): stringify_keys(value) for key, value in node.items()}


def build_tree(catalogue: Any, locale: str) -> TranslationTree:
    """Build the forward tree for ``locale`` from the catalogue ``url`` entries."""

    node = catalogue.resolve(locale, URL_KEY)
    if not isinstance(node, Mapping):
        return {}
    return stringify_keys(node)


def invert_tree(tree: Mapping[str, Any]) -> TranslationTree:
    """Index ``tree`` by translated segment names.

    String values (including each node's own ``_`` entry) are skipped, as are
    child mappings without an own name: neither can be reached from a
    translated path. When two siblings share a translated name the later one
    replaces the earlier.
    """

    result: TranslationTree = {}
    for key, value in tree.items():
        if not isinstance(value, Mapping):
            continue

        name = value.get(OWN_NAME)
        if not isinstance(name, str):
            logger.debug("Skipping '%s' without a translated name", key)
            continue

        if name in result:
            logger.warning(
                "Translated segment '%s' is shared by '%s' and '%s'; keeping '%s'",
                name,
                result[name][OWN_NAME],
                key,
                key,
            )

        inverted = invert_tree(value)
        inverted[OWN_NAME] = key
        result[name] = inverted
    return result


__all__ = [
    "OWN_NAME",
    "TranslationTree",
    "URL_KEY",
    "build_tree",
    "invert_tree",
    "stringify_keys",
]

"""Process-wide memo of forward and reverse translation trees per locale."""

from __future__ import annotations

import logging
import threading
from typing import Any

from .tree import TranslationTree, build_tree, invert_tree

logger = logging.getLogger(__name__)


class TreeCache:
    """Lazily build and keep translation trees for each locale.

    Trees are derived from a catalogue assumed static for the lifetime of the
    process, so entries never expire. Call :meth:`clear` after reloading the
    catalogue.
    """

    def __init__(self, catalogue: Any) -> None:
        self.catalogue = catalogue
        self._forward: dict[str, TranslationTree] = {}
        self._reverse: dict[str, TranslationTree] = {}
        self._lock = threading.Lock()

    def translations_tree(self, locale: str) -> TranslationTree:
        """Return the canonical to localized tree for ``locale``."""

        tree = self._forward.get(locale)
        if tree is not None:
            return tree

        with self._lock:
            tree = self._forward.get(locale)
            if tree is None:
                tree = build_tree(self.catalogue, locale)
                logger.debug("Built translation tree for %s (%d roots)", locale, len(tree))
                self._forward[locale] = tree
        return tree

    def reverse_translations_tree(self, locale: str) -> TranslationTree:
        """Return the localized to canonical tree for ``locale``."""

        tree = self._reverse.get(locale)
        if tree is not None:
            return tree

        forward = self.translations_tree(locale)
        with self._lock:
            tree = self._reverse.get(locale)
            if tree is None:
                tree = invert_tree(forward)
                logger.debug("Built reverse translation tree for %s", locale)
                self._reverse[locale] = tree
        return tree

    def clear(self) -> None:
        """Forget every cached tree."""

        with self._lock:
            self._forward.clear()
            self._reverse.clear()


__all__ = ["TreeCache"]

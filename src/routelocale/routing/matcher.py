"""Segment-by-segment path rewriting against a translation tree."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from .tree import OWN_NAME


def tree_segment_node(tree: Mapping[str, Any], prefix: Sequence[str], segment: str) -> str:
    """Return the counterpart of ``segment`` when nested under ``prefix``.

    The keys ``prefix + [segment, "_"]`` are followed from the root. The first
    key missing from the tree is returned as is, which is ``segment`` itself
    when the segment has no entry at that level. A walk that ends on a mapping
    rather than a string returns the last key followed (``"_"``).
    """

    node: Any = tree
    for key in (*prefix, segment, OWN_NAME):
        if not isinstance(node, Mapping) or key not in node:
            return key
        node = node[key]

    if isinstance(node, Mapping):
        return key
    return node


def match_with_tree(path: str, tree: Mapping[str, Any]) -> str:
    """Rewrite each segment of ``path`` using ``tree``.

    Matched segments are remembered as context so that nested entries only
    apply below their parent: with ``{"products": {"_": "produtos", "latest":
    {"_": "novidades"}}}`` the path ``/products/latest`` becomes
    ``/produtos/novidades`` while ``/latest`` is left alone. A segment that
    passes through unchanged does not extend the context.
    """

    segments = path.split("/")[1:]
    trailing_slash = len(segments) > 1 and segments[-1] == ""
    while segments and segments[-1] == "":
        segments.pop()

    prefix: list[str] = []
    parts: list[str] = []
    for segment in segments:
        match = tree_segment_node(tree, prefix, segment)
        if match != segment:
            prefix.append(segment)
        parts.append(f"/{match}")

    rewritten = "".join(parts)
    if not rewritten:
        return path
    return f"{rewritten}/" if trailing_slash else rewritten


__all__ = ["match_with_tree", "tree_segment_node"]

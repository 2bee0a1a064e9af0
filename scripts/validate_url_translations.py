#!/usr/bin/env python3
"""Validate the ``url`` translation trees of every locale catalogue."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Mapping

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from routelocale.localization import Catalogue  # noqa: E402
from routelocale.routing.tree import OWN_NAME, URL_KEY, stringify_keys  # noqa: E402

TRANSLATIONS_DIR = SRC_DIR / "routelocale" / "translations"


class ValidationError(Exception):
    """Raised when validation detects unrecoverable issues."""


def _tree_issues(tree: Mapping[str, Any], trail: tuple[str, ...] = ()) -> list[str]:
    """Collect structural problems in a forward translation tree."""

    issues: list[str] = []
    owners: dict[str, str] = {}

    for key, value in tree.items():
        if key == OWN_NAME:
            continue
        path = "/" + "/".join((*trail, key))

        if not isinstance(value, Mapping):
            issues.append(f"{path}: expected a mapping with a '{OWN_NAME}' entry, found {value!r}")
            continue

        name = value.get(OWN_NAME)
        if name is None:
            issues.append(f"{path}: missing translated name '{OWN_NAME}'")
        elif not isinstance(name, str):
            issues.append(f"{path}: translated name must be a string, found {name!r}")
        elif not name or "/" in name:
            issues.append(f"{path}: translated name {name!r} is not a single path segment")
        elif name in owners:
            issues.append(
                f"{path}: translated name '{name}' already used by sibling '{owners[name]}'"
            )
        else:
            owners[name] = key

        issues.extend(_tree_issues(value, (*trail, key)))

    return issues


def validate_catalogue(catalogue: Catalogue) -> dict[str, list[str]]:
    """Return the issues found for each locale of ``catalogue``."""

    report: dict[str, list[str]] = {}
    for locale in catalogue.available_locales():
        node = catalogue.resolve(locale, URL_KEY)
        if node is None:
            report[locale] = []
            continue
        if not isinstance(node, Mapping):
            report[locale] = [f"'{URL_KEY}' must be a mapping, found {type(node).__name__}"]
            continue
        report[locale] = _tree_issues(stringify_keys(node))
    return report


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--translations-dir",
        type=Path,
        default=TRANSLATIONS_DIR,
        help="Directory holding <locale>.json/.yaml catalogues",
    )
    args = parser.parse_args(argv)

    if not args.translations_dir.is_dir():
        raise ValidationError(f"Missing translations directory: {args.translations_dir}")

    report = validate_catalogue(Catalogue(directory=args.translations_dir))

    failed = False
    for locale, issues in sorted(report.items()):
        if not issues:
            print(f"[ok] {locale}")
            continue
        failed = True
        for issue in issues:
            print(f"[{locale}] {issue}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

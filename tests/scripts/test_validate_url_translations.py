"""Tests for the URL translation catalogue validator."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "validate_url_translations.py"


@pytest.fixture(scope="module")
def validator():
    spec = importlib.util.spec_from_file_location("validate_url_translations", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _write_catalogue(directory: Path, locale: str, url: dict) -> None:
    directory.joinpath(f"{locale}.json").write_text(json.dumps({"url": url}), encoding="utf-8")


def test_packaged_catalogues_are_valid(validator, capsys) -> None:
    assert validator.main([]) == 0
    assert "[ok] pt-PT" in capsys.readouterr().out


def test_sibling_collisions_are_reported(validator, tmp_path: Path, capsys) -> None:
    _write_catalogue(
        tmp_path,
        "pt-PT",
        {"news": {"_": "novidades"}, "latest": {"_": "novidades"}},
    )

    assert validator.main(["--translations-dir", str(tmp_path)]) == 1
    output = capsys.readouterr().out
    assert "[pt-PT] /latest: translated name 'novidades' already used by sibling 'news'" in output


def test_structural_problems_are_reported(validator, tmp_path: Path) -> None:
    _write_catalogue(
        tmp_path,
        "es",
        {
            "products": {"latest": {"_": "recientes"}},
            "about": "quienes-somos",
            "help": {"_": 3},
            "docs": {"_": "a/b"},
        },
    )

    from routelocale.localization import Catalogue

    report = validator.validate_catalogue(Catalogue(directory=tmp_path))

    assert report["es"] == [
        "/products: missing translated name '_'",
        "/about: expected a mapping with a '_' entry, found 'quienes-somos'",
        "/help: translated name must be a string, found 3",
        "/docs: translated name 'a/b' is not a single path segment",
    ]


def test_same_name_under_different_parents_is_allowed(validator, tmp_path: Path) -> None:
    _write_catalogue(
        tmp_path,
        "pt-PT",
        {
            "products": {"_": "produtos", "latest": {"_": "novidades"}},
            "news": {"_": "noticias", "latest": {"_": "novidades"}},
        },
    )

    assert validator.main(["--translations-dir", str(tmp_path)]) == 0


def test_missing_directory_raises(validator, tmp_path: Path) -> None:
    with pytest.raises(validator.ValidationError):
        validator.main(["--translations-dir", str(tmp_path / "missing")])

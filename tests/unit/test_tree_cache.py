"""Unit coverage for the per-locale tree cache."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from routelocale.routing.cache import TreeCache

MESSAGES = {
    "pt-PT": {"url": {"products": {"_": "produtos", "latest": {"_": "novidades"}}}},
    "es": {"url": {"products": {"_": "productos"}}},
}


def test_translations_tree_is_built_once_per_locale(make_catalogue) -> None:
    catalogue = make_catalogue(MESSAGES)
    cache = TreeCache(catalogue)

    first = cache.translations_tree("pt-PT")
    second = cache.translations_tree("pt-PT")

    assert first is second
    assert first == MESSAGES["pt-PT"]["url"]
    assert catalogue.lookups == [("pt-PT", "url")]


def test_trees_are_keyed_by_locale(make_catalogue) -> None:
    cache = TreeCache(make_catalogue(MESSAGES))

    assert cache.translations_tree("es") == {"products": {"_": "productos"}}
    assert cache.reverse_translations_tree("es") == {"productos": {"_": "products"}}
    assert cache.reverse_translations_tree("pt-PT") == {
        "produtos": {"_": "products", "novidades": {"_": "latest"}},
    }


def test_reverse_tree_reuses_forward_tree(make_catalogue) -> None:
    catalogue = make_catalogue(MESSAGES)
    cache = TreeCache(catalogue)

    cache.reverse_translations_tree("pt-PT")
    cache.translations_tree("pt-PT")
    cache.reverse_translations_tree("pt-PT")

    assert catalogue.lookups == [("pt-PT", "url")]


def test_unknown_locale_yields_empty_trees(make_catalogue) -> None:
    cache = TreeCache(make_catalogue(MESSAGES))

    assert cache.translations_tree("fr") == {}
    assert cache.reverse_translations_tree("fr") == {}


def test_clear_forces_rebuild(make_catalogue) -> None:
    catalogue = make_catalogue(MESSAGES)
    cache = TreeCache(catalogue)
    first = cache.translations_tree("es")

    cache.clear()
    second = cache.translations_tree("es")

    assert first == second
    assert first is not second
    assert catalogue.lookups == [("es", "url"), ("es", "url")]


def test_concurrent_access_builds_a_single_tree(make_catalogue) -> None:
    catalogue = make_catalogue(MESSAGES)
    cache = TreeCache(catalogue)

    with ThreadPoolExecutor(max_workers=8) as pool:
        trees = list(pool.map(lambda _: cache.reverse_translations_tree("pt-PT"), range(64)))

    assert all(tree is trees[0] for tree in trees)
    assert catalogue.lookups == [("pt-PT", "url")]

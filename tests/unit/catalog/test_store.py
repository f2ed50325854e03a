import logging
from typing import Any, Dict

import pytest

from uicons.catalog.store import CatalogSnapshot, CatalogStore, UninitializedError, infer_extension


def test_infer_extension_uses_last_dot() -> None:
    assert infer_extension("1.webp") == "webp"
    assert infer_extension("archive.tar.gz") == "gz"
    assert infer_extension("noext") == "noext"


def test_snapshot_flattens_nested_categories(index_document: Dict[str, Any]) -> None:
    snapshot = CatalogSnapshot.from_document(index_document)

    assert "raid.egg" in snapshot.filenames
    assert "reward.stardust" in snapshot.filenames
    assert "raid" not in snapshot.filenames
    assert snapshot.extension("reward.item") == "webp"
    assert snapshot.contains("reward.item", "1_a10.webp")


def test_extension_comes_from_first_file() -> None:
    snapshot = CatalogSnapshot.from_document({"pokemon": ["1.png", "2.webp"]})

    assert snapshot.extension("pokemon") == "png"


def test_empty_category_has_no_extension() -> None:
    snapshot = CatalogSnapshot.from_document({"gym": []})

    assert snapshot.filenames["gym"] == frozenset()
    assert snapshot.extension("gym") is None


def test_non_list_entries_are_skipped(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="uicons.catalog.store")

    snapshot = CatalogSnapshot.from_document({"pokemon": ["1.webp"], "version": 3})

    assert "version" not in snapshot.filenames
    assert "neither a list nor a mapping" in caplog.text


def test_store_requires_initialization() -> None:
    store = CatalogStore(label="empty")

    assert not store.is_ready
    with pytest.raises(UninitializedError, match="empty"):
        store.has("pokemon", "1")


def test_store_has(index_document: Dict[str, Any]) -> None:
    store = CatalogStore().init(index_document)

    assert store.has("pokemon", "4_f896")
    assert store.has("reward.stardust", 500)
    assert not store.has("reward.stardust", 10000)
    assert not store.has("reward.unknown", 1)
    assert not store.has("nothing", "0")


def test_init_swaps_snapshot_without_touching_the_old_one(index_document: Dict[str, Any]) -> None:
    store = CatalogStore().init(index_document)
    before = store.snapshot

    store.init({"pokemon": ["0.png"]})

    assert store.snapshot is not before
    assert before.contains("pokemon", "4_f896.webp")
    assert not store.has("pokemon", "4_f896")
    assert store.extension("gym") is None
    assert list(store.categories()) == ["pokemon"]


def test_snapshot_maps_are_read_only(index_document: Dict[str, Any]) -> None:
    snapshot = CatalogSnapshot.from_document(index_document)

    with pytest.raises(TypeError):
        snapshot.extensions["pokemon"] = "png"  # type: ignore[index]


def test_init_rejects_non_mapping() -> None:
    with pytest.raises(TypeError):
        CatalogStore().init(["1.webp"])  # type: ignore[arg-type]

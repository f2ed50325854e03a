import json
from pathlib import Path

import pytest

from uicons.catalog.index import build_index, load_index_file, write_index
from uicons.resolution.engine import Uicons


def _touch(root: Path, *names: str) -> None:
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")


@pytest.fixture()
def asset_root(tmp_path: Path) -> Path:
    root = tmp_path / "uicons"
    _touch(
        root,
        "pokemon/0.webp",
        "pokemon/4_f896.webp",
        "pokemon/1.webp",
        "pokemon/.DS_Store",
        "raid/egg/0.webp",
        "raid/egg/5_h.webp",
        "reward/stardust/0.webp",
        "reward/stardust/500.webp",
        "index.json",
    )
    (root / "empty").mkdir()
    return root


def test_build_index_mirrors_directory_tree(asset_root: Path) -> None:
    document = build_index(asset_root)

    assert document == {
        "pokemon": ["0.webp", "1.webp", "4_f896.webp"],
        "raid": {"egg": ["0.webp", "5_h.webp"]},
        "reward": {"stardust": ["0.webp", "500.webp"]},
    }


def test_build_index_requires_directory(tmp_path: Path) -> None:
    with pytest.raises(NotADirectoryError):
        build_index(tmp_path / "missing")


def test_write_and_load_index(asset_root: Path) -> None:
    path = write_index(build_index(asset_root), asset_root)

    assert path == asset_root / "index.json"
    assert json.loads(path.read_text(encoding="utf-8"))["pokemon"][0] == "0.webp"
    assert load_index_file(asset_root) == load_index_file(path)


def test_load_index_file_rejects_arrays(tmp_path: Path) -> None:
    path = tmp_path / "index.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError):
        load_index_file(path)


def test_local_init_resolves_against_directory(asset_root: Path) -> None:
    write_index(build_index(asset_root), asset_root)
    engine = Uicons(str(asset_root)).local_init()

    assert engine.pokemon(4, form=896) == f"{asset_root}/pokemon/4_f896.webp"
    assert engine.raid_egg(5, hatched=True) == f"{asset_root}/raid/egg/5_h.webp"
    assert engine.reward("stardust", 500) == f"{asset_root}/reward/stardust/500.webp"

"""Build, write and read ``index.json`` documents for on-disk repositories."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from uicons.core.models import INDEX_FILENAME
from uicons.logging import get_logger

LOGGER = get_logger(__name__)


def build_index(root: Path) -> Dict[str, Any]:
    """Walk an asset directory and describe it the way ``index.json`` does.

    Directories that hold files become sorted filename lists; directories that
    only hold sub-directories become nested mappings. A directory holding both
    keeps its files under its own key and is not descended further.
    """

    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"asset root is not a directory: {root}")
    document: Dict[str, Any] = {}
    for child in sorted(root.iterdir()):
        if child.name.startswith(".") or not child.is_dir():
            continue
        node = _describe(child)
        if node:
            document[child.name] = node
    LOGGER.info("index built", extra={"root": str(root), "categories": sorted(document)})
    return document


def _describe(directory: Path) -> Union[List[str], Dict[str, Any]]:
    files = sorted(
        entry.name
        for entry in directory.iterdir()
        if entry.is_file() and not entry.name.startswith(".") and entry.name != INDEX_FILENAME
    )
    if files:
        return files
    nested: Dict[str, Any] = {}
    for child in sorted(directory.iterdir()):
        if child.name.startswith(".") or not child.is_dir():
            continue
        node = _describe(child)
        if node:
            nested[child.name] = node
    return nested


def write_index(document: Dict[str, Any], path: Path, *, indent: int = 2) -> Path:
    path = Path(path)
    if path.is_dir():
        path = path / INDEX_FILENAME
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=indent, sort_keys=True), encoding="utf-8")
    return path


def load_index_file(path: Path) -> Dict[str, Any]:
    """Read an index document from a file, or from ``index.json`` in a directory."""

    path = Path(path)
    if path.is_dir():
        path = path / INDEX_FILENAME
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"index document must be a JSON object: {path}")
    return payload

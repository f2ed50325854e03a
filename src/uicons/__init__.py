"""Resolve UICONS asset requests into concrete icon and audio paths."""

from __future__ import annotations

import importlib
from typing import Any

__all__ = [
    "AssetSource",
    "CatalogSnapshot",
    "CatalogStore",
    "ConfigError",
    "FetchError",
    "SourceManager",
    "Uicons",
    "UiconsConfig",
    "UninitializedError",
    "UnknownCategoryWarning",
    "build_index",
    "configure_logging",
    "load_config",
]

_MODULE_MAP = {
    "AssetSource": ("uicons.core", "AssetSource"),
    "CatalogSnapshot": ("uicons.catalog", "CatalogSnapshot"),
    "CatalogStore": ("uicons.catalog", "CatalogStore"),
    "ConfigError": ("uicons.config", "ConfigError"),
    "FetchError": ("uicons.catalog", "FetchError"),
    "SourceManager": ("uicons.sources", "SourceManager"),
    "Uicons": ("uicons.resolution", "Uicons"),
    "UiconsConfig": ("uicons.config", "UiconsConfig"),
    "UninitializedError": ("uicons.catalog", "UninitializedError"),
    "UnknownCategoryWarning": ("uicons.resolution", "UnknownCategoryWarning"),
    "build_index": ("uicons.catalog", "build_index"),
    "configure_logging": ("uicons.logging", "configure_logging"),
    "load_config": ("uicons.config", "load_config"),
}


def __getattr__(name: str) -> Any:
    if name not in _MODULE_MAP:
        raise AttributeError(f"module 'uicons' has no attribute '{name}'")
    module_name, attr = _MODULE_MAP[name]
    module = importlib.import_module(module_name)
    return getattr(module, attr)

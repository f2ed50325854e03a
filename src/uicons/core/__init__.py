"""Core data models for UICONS."""

from .models import (
    CATEGORIES,
    INDEX_FILENAME,
    REWARD_TYPES,
    AssetSource,
    IndexDocument,
    SourceKind,
    TimeOfDay,
    format_id,
)

__all__ = [
    "AssetSource",
    "CATEGORIES",
    "INDEX_FILENAME",
    "IndexDocument",
    "REWARD_TYPES",
    "SourceKind",
    "TimeOfDay",
    "format_id",
]

"""In-memory catalog of the filenames published by an asset repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

from uicons.core.models import CATEGORIES, IndexDocument, format_id
from uicons.logging import get_logger

LOGGER = get_logger(__name__)


class UninitializedError(RuntimeError):
    """Raised when the catalog is queried before any index was loaded."""


def infer_extension(filename: str) -> str:
    """Return the text after the last ``.`` (the whole name when there is none)."""

    return filename.rsplit(".", 1)[-1]


@dataclass(frozen=True)
class CatalogSnapshot:
    """Immutable view of one index document.

    Keys are dot-joined category paths such as ``pokemon`` or
    ``reward.stardust``. A category listed with no files has an (empty)
    filename set but no extension.
    """

    filenames: Mapping[str, FrozenSet[str]] = field(default_factory=dict)
    extensions: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_document(cls, document: IndexDocument) -> "CatalogSnapshot":
        filenames: Dict[str, FrozenSet[str]] = {}
        extensions: Dict[str, str] = {}
        _collect(document, (), filenames, extensions)
        return cls(
            filenames=MappingProxyType(filenames),
            extensions=MappingProxyType(extensions),
        )

    def contains(self, category: str, filename: str) -> bool:
        return filename in self.filenames.get(category, ())

    def extension(self, category: str) -> Optional[str]:
        return self.extensions.get(category)


def _collect(
    node: Mapping[str, Any],
    prefix: tuple,
    filenames: Dict[str, FrozenSet[str]],
    extensions: Dict[str, str],
) -> None:
    for key, value in node.items():
        path = prefix + (str(key),)
        category = ".".join(path)
        if isinstance(value, Mapping):
            _collect(value, path, filenames, extensions)
        elif isinstance(value, (list, tuple)):
            names = [str(item) for item in value]
            filenames[category] = frozenset(names)
            if names:
                extensions[category] = infer_extension(names[0])
        else:
            LOGGER.debug(
                "skipping index entry that is neither a list nor a mapping",
                extra={"category": category, "value_type": type(value).__name__},
            )


class CatalogStore:
    """Hold the current :class:`CatalogSnapshot` and answer existence probes.

    ``init`` builds a complete new snapshot before swapping the reference, so
    concurrent readers see either the previous catalog or the new one.
    """

    def __init__(self, label: str = "uicons") -> None:
        self._label = label
        self._snapshot: Optional[CatalogSnapshot] = None

    @property
    def is_ready(self) -> bool:
        return self._snapshot is not None

    @property
    def snapshot(self) -> CatalogSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise UninitializedError(f"{self._label} catalog not initialized")
        return snapshot

    def init(self, document: IndexDocument) -> "CatalogStore":
        if not isinstance(document, Mapping):
            raise TypeError("index document must be a mapping")
        snapshot = CatalogSnapshot.from_document(document)
        self._snapshot = snapshot
        missing = [name for name in CATEGORIES if name not in document]
        LOGGER.info(
            "catalog loaded",
            extra={
                "label": self._label,
                "categories": len(snapshot.filenames),
                "files": sum(len(names) for names in snapshot.filenames.values()),
            },
        )
        if missing:
            LOGGER.debug("index omits categories", extra={"label": self._label, "missing": missing})
        return self

    def has(self, category: str, base_name: Any) -> bool:
        """Return True when ``{base_name}.{ext}`` is listed under ``category``."""

        snapshot = self.snapshot
        extension = snapshot.extension(category)
        if extension is None:
            return False
        return snapshot.contains(category, f"{format_id(base_name)}.{extension}")

    def extension(self, category: str) -> Optional[str]:
        return self.snapshot.extension(category)

    def categories(self) -> Iterable[str]:
        return sorted(self.snapshot.filenames)

"""Manage several UICONS repositories side by side."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

import requests

from uicons.config.loader import UiconsConfig
from uicons.core.models import AssetSource
from uicons.logging import get_logger
from uicons.resolution.engine import Uicons

LOGGER = get_logger(__name__)


class SourceManager:
    """Hold one :class:`Uicons` resolver per configured asset source."""

    def __init__(
        self,
        sources: Sequence[AssetSource],
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._sources: Dict[str, AssetSource] = {}
        self._resolvers: Dict[str, Uicons] = {}
        for source in sources:
            if source.name in self._sources:
                raise ValueError(f"duplicate source name: {source.name}")
            self._sources[source.name] = source
            self._resolvers[source.name] = Uicons(
                source.path,
                source.display_label(),
                timeout=timeout,
                session=session,
            )

    @classmethod
    def from_config(
        cls,
        config: UiconsConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> "SourceManager":
        return cls(config.sources, timeout=config.timeout_seconds, session=session)

    def names(self) -> List[str]:
        return list(self._sources)

    def get(self, name: str) -> Uicons:
        return self._resolvers[name]

    def source(self, name: str) -> AssetSource:
        return self._sources[name]

    def icons(self) -> List[Uicons]:
        return self._of_kind("icon")

    def audio(self) -> List[Uicons]:
        return self._of_kind("audio")

    def initialize(self, *, names: Optional[Iterable[str]] = None) -> Dict[str, Uicons]:
        """Load the index of every selected source.

        Sources with an ``index`` file, or whose path is a local directory,
        are read from disk; the rest are fetched over HTTP. The first
        :class:`~uicons.catalog.fetch.FetchError` propagates.
        """

        selected = list(names) if names is not None else self.names()
        loaded: Dict[str, Uicons] = {}
        for name in selected:
            source = self._sources[name]
            resolver = self._resolvers[name]
            if source.index is not None:
                LOGGER.info("loading local index", extra={"source": name, "index": str(source.index)})
                resolver.local_init(source.index)
            elif not source.is_remote and Path(source.path).is_dir():
                LOGGER.info("loading local index", extra={"source": name, "index": source.path})
                resolver.local_init()
            else:
                resolver.remote_init()
            loaded[name] = resolver
        return loaded

    def _of_kind(self, kind: str) -> List[Uicons]:
        return [self._resolvers[name] for name, source in self._sources.items() if source.kind == kind]

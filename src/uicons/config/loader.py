"""Configuration management with YAML and JSON support."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from logging import Logger
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from uicons.core.models import AssetSource
from uicons.logging import configure_logging

SOURCE_KINDS = ("icon", "audio")


class ConfigError(ValueError):
    """Raised when a configuration file is malformed."""


@dataclass
class UiconsConfig:
    """Top-level configuration: the asset repositories and logging options."""

    sources: Tuple[AssetSource, ...] = field(default_factory=tuple)
    timeout_seconds: Optional[float] = None
    log_level: str = "INFO"
    json_logs: bool = False
    log_file: Optional[str] = None

    def source_names(self) -> List[str]:
        return [source.name for source in self.sources]

    def configure_logging(self) -> Logger:
        """Install the logging handlers described by this configuration."""

        return configure_logging(level=self.log_level, json_logs=self.json_logs, log_file=self.log_file)


class ConfigLoader:
    """Load configuration files in YAML or JSON format."""

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = base_dir or Path.cwd()

    def load(self, path: Path | str) -> UiconsConfig:
        """Parse a configuration file and return a populated dataclass."""

        config_path = self._resolve_path(Path(path))
        payload = self._load_payload(config_path)
        return self.build(payload, base_dir=config_path.parent)

    def _resolve_path(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return (self._base_dir / path).resolve()

    def _load_payload(self, path: Path) -> Dict[str, Any]:
        suffix = path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            with path.open("r", encoding="utf-8") as handle:
                payload = yaml.safe_load(handle) or {}
        elif suffix == ".json":
            with path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle) or {}
        else:
            raise ConfigError(f"Unsupported configuration format: {suffix}")
        if not isinstance(payload, dict):
            raise ConfigError("configuration root must be a mapping")
        return payload

    def build(self, payload: Dict[str, Any], *, base_dir: Optional[Path] = None) -> UiconsConfig:
        base_dir = base_dir or self._base_dir
        sources_payload = payload.get("sources") or []
        if not isinstance(sources_payload, list):
            raise ConfigError("sources section must be a list")
        sources = tuple(self._build_source(entry, base_dir) for entry in sources_payload)

        names = [source.name for source in sources]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ConfigError(f"duplicate source names: {', '.join(duplicates)}")

        timeout = payload.get("timeout_seconds")
        if timeout is not None:
            try:
                timeout = float(timeout)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"timeout_seconds must be a number, got {timeout!r}") from exc
        log_file = payload.get("log_file")
        return UiconsConfig(
            sources=sources,
            timeout_seconds=timeout,
            log_level=str(payload.get("log_level", "INFO")),
            json_logs=bool(payload.get("json_logs", False)),
            log_file=str(log_file) if log_file else None,
        )

    def _build_source(self, entry: Any, base_dir: Path) -> AssetSource:
        if not isinstance(entry, dict):
            raise ConfigError("sources entries must be mappings")
        data = dict(entry)
        path = data.get("path")
        if not path:
            raise ConfigError(f"source {data.get('name', '<unnamed>')!r} is missing a path")
        path = str(path)
        name = str(data.get("name") or path)
        kind = str(data.get("kind", "icon")).lower()
        if kind not in SOURCE_KINDS:
            raise ConfigError(f"source {name!r} has unknown kind {kind!r}")
        if not path.startswith(("http://", "https://")):
            local = Path(path).expanduser()
            if not local.is_absolute():
                local = (base_dir / local).resolve()
            path = str(local)
        index = data.get("index")
        index_path: Optional[Path] = None
        if index:
            index_path = Path(index).expanduser()
            if not index_path.is_absolute():
                index_path = (base_dir / index_path).resolve()
        return AssetSource(
            name=name,
            path=path,
            kind=kind,  # type: ignore[arg-type]
            label=data.get("label"),
            index=index_path,
        )


def load_config(path: Path | str, *, base_dir: Optional[Path] = None) -> UiconsConfig:
    """Convenience wrapper around :class:`ConfigLoader`."""

    loader = ConfigLoader(base_dir=base_dir)
    return loader.load(path)

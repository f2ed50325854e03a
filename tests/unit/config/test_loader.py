import json
import logging
from pathlib import Path

import pytest

from uicons.config.loader import ConfigError, ConfigLoader, UiconsConfig, load_config

YAML_CONFIG = """
timeout_seconds: 12
log_level: debug
sources:
  - name: Assets
    path: https://example.com/uicons/
  - name: Local
    path: ./local
    label: disk
    index: ./local/index.json
  - name: Cries
    path: https://example.com/uaudio
    kind: audio
"""


def test_load_yaml_config(tmp_path: Path) -> None:
    config_path = tmp_path / "uicons.yaml"
    config_path.write_text(YAML_CONFIG, encoding="utf-8")

    config = load_config(config_path)

    assert config.timeout_seconds == 12.0
    assert config.log_level == "debug"
    assert config.source_names() == ["Assets", "Local", "Cries"]
    remote, local, audio = config.sources
    assert remote.path == "https://example.com/uicons/"
    assert remote.is_remote
    assert local.path == str((tmp_path / "local").resolve())
    assert local.index == (tmp_path / "local" / "index.json").resolve()
    assert local.display_label() == "disk"
    assert audio.kind == "audio"


def test_load_json_config_relative_to_base_dir(tmp_path: Path) -> None:
    (tmp_path / "uicons.json").write_text(
        json.dumps({"sources": [{"name": "Assets", "path": "https://example.com/uicons"}]}),
        encoding="utf-8",
    )

    config = ConfigLoader(base_dir=tmp_path).load("uicons.json")

    assert config.source_names() == ["Assets"]
    assert config.timeout_seconds is None
    assert config.json_logs is False


def test_empty_config_has_no_sources(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(config_path) == UiconsConfig()


@pytest.mark.parametrize(
    "payload",
    [
        {"sources": {"name": "Assets"}},
        {"sources": ["https://example.com"]},
        {"sources": [{"name": "Assets"}]},
        {"sources": [{"name": "Assets", "path": "https://example.com", "kind": "video"}]},
        {
            "sources": [
                {"name": "Assets", "path": "https://example.com/a"},
                {"name": "Assets", "path": "https://example.com/b"},
            ]
        },
        {"timeout_seconds": "soon"},
    ],
)
def test_invalid_payloads(payload: dict) -> None:
    with pytest.raises(ConfigError):
        ConfigLoader().build(payload)


def test_non_numeric_timeout_is_config_error() -> None:
    with pytest.raises(ConfigError, match="timeout_seconds") as excinfo:
        ConfigLoader().build({"timeout_seconds": [5]})

    assert isinstance(excinfo.value.__cause__, TypeError)


def test_unsupported_suffix(tmp_path: Path) -> None:
    config_path = tmp_path / "uicons.toml"
    config_path.write_text("", encoding="utf-8")

    with pytest.raises(ConfigError, match="Unsupported"):
        load_config(config_path)


def test_configure_logging_applies_level_to_package_logger() -> None:
    root = logging.getLogger()
    package = logging.getLogger("uicons")
    previous = (root.level, list(root.handlers), package.level, list(package.handlers), package.propagate)
    try:
        configured = UiconsConfig(log_level="warning", json_logs=True).configure_logging()

        assert configured is package
        assert package.level == logging.WARNING
        assert package.propagate is False
        assert [type(handler.formatter).__name__ for handler in package.handlers] == ["JSONFormatter"]
        assert root.level == previous[0]
        assert root.handlers == previous[1]
    finally:
        for handler in package.handlers:
            handler.close()
        root.setLevel(previous[0])
        root.handlers = previous[1]
        package.setLevel(previous[2])
        package.handlers = previous[3]
        package.propagate = previous[4]

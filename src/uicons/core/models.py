"""Dataclasses and constants describing UICONS asset repositories."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Mapping, Optional, Sequence, Union

IndexDocument = Mapping[str, Union[Sequence[str], "IndexDocument"]]
"""Parsed ``index.json``: category name to filenames, or to a nested mapping."""

TimeOfDay = Literal["day", "night"]

SourceKind = Literal["icon", "audio"]

INDEX_FILENAME = "index.json"

CATEGORIES = (
    "device",
    "gym",
    "invasion",
    "misc",
    "nest",
    "pokemon",
    "pokestop",
    "raid",
    "reward",
    "spawnpoint",
    "station",
    "team",
    "type",
    "weather",
)

# Lower-cased names of QuestRewardProto.Type, used as reward sub-directories.
REWARD_TYPES = (
    "unset",
    "experience",
    "item",
    "stardust",
    "candy",
    "avatar_clothing",
    "quest",
    "pokemon_encounter",
    "pokecoin",
    "xl_candy",
    "level_cap",
    "sticker",
    "mega_resource",
    "incident",
    "player_attribute",
    "event_badge",
)


@dataclass(frozen=True)
class AssetSource:
    """Describe one asset repository, remote or on disk."""

    name: str
    path: str
    kind: SourceKind = "icon"
    label: Optional[str] = None
    index: Optional[Path] = None

    @property
    def is_remote(self) -> bool:
        return self.path.startswith(("http://", "https://"))

    def display_label(self) -> str:
        return self.label or self.name


def format_id(value: Any) -> str:
    """Render an id the way it appears in asset filenames (``4.0`` -> ``4``)."""

    if value is None:
        return "0"
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()

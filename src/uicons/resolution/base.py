"""Protocol definitions for asset resolution components."""

from __future__ import annotations

from typing import Optional, Protocol, Union

from uicons.core.models import IndexDocument, TimeOfDay

Identifier = Union[str, int]


class AssetResolver(Protocol):
    """Interface for turning semantic asset requests into file locations."""

    def init(self, document: IndexDocument) -> "AssetResolver":
        """Replace the known filenames with those listed in ``document``."""

    def has(self, category: str, base_name: Identifier) -> bool:
        """Return True when the category lists ``base_name`` with its extension."""

    def pokemon(
        self,
        pokemon_id: Identifier = 0,
        evolution: Identifier = 0,
        form: Identifier = 0,
        costume: Identifier = 0,
        gender: Identifier = 0,
        alignment: Identifier = 0,
        bread: Identifier = 0,
        shiny: bool = False,
    ) -> str:
        """Return the most specific Pokemon asset that exists."""

    def reward(
        self,
        reward_type: Union[str, int] = "unset",
        reward_id: Identifier = 0,
        amount: Identifier = 0,
    ) -> str:
        """Return the quest reward asset for the given reward type."""

    def weather(
        self,
        weather_id: Identifier = 0,
        severity_level: Identifier = 0,
        time_of_day: Optional[TimeOfDay] = None,
    ) -> str:
        """Return the weather asset for the given condition and time of day."""

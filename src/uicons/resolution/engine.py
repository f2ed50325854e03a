"""Resolve semantic UICONS requests to concrete asset paths.

Any repository that follows the UICONS naming guideline can be used, whether
it holds images or audio::

    icons = Uicons("https://example.com/uicons", "cagemons").remote_init()
    icons.pokemon(6, evolution=1)          # .../pokemon/6_e1.webp
    icons.reward("stardust", amount=500)   # .../reward/stardust/500.webp

Every lookup returns the most specific file listed in the repository index,
falling back to ``0.{ext}`` in the category directory. A category the index
does not list at all resolves to ``""``.
"""

from __future__ import annotations

import logging
import warnings
from functools import partial
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import requests

from uicons.catalog.fetch import fetch_index
from uicons.catalog.index import load_index_file
from uicons.catalog.store import CatalogSnapshot, CatalogStore
from uicons.core.models import REWARD_TYPES, IndexDocument, TimeOfDay
from uicons.logging import get_logger

from .base import AssetResolver, Identifier
from .schemas import describe, get_schema
from .search import Variants, first_match, is_set

LOGGER = get_logger(__name__)


class UnknownCategoryWarning(UserWarning):
    """Issued when a request names a category the index does not list."""


class Uicons(AssetResolver):
    """Asset resolver bound to one UICONS repository."""

    def __init__(
        self,
        path: str,
        label: Optional[str] = None,
        *,
        data: Optional[IndexDocument] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._path = str(path).rstrip("/")
        self._label = label or self._path
        self._timeout = timeout
        self._session = session
        self._store = CatalogStore(label=self._label)
        if data is not None:
            self.init(data)

    def __repr__(self) -> str:
        return f"Uicons(path={self._path!r}, label={self._label!r}, ready={self.is_ready})"

    @property
    def path(self) -> str:
        return self._path

    @property
    def label(self) -> str:
        return self._label

    @property
    def is_ready(self) -> bool:
        return self._store.is_ready

    def init(self, document: IndexDocument) -> "Uicons":
        """Load an already fetched ``index.json`` document."""

        self._store.init(document)
        return self

    def remote_init(self, base_url: Optional[str] = None) -> "Uicons":
        """Fetch ``index.json`` from the repository and load it.

        Raises :class:`~uicons.catalog.fetch.FetchError` on any failure; the
        previous catalog, if any, stays in place.
        """

        document = fetch_index(base_url or self._path, timeout=self._timeout, session=self._session)
        return self.init(document)

    def local_init(self, location: Optional[Union[str, Path]] = None) -> "Uicons":
        """Load ``index.json`` from a directory or an explicit JSON file."""

        document = load_index_file(Path(location if location is not None else self._path))
        return self.init(document)

    def has(self, category: str, base_name: Identifier) -> bool:
        return self._store.has(category, base_name)

    def extension(self, category: str) -> Optional[str]:
        return self._store.extension(category)

    def categories(self) -> Iterable[str]:
        return self._store.categories()

    def device(self, online: bool = False) -> str:
        return self._resolve("device", 1 if online else 0)

    def gym(
        self,
        team_id: Identifier = 0,
        trainer_count: Identifier = 0,
        in_battle: bool = False,
        ex: bool = False,
        ar: bool = False,
        power: Identifier = 0,
    ) -> str:
        return self._resolve(
            "gym",
            team_id,
            trainer_count=trainer_count,
            in_battle=in_battle,
            ex=ex,
            ar=ar,
            power=power,
        )

    def invasion(self, grunt_id: Identifier = 0, confirmed: bool = False) -> str:
        """Unconfirmed invasions prefer the ``_u`` artwork (Giovanni and decoys)."""

        return self._resolve("invasion", grunt_id, confirmed=confirmed)

    def misc(self, file_name: str) -> str:
        return self._resolve("misc", file_name)

    def nest(self, type_id: Identifier = 0) -> str:
        return self._resolve("nest", type_id)

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
        return self._resolve(
            "pokemon",
            pokemon_id,
            evolution=evolution,
            form=form,
            costume=costume,
            gender=gender,
            alignment=alignment,
            bread=bread,
            shiny=shiny,
        )

    def pokestop(
        self,
        lure_id: Identifier = 0,
        display: Union[bool, Identifier] = False,
        quest_active: bool = False,
        ar: bool = False,
        power: Identifier = 0,
    ) -> str:
        """``display`` is ``True`` for a plain invasion or an incident display id."""

        return self._resolve(
            "pokestop",
            lure_id,
            display=display,
            quest_active=quest_active,
            ar=ar,
            power=power,
        )

    def raid_egg(self, level: Identifier = 0, hatched: bool = False, ex: bool = False) -> str:
        return self._resolve("raid.egg", level, hatched=hatched, ex=ex)

    def reward(
        self,
        reward_type: Union[str, int] = "unset",
        reward_id: Identifier = 0,
        amount: Identifier = 0,
    ) -> str:
        """Resolve a quest reward.

        Rewards without an id (stardust, experience) are named by their
        amount, so ``amount`` doubles as the id when ``reward_id`` is unset.
        A reward type missing from the index falls back to the ``misc``
        placeholder.
        """

        snapshot = self._store.snapshot
        type_name = reward_type_name(reward_type)
        category = f"reward.{type_name}"
        if category not in snapshot.filenames:
            message = f"[{self._label.upper()}] Missing category: {type_name}"
            LOGGER.warning(message, extra={"label": self._label, "reward_type": type_name})
            warnings.warn(message, UnknownCategoryWarning, stacklevel=2)
            return self._search(snapshot, "misc", "misc", 0, [])

        schema = get_schema("reward")
        primary = reward_id if is_set(reward_id) else amount if is_set(amount) else 0
        return self._search(
            snapshot,
            category,
            f"{schema.directory}/{type_name}",
            primary,
            schema.variant_lists({"amount": amount}),
        )

    def spawnpoint(self, has_tth: bool = False) -> str:
        return self._resolve("spawnpoint", 1 if has_tth else 0)

    def station(self, active: bool = False) -> str:
        return self._resolve("station", 1 if active else 0)

    def team(self, team_id: Identifier = 0) -> str:
        return self._resolve("team", team_id)

    def type(self, type_id: Identifier = 0) -> str:
        return self._resolve("type", type_id)

    def weather(
        self,
        weather_id: Identifier = 0,
        severity_level: Identifier = 0,
        time_of_day: Optional[TimeOfDay] = None,
    ) -> str:
        """``time_of_day`` is ``"day"`` or ``"night"``; when given it is never dropped."""

        return self._resolve(
            "weather",
            weather_id,
            severity_level=severity_level,
            time_of_day=time_of_day,
        )

    def _resolve(self, category: str, primary: Any, **values: Any) -> str:
        snapshot = self._store.snapshot
        schema = get_schema(category)
        variant_lists = schema.variant_lists(values)
        path = self._search(snapshot, schema.category, schema.directory, primary, variant_lists)
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug("resolved %s -> %s", describe(category, primary, values), path or "<missing>")
        return path

    def _search(
        self,
        snapshot: CatalogSnapshot,
        category: str,
        directory: str,
        primary: Any,
        variant_lists: List[Variants],
    ) -> str:
        extension = snapshot.extension(category)
        if extension is None:
            return ""
        match = first_match(primary, variant_lists, extension, partial(snapshot.contains, category))
        return f"{self._path}/{directory}/{match or f'0.{extension}'}"


def reward_type_name(reward_type: Union[str, int]) -> str:
    """Map a reward type name or ``QuestRewardProto.Type`` number to its directory."""

    if isinstance(reward_type, int) and not isinstance(reward_type, bool):
        if 0 <= reward_type < len(REWARD_TYPES):
            return REWARD_TYPES[reward_type]
        return str(reward_type)
    name = str(reward_type).strip().lower()
    if name.isdigit() and int(name) < len(REWARD_TYPES):
        return REWARD_TYPES[int(name)]
    return name

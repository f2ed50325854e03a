"""Attribute schemas for every UICONS category.

Attribute order is the search priority: earlier attributes are kept longer
when no exact filename exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from uicons.core.models import format_id

from .search import ABSENT, Variants, fixed, is_set, toggle, valued

FLAG = "flag"
VALUE = "value"
UNLESS = "unless"
MARKER = "marker"
CHOICE = "choice"
AMOUNT = "amount"

TIME_OF_DAY_TOKENS: Mapping[str, str] = {"day": "_d", "night": "_n"}


@dataclass(frozen=True)
class AttributeSpec:
    """One optional attribute of a category and the suffix it contributes.

    ``flag``
        ``token`` tried, then dropped, when the value is truthy.
    ``value``
        ``token`` followed by the value, when the value is set.
    ``unless``
        ``token`` tried, then dropped, when the value is falsy.
    ``marker``
        like ``value``, but ``True`` contributes the bare token.
    ``choice``
        exactly one token picked from ``choices``; never dropped.
    ``amount``
        like ``value``, restricted to integers greater than one.
    """

    name: str
    token: str = ""
    kind: str = FLAG
    choices: Optional[Mapping[str, str]] = None

    def variants(self, value: Any) -> Variants:
        if self.kind == FLAG:
            return toggle(self.token, value)
        if self.kind == VALUE:
            return valued(self.token, value)
        if self.kind == UNLESS:
            return toggle(self.token, not value)
        if self.kind == MARKER:
            if value is True:
                return (self.token, "")
            return valued(self.token, value)
        if self.kind == CHOICE:
            return self._choice(value)
        if self.kind == AMOUNT:
            amount = _as_integer(value)
            if amount is not None and amount > 1:
                return (f"{self.token}{amount}", "")
            return ABSENT
        raise ValueError(f"unknown attribute kind: {self.kind}")

    def _choice(self, value: Any) -> Variants:
        if value is None or value == "":
            return ABSENT
        choices = self.choices or {}
        key = str(value).lower()
        if key not in choices:
            raise ValueError(f"{self.name} must be one of {sorted(choices)}, got {value!r}")
        return fixed(choices[key])


def _as_integer(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not is_set(value):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not number.is_integer():
        return None
    return int(number)


@dataclass(frozen=True)
class CategorySchema:
    """Directory and ordered optional attributes of one asset category."""

    category: str
    directory: str
    attributes: Tuple[AttributeSpec, ...] = ()

    @property
    def attribute_names(self) -> Tuple[str, ...]:
        return tuple(attribute.name for attribute in self.attributes)

    def variant_lists(self, values: Mapping[str, Any]) -> List[Variants]:
        unknown = set(values) - set(self.attribute_names)
        if unknown:
            raise TypeError(f"{self.category} got unexpected attributes: {sorted(unknown)}")
        return [attribute.variants(values.get(attribute.name)) for attribute in self.attributes]


SCHEMAS: Dict[str, CategorySchema] = {
    schema.category: schema
    for schema in (
        CategorySchema("device", "device"),
        CategorySchema(
            "gym",
            "gym",
            (
                AttributeSpec("trainer_count", "_t", VALUE),
                AttributeSpec("in_battle", "_b"),
                AttributeSpec("ex", "_ex"),
                AttributeSpec("ar", "_ar"),
                AttributeSpec("power", "_p", VALUE),
            ),
        ),
        CategorySchema("invasion", "invasion", (AttributeSpec("confirmed", "_u", UNLESS),)),
        CategorySchema("misc", "misc"),
        CategorySchema("nest", "nest"),
        CategorySchema(
            "pokemon",
            "pokemon",
            (
                AttributeSpec("evolution", "_e", VALUE),
                AttributeSpec("form", "_f", VALUE),
                AttributeSpec("costume", "_c", VALUE),
                AttributeSpec("gender", "_g", VALUE),
                AttributeSpec("alignment", "_a", VALUE),
                AttributeSpec("bread", "_b", VALUE),
                AttributeSpec("shiny", "_s"),
            ),
        ),
        CategorySchema(
            "pokestop",
            "pokestop",
            (
                AttributeSpec("display", "_i", MARKER),
                AttributeSpec("quest_active", "_q"),
                AttributeSpec("ar", "_ar"),
                AttributeSpec("power", "_p", VALUE),
            ),
        ),
        CategorySchema(
            "raid.egg",
            "raid/egg",
            (
                AttributeSpec("hatched", "_h"),
                AttributeSpec("ex", "_ex"),
            ),
        ),
        CategorySchema("reward", "reward", (AttributeSpec("amount", "_a", AMOUNT),)),
        CategorySchema("spawnpoint", "spawnpoint"),
        CategorySchema("station", "station"),
        CategorySchema("team", "team"),
        CategorySchema("type", "type"),
        CategorySchema(
            "weather",
            "weather",
            (
                AttributeSpec("severity_level", "_l", VALUE),
                AttributeSpec("time_of_day", kind=CHOICE, choices=TIME_OF_DAY_TOKENS),
            ),
        ),
    )
}


def get_schema(category: str) -> CategorySchema:
    return SCHEMAS[category]


def describe(category: str, primary: Any, values: Mapping[str, Any]) -> str:
    """Render a request for diagnostics, e.g. ``pokemon(4, form=896)``."""

    parts = [format_id(primary)]
    parts.extend(f"{name}={value!r}" for name, value in values.items() if is_set(value))
    return f"{category}({', '.join(parts)})"

"""Generic suffix search shared by every asset category.

Each optional attribute of a request is turned into a list of variants (suffix
tokens, where ``""`` means the attribute is left out). The candidates are the
Cartesian product of those lists, with the first attribute varying slowest,
so the search gives up on later attributes before earlier ones.
"""

from __future__ import annotations

from itertools import product
from typing import Any, Callable, Iterator, Optional, Sequence, Tuple

from uicons.core.models import format_id

Variants = Tuple[str, ...]

ABSENT: Variants = ("",)


def is_set(value: Any) -> bool:
    """Return True when an attribute value counts as specified.

    ``None``, ``False``, zero and the empty string are unset. The string
    ``"0"`` is unset too, so ids read from text behave like ids read as ints.
    """

    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value.strip() not in ("", "0")
    return bool(value)


def toggle(token: str, active: Any) -> Variants:
    """Variants for a flag: the token first, then nothing."""

    return (token, "") if active else ABSENT


def valued(prefix: str, value: Any) -> Variants:
    """Variants for an attribute whose token embeds its value, e.g. ``_f896``."""

    return (f"{prefix}{format_id(value)}", "") if is_set(value) else ABSENT


def fixed(token: str) -> Variants:
    """A single variant that is never dropped."""

    return (token,)


def iter_candidates(primary: Any, variant_lists: Sequence[Variants], extension: str) -> Iterator[str]:
    """Yield candidate filenames in priority order."""

    stem = format_id(primary)
    for combination in product(*variant_lists):
        yield f"{stem}{''.join(combination)}.{extension}"


def first_match(
    primary: Any,
    variant_lists: Sequence[Variants],
    extension: str,
    exists: Callable[[str], bool],
) -> Optional[str]:
    """Return the first candidate filename accepted by ``exists``, if any."""

    for candidate in iter_candidates(primary, variant_lists, extension):
        if exists(candidate):
            return candidate
    return None

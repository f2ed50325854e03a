"""Asset resolution engine and its combinatorial filename search."""

from .base import AssetResolver as ResolverProtocol
from .engine import Uicons, UnknownCategoryWarning, reward_type_name
from .schemas import SCHEMAS, AttributeSpec, CategorySchema, get_schema
from .search import first_match, fixed, is_set, iter_candidates, toggle, valued

__all__ = [
    "AttributeSpec",
    "CategorySchema",
    "ResolverProtocol",
    "SCHEMAS",
    "Uicons",
    "UnknownCategoryWarning",
    "first_match",
    "fixed",
    "get_schema",
    "is_set",
    "iter_candidates",
    "reward_type_name",
    "toggle",
    "valued",
]

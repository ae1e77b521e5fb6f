"""
Game identity resolution — maps a stored, possibly ambiguous game type
label onto one concrete GameId.
"""

from .heuristics import DEFAULT_PREDICATES, VariantPredicate, looks_like_variant
from .models import GameHints
from .resolver import AMBIGUOUS_LABELS, UNAMBIGUOUS_LABELS, GameIdentityResolver

__all__ = [
    "GameIdentityResolver",
    "GameHints",
    "VariantPredicate",
    "DEFAULT_PREDICATES",
    "AMBIGUOUS_LABELS",
    "UNAMBIGUOUS_LABELS",
    "looks_like_variant",
]

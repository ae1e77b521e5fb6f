"""
GameIdentityResolver — turns a stored game type label into one GameId.

Resolution rules:
  1. Unambiguous labels                    → fixed GameId
  2. "Oblivion"                            → Nehrim or Oblivion
  3. "Skyrim"                              → Enderal or Skyrim
  4. "SkyrimSE" / "Skyrim Special Edition" → Enderal SE or Skyrim SE
  5. Anything else                         → UnrecognizedGameType

Ambiguous labels are settled by looks_like_variant(): the variant's
launcher in the install path if that path exists, heuristics otherwise.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from loot_settings.exceptions import UnrecognizedGameType
from loot_settings.facts import IDENTITY_FACTS, GameId, IdentityFacts
from .heuristics import DEFAULT_PREDICATES, VariantPredicate, looks_like_variant
from .models import GameHints

__all__ = ["GameIdentityResolver", "UNAMBIGUOUS_LABELS", "AMBIGUOUS_LABELS"]

logger = logging.getLogger(__name__)

UNAMBIGUOUS_LABELS: Mapping[str, GameId] = MappingProxyType({
    "Morrowind":  GameId.TES3,
    "Skyrim VR":  GameId.TES5VR,
    "Fallout3":   GameId.FO3,
    "FalloutNV":  GameId.FONV,
    "Fallout4":   GameId.FO4,
    "Fallout4VR": GameId.FO4VR,
    "Starfield":  GameId.STARFIELD,
})

# label → (base game, total-conversion variant)
AMBIGUOUS_LABELS: Mapping[str, Tuple[GameId, GameId]] = MappingProxyType({
    "Oblivion":               (GameId.TES4, GameId.NEHRIM),
    "Skyrim":                 (GameId.TES5, GameId.ENDERAL),
    "SkyrimSE":               (GameId.TES5SE, GameId.ENDERALSE),
    "Skyrim Special Edition": (GameId.TES5SE, GameId.ENDERALSE),
})


class GameIdentityResolver:
    """
    Resolve legacy game type labels.

    Usage::

        resolver = GameIdentityResolver()
        game_id = resolver.resolve("Skyrim", GameHints(name="My Enderal Install"))
        # GameId.ENDERAL
    """

    def __init__(
        self,
        identity_facts: Mapping[GameId, IdentityFacts] = IDENTITY_FACTS,
        predicates: Tuple[VariantPredicate, ...] = DEFAULT_PREDICATES,
    ) -> None:
        self._facts = identity_facts
        self._predicates = predicates

    def resolve(self, label: str, hints: Optional[GameHints] = None) -> GameId:
        """
        Return the GameId a stored label refers to.

        Args:
            label: the stored game type, e.g. "Oblivion" or "tes5se".
            hints: the other fields of the stored record.

        Raises:
            UnrecognizedGameType: label is not a known game type.
        """
        hints = hints or GameHints()

        if label in UNAMBIGUOUS_LABELS:
            return UNAMBIGUOUS_LABELS[label]

        if label in AMBIGUOUS_LABELS:
            base, variant = AMBIGUOUS_LABELS[label]
            game_id = variant if self.is_variant(hints, variant, base) else base
            logger.debug("Resolved ambiguous label %r to %s", label, game_id.value)
            return game_id

        # Newer settings files store the GameId itself.
        try:
            return GameId(label)
        except ValueError:
            raise UnrecognizedGameType(
                f"invalid value for game type in game settings table: {label!r}"
            ) from None

    def is_variant(self, hints: GameHints, expected: GameId, base: GameId) -> bool:
        """True if hints describe the variant ``expected`` rather than ``base``."""
        return looks_like_variant(
            hints, self._facts[expected], self._facts[base], self._predicates
        )

"""
Variant-detection predicates.

Each predicate looks at the hints from one stored record and the facts of
a total-conversion variant and its base game, and answers "does this look
like the variant?".  They are pure and combined with logical OR, so their
order never matters.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple

from loot_settings.facts.models import IdentityFacts
from .models import GameHints

__all__ = [
    "VariantPredicate",
    "DEFAULT_PREDICATES",
    "master_matches",
    "name_mentions_variant",
    "folder_mentions_variant",
    "local_folder_matches",
    "not_base_game_instance",
    "install_path_marker",
    "looks_like_variant",
]

logger = logging.getLogger(__name__)

VariantPredicate = Callable[[GameHints, IdentityFacts, IdentityFacts], bool]


def master_matches(hints: GameHints, variant: IdentityFacts, base: IdentityFacts) -> bool:
    """The variant ships its own main master file (Nehrim.esm)."""
    if variant.master == base.master:
        return False
    return hints.master == variant.master


def name_mentions_variant(hints: GameHints, variant: IdentityFacts, base: IdentityFacts) -> bool:
    return hints.name is not None and variant.token in hints.name.lower()


def folder_mentions_variant(hints: GameHints, variant: IdentityFacts, base: IdentityFacts) -> bool:
    return hints.folder is not None and variant.token in hints.folder.lower()


def local_folder_matches(hints: GameHints, variant: IdentityFacts, base: IdentityFacts) -> bool:
    """Enderal and Enderal SE keep their INIs in their own local folders."""
    if not variant.local_folder or variant.local_folder == base.local_folder:
        return False
    return hints.effective_local_folder == variant.local_folder


def not_base_game_instance(hints: GameHints, variant: IdentityFacts, base: IdentityFacts) -> bool:
    # LOOT 0.18.1 to 0.19.0 wrote isBaseGameInstance = false for every variant.
    return hints.is_base_game_instance is False


DEFAULT_PREDICATES: Tuple[VariantPredicate, ...] = (
    master_matches,
    name_mentions_variant,
    folder_mentions_variant,
    local_folder_matches,
    not_base_game_instance,
)


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def install_path_marker(hints: GameHints, variant: IdentityFacts) -> Optional[bool]:
    """
    Decisive on-disk check.

    Returns None when the install path is unset, empty or missing, otherwise
    whether the variant's marker file exists inside it.
    """
    if not hints.install_path or not variant.marker_file:
        return None
    install_path = Path(hints.install_path)
    if not _exists(install_path):
        return None
    found = _exists(install_path / variant.marker_file)
    logger.debug("Checked %s for %s: %s", install_path, variant.marker_file, found)
    return found


def looks_like_variant(
    hints: GameHints,
    variant: IdentityFacts,
    base: IdentityFacts,
    predicates: Tuple[VariantPredicate, ...] = DEFAULT_PREDICATES,
) -> bool:
    """The on-disk marker check if it applies, else an OR over predicates."""
    decided = install_path_marker(hints, variant)
    if decided is not None:
        return decided
    return any(predicate(hints, variant, base) for predicate in predicates)

"""
Unit tests for the Identity Facts Table.

Covers:
  • facts() totality and determinism
  • GameId → GameType grouping
  • default masterlist URLs and old-default URL table
  • game_id_from_name
"""

import pytest

from loot_settings.exceptions import UnrecognizedGameType
from loot_settings.facts import (
    DEFAULT_MASTERLIST_BRANCH,
    IDENTITY_FACTS,
    OFFICIAL_MASTERLIST_REPOSITORIES,
    OLD_DEFAULT_BRANCHES,
    GameId,
    GameType,
    default_masterlist_url,
    facts,
    game_id_from_name,
    game_type,
    master_filename,
    minimum_header_version,
    old_default_masterlist_urls,
    plugins_folder_name,
)


# ── facts() ───────────────────────────────────────────────────────────────────

class TestFactsLookup:
    @pytest.mark.parametrize("game_id", list(GameId))
    def test_every_game_id_has_facts(self, game_id):
        assert facts(game_id) is IDENTITY_FACTS[game_id]

    @pytest.mark.parametrize("game_id", list(GameId))
    def test_lookup_is_deterministic(self, game_id):
        assert facts(game_id) == facts(game_id)

    def test_accepts_game_id_value_string(self):
        assert facts("nehrim").master == "Nehrim.esm"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            IDENTITY_FACTS[GameId.TES4] = IDENTITY_FACTS[GameId.TES5]  # type: ignore[index]

    def test_facts_are_frozen(self):
        with pytest.raises(Exception):
            facts(GameId.TES4).master = "Other.esm"  # type: ignore[misc]


class TestGameTypes:
    @pytest.mark.parametrize("variant, base", [
        (GameId.NEHRIM, GameId.TES4),
        (GameId.ENDERAL, GameId.TES5),
        (GameId.ENDERALSE, GameId.TES5SE),
    ])
    def test_variants_share_base_game_type(self, variant, base):
        assert game_type(variant) == game_type(base)

    @pytest.mark.parametrize("variant, base", [
        (GameId.NEHRIM, GameId.TES4),
        (GameId.ENDERAL, GameId.TES5),
        (GameId.ENDERALSE, GameId.TES5SE),
    ])
    def test_variants_share_base_header_version(self, variant, base):
        assert minimum_header_version(variant) == minimum_header_version(base)

    def test_nehrim_uses_oblivion_header_version(self):
        assert minimum_header_version(GameId.NEHRIM) == 0.8

    def test_vr_games_have_their_own_types(self):
        assert game_type(GameId.TES5VR) == GameType.TES5VR
        assert game_type(GameId.FO4VR) == GameType.FO4VR

    def test_every_game_type_is_used(self):
        used = {f.game_type for f in IDENTITY_FACTS.values()}
        assert used == set(GameType)

    def test_nehrim_has_its_own_master(self):
        assert master_filename(GameId.NEHRIM) == "Nehrim.esm"
        assert master_filename(GameId.ENDERAL) == master_filename(GameId.TES5)

    def test_morrowind_plugins_folder(self):
        assert plugins_folder_name(GameId.TES3) == "Data Files"
        assert plugins_folder_name(GameId.FO4) == "Data"


# ── Masterlist URLs ───────────────────────────────────────────────────────────

class TestMasterlistUrls:
    def test_default_url_for_repository_name(self):
        assert default_masterlist_url("skyrim") == (
            f"https://raw.githubusercontent.com/loot/skyrim/{DEFAULT_MASTERLIST_BRANCH}/masterlist.yaml"
        )

    def test_default_url_for_game_id_uses_its_repository(self):
        assert default_masterlist_url(GameId.ENDERALSE) == default_masterlist_url("enderal")
        assert default_masterlist_url(GameId.NEHRIM) == default_masterlist_url("oblivion")

    def test_current_branch_is_not_an_old_default(self):
        assert DEFAULT_MASTERLIST_BRANCH not in OLD_DEFAULT_BRANCHES

    def test_old_default_urls_cover_cross_product(self):
        urls = old_default_masterlist_urls()
        assert len(urls) == len(OFFICIAL_MASTERLIST_REPOSITORIES) * len(OLD_DEFAULT_BRANCHES)
        assert urls["https://raw.githubusercontent.com/loot/skyrim/v0.14/masterlist.yaml"] == "skyrim"


# ── game_id_from_name ─────────────────────────────────────────────────────────

class TestGameIdFromName:
    @pytest.mark.parametrize("name, expected", [
        ("Oblivion", GameId.TES4),
        ("skyrimse", GameId.TES5SE),
        ("EnderalSE", GameId.ENDERALSE),
        ("fallout4vr", GameId.FO4VR),
        ("Starfield", GameId.STARFIELD),
    ])
    def test_known_names(self, name, expected):
        assert game_id_from_name(name) == expected

    def test_unknown_name_raises(self):
        with pytest.raises(UnrecognizedGameType):
            game_id_from_name("daggerfall")

"""
Unit tests for settings.toml reading, LootPaths and SettingsWorker.

settings.toml files are written to tmp_path; LOOT_APP_DATA is pointed at
tmp_path so nothing touches the real user folders.
"""

import logging
import threading

import pytest

from loot_settings.exceptions import (
    ConflictingFields,
    FileAccessError,
    SettingsFileError,
    UnrecognizedGameType,
)
from loot_settings.facts import GameId, default_masterlist_url
from loot_settings.loader import (
    DEFAULT_LANGUAGE,
    GameSettings,
    LootPaths,
    SettingsWorker,
    loot_app_data,
    read_settings_file,
    settings_language,
)
from loot_settings.logging_config import Severity, logging_diagnostics, setup_logging

SETTINGS_TOML = """\
language = "de"

[[games]]
gameId = "Oblivion"
type = "Oblivion"
folder = "Oblivion"
name = "TES IV: Oblivion"
repo = "https://github.com/loot/oblivion.git"
branch = "v0.14"

[[games]]
gameId = "SkyrimSE"
type = "SkyrimSE"
folder = "SkyrimSE"
masterlistSource = "https://raw.githubusercontent.com/loot/skyrimse/v0.18/masterlist.yaml"
path = "C:/Games/Skyrim Special Edition"
"""


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "settings.toml"
    path.write_text(SETTINGS_TOML, encoding="utf-8")
    return path


@pytest.fixture
def paths(tmp_path):
    return LootPaths(root=tmp_path)


@pytest.fixture
def worker(paths):
    return SettingsWorker(paths=paths, diagnostics=lambda s, m: None)


# ── settings.toml ─────────────────────────────────────────────────────────────

class TestReadSettingsFile:
    def test_reads_games_array(self, settings_file):
        table = read_settings_file(settings_file)

        assert isinstance(table["games"], list)
        assert table["games"][0]["gameId"] == "Oblivion"
        assert type(table["games"][0]) is dict

    def test_missing_file(self, tmp_path):
        with pytest.raises(SettingsFileError):
            read_settings_file(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("games = [[[", encoding="utf-8")
        with pytest.raises(SettingsFileError):
            read_settings_file(path)

    def test_language(self, settings_file):
        assert settings_language(read_settings_file(settings_file)) == "de"
        assert settings_language({}) == DEFAULT_LANGUAGE


# ── LootPaths ─────────────────────────────────────────────────────────────────

class TestLootPaths:
    def test_layout(self, paths, tmp_path):
        settings = GameSettings.from_facts(GameId.TES4)

        assert paths.settings_path == tmp_path / "settings.toml"
        assert paths.masterlist_path(settings) == tmp_path / "games" / "Oblivion" / "masterlist.yaml"
        assert paths.userlist_path(settings) == tmp_path / "games" / "Oblivion" / "userlist.yaml"

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOOT_APP_DATA", str(tmp_path / "loot"))
        assert loot_app_data() == tmp_path / "loot"

    def test_skyrimse_legacy_folder_first(self, paths, tmp_path):
        settings = GameSettings.from_facts(GameId.TES5SE)
        assert paths.legacy_game_folders(settings) == [
            tmp_path / "SkyrimSE",
            tmp_path / "Skyrim Special Edition",
        ]

    def test_prepare_moves_legacy_folder(self, paths, tmp_path):
        legacy = tmp_path / "SkyrimSE"
        legacy.mkdir()
        (legacy / "userlist.yaml").write_text("plugins: []\n")
        messages = []

        target = paths.prepare_game_folder(
            GameSettings.from_facts(GameId.TES5SE), lambda s, m: messages.append(s)
        )

        assert (target / "userlist.yaml").is_file()
        assert not legacy.exists()
        assert messages == [Severity.INFO]

    def test_prepare_creates_missing_folder(self, paths):
        target = paths.prepare_game_folder(GameSettings.from_facts(GameId.FO3))
        assert target.is_dir()

    def test_prepare_rejects_file_in_the_way(self, paths, tmp_path):
        (tmp_path / "games").mkdir()
        (tmp_path / "games" / "Fallout3").write_text("")
        with pytest.raises(FileAccessError):
            paths.prepare_game_folder(GameSettings.from_facts(GameId.FO3))


# ── SettingsWorker ────────────────────────────────────────────────────────────

class TestSettingsWorker:
    def test_defaults_to_skyrim(self, worker):
        assert worker.game_id == GameId.TES5

    def test_unknown_game_name(self, worker):
        with pytest.raises(UnrecognizedGameType):
            worker.set_game("arena")

    def test_missing_settings_file_uses_defaults(self, worker):
        worker.set_game("fallout3")

        loaded = worker.load()

        assert loaded.settings == GameSettings.from_facts(GameId.FO3)
        assert loaded.language == DEFAULT_LANGUAGE

    def test_loads_matching_record(self, worker, settings_file):
        worker.set_game("skyrimse")

        loaded = worker.load(settings_file)

        assert loaded.settings.game_id == GameId.TES5SE
        assert loaded.settings.folder_name == "Skyrim Special Edition"
        assert loaded.settings.masterlist_source == default_masterlist_url("skyrimse")
        assert loaded.language == "de"
        assert loaded.masterlist_path.parent.name == "Skyrim Special Edition"

    def test_explicit_game_path_replaces_stored_one(self, worker, settings_file, tmp_path):
        worker.set_game("skyrimse")
        worker.set_game_path(tmp_path / "sse")

        assert worker.load(settings_file).settings.game_path == tmp_path / "sse"

    def test_explicit_language_wins(self, worker, settings_file):
        worker.set_game("oblivion")
        worker.set_language("fr")
        assert worker.load(settings_file).language == "fr"

    def test_conflicting_fields_propagate(self, worker, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text(
            '[[games]]\ngameId = "Fallout3"\nfolder = "Fallout3"\n'
            'local_path = "/a"\nlocal_folder = "b"\n',
            encoding="utf-8",
        )
        worker.set_game("fallout3")

        with pytest.raises(ConflictingFields):
            worker.load()

    def test_load_is_reentrant(self, worker, settings_file):
        worker.set_game("oblivion")
        results = []

        def run():
            results.append(worker.load(settings_file).settings.game_id)

        threads = [threading.Thread(target=run) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == [GameId.TES4] * 4


# ── Logging ───────────────────────────────────────────────────────────────────

class TestLogging:
    def test_diagnostics_forward_to_logger(self, caplog):
        logger = logging.getLogger("loot_settings.test")
        emit = logging_diagnostics(logger)

        with caplog.at_level(logging.INFO, logger="loot_settings.test"):
            emit(Severity.WARNING, "branch mismatch")
            emit(Severity.TRACE, "hidden")

        assert [r.levelno for r in caplog.records] == [logging.WARNING]

    def test_setup_logging_levels(self):
        assert setup_logging(debug=True).level == logging.DEBUG
        assert setup_logging().level == logging.INFO

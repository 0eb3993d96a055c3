"""Tests for config.py: GreenGrovesConfig, TOML loading, env and CLI overrides."""

from pathlib import Path

import pytest
from greengroves.config import GreenGrovesConfig, load_config, merge_cli_overrides
from pydantic import ValidationError

ENV_VARS = (
    "GREENGROVES_STORAGE_DIR",
    "GREENGROVES_KEY_PREFIX",
    "GREENGROVES_ID_STRATEGY",
    "GREENGROVES_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path: Path):
    """Isolate tests from the caller's environment and working directory."""
    for key in ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("greengroves.config.GLOBAL_CONFIG", tmp_path / "no-such-config.toml")


class TestDefaults:
    def test_storage(self):
        cfg = GreenGrovesConfig()
        assert cfg.storage.directory == "./.greengroves"
        assert cfg.storage.key_prefix == "greengroves_"

    def test_ids(self):
        assert GreenGrovesConfig().ids.strategy == "timestamp"

    def test_logging(self):
        assert GreenGrovesConfig().logging.level == "WARNING"

    def test_level_normalised(self):
        cfg = GreenGrovesConfig.model_validate({"logging": {"level": "debug"}})
        assert cfg.logging.level == "DEBUG"

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValidationError):
            GreenGrovesConfig.model_validate({"ids": {"strategy": "snowflake"}})


class TestLoadConfig:
    def test_no_file_gives_defaults(self):
        assert load_config() == GreenGrovesConfig()

    def test_explicit_path(self, tmp_path: Path):
        path = tmp_path / "custom.toml"
        path.write_text(
            '[storage]\ndirectory = "/srv/content"\n\n[ids]\nstrategy = "uuid"\n',
            encoding="utf-8",
        )
        cfg = load_config(path)
        assert cfg.storage.directory == "/srv/content"
        assert cfg.ids.strategy == "uuid"

    def test_missing_explicit_path(self, tmp_path: Path):
        assert load_config(tmp_path / "missing.toml") == GreenGrovesConfig()

    def test_cwd_file(self, tmp_path: Path):
        (tmp_path / ".greengroves.toml").write_text(
            '[storage]\nkey_prefix = "site_"\n', encoding="utf-8"
        )
        assert load_config().storage.key_prefix == "site_"

    def test_global_file(self, tmp_path: Path, monkeypatch):
        global_config = tmp_path / "global.toml"
        global_config.write_text('[ids]\nstrategy = "counter"\n', encoding="utf-8")
        monkeypatch.setattr("greengroves.config.GLOBAL_CONFIG", global_config)

        assert load_config().ids.strategy == "counter"

    def test_invalid_toml_falls_back(self, tmp_path: Path):
        path = tmp_path / "broken.toml"
        path.write_text("[storage\ndirectory = ", encoding="utf-8")
        assert load_config(path) == GreenGrovesConfig()

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "custom.toml"
        path.write_text('[storage]\ndirectory = "/from/file"\n', encoding="utf-8")
        monkeypatch.setenv("GREENGROVES_STORAGE_DIR", "/from/env")
        monkeypatch.setenv("GREENGROVES_LOG_LEVEL", "info")

        cfg = load_config(path)

        assert cfg.storage.directory == "/from/env"
        assert cfg.logging.level == "INFO"


class TestMergeCliOverrides:
    def test_applies_set_values(self):
        cfg = merge_cli_overrides(GreenGrovesConfig(), storage_dir="/tmp/x", id_strategy="counter")
        assert cfg.storage.directory == "/tmp/x"
        assert cfg.ids.strategy == "counter"

    def test_ignores_none_and_unknown(self):
        cfg = merge_cli_overrides(GreenGrovesConfig(), storage_dir=None, colour="green")
        assert cfg == GreenGrovesConfig()


class TestOpenCatalog:
    def test_file_backed(self, tmp_path: Path):
        cfg = merge_cli_overrides(
            GreenGrovesConfig(), storage_dir=str(tmp_path / "data"), id_strategy="counter"
        )
        catalog = cfg.open_catalog()

        catalog["book"].update("1", {"title": "Renamed"})

        assert (tmp_path / "data" / "greengroves_book.json").exists()

    def test_uses_id_strategy(self, tmp_path: Path):
        cfg = merge_cli_overrides(
            GreenGrovesConfig(), storage_dir=str(tmp_path), id_strategy="counter"
        )
        repo = cfg.open_catalog()["technique"]
        item = repo.create(repo.get_by_id("1").model_dump(exclude={"id"}))
        assert item.id == "2"

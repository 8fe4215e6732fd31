from __future__ import annotations

import json
import logging

from gear.engine.logger import DEFAULT_CHANNELS, GearLogger, LoggerConfig, init_logger
from gear.engine.settings import DEFAULT_CONTENT_ROOT, Settings
from gear.items.equipment import Equipment
from gear.sheets.content import SHEET_NAMES, ContentManager


def _write_content(root):
    root.mkdir(parents=True, exist_ok=True)
    (root / "BaseParam.json").write_text(
        json.dumps(
            [
                {
                    "key": 6,
                    "Name": "Piety",
                    "EquipSlotCategoryPct": [0, 0, 0, 50],
                    "MeldParam": [0, 0, 0, 0, 0, 0, 0, 100],
                }
            ]
        )
    )
    (root / "EquipSlotCategory.json").write_text(json.dumps({"key": 3, "Name": "Head"}))
    (root / "ItemLevel.json").write_text(json.dumps([{"key": 500, "Maximum[6]": 100}]))
    (root / "Item.json").write_text(
        json.dumps(
            [
                {
                    "key": 100,
                    "Name": "Test Circlet",
                    "EquipSlotCategory": 3,
                    "Level{Item}": 500,
                    "BaseParamModifier": 7,
                    "BaseParam": [6, 0, 0, 0, 0, 0],
                    "BaseParamValue": [20, 0, 0, 0, 0, 0],
                }
            ]
        )
    )
    (root / "ClassJob.json").write_text("{not json")


def _quiet_logger():
    channels = {name: False for name in DEFAULT_CHANNELS}
    return GearLogger(LoggerConfig(level=logging.CRITICAL, channels=channels), configure_root=False)


def test_content_manager_loads_every_sheet(tmp_path):
    _write_content(tmp_path)
    content = ContentManager(tmp_path, _quiet_logger())
    collection = content.load()

    assert set(collection.sheet_names()) == set(SHEET_NAMES)
    assert len(collection.get_sheet("ClassJob")) == 0
    assert len(collection.get_sheet("ItemSeries")) == 0
    circlet = content.item(100)
    assert isinstance(circlet, Equipment)
    piety = collection.get_sheet("BaseParam")[6]
    assert circlet.get_materia_meld_cap(piety, False) == 30


def test_content_manager_warns_on_malformed_files(tmp_path, caplog):
    _write_content(tmp_path)
    logger = GearLogger(LoggerConfig(level=logging.INFO, channels={"sheets": True}), configure_root=False)
    with caplog.at_level(logging.INFO, logger="gear.sheets"):
        ContentManager(tmp_path, logger).load()
    messages = [record.getMessage() for record in caplog.records]
    assert any("Skipping ClassJob.json" in message for message in messages)
    assert any("Loaded 1 rows from Item.json" in message for message in messages)


def test_content_manager_without_directory_is_empty(tmp_path):
    collection = ContentManager(tmp_path / "missing").load()
    assert all(len(collection.get_sheet(name)) == 0 for name in SHEET_NAMES)


def test_settings_resolve_content_root_and_logging(tmp_path):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(
        json.dumps({"contentRoot": "data", "logLevel": "debug", "logChannels": {"meld": True}})
    )
    settings = Settings.from_file(settings_path)

    assert settings.content_root == tmp_path / "data"
    assert settings.logger.level == logging.DEBUG
    assert settings.logger.channels["meld"] is True
    assert settings.logger.channels["sheets"] is DEFAULT_CHANNELS["sheets"]

    _write_content(tmp_path / "data")
    content = ContentManager.from_settings(settings)
    content.load()
    assert content.item(100).name == "Test Circlet"


def test_settings_fall_back_to_defaults(tmp_path):
    assert Settings.from_file(tmp_path / "absent.json") == Settings()
    broken = tmp_path / "settings.json"
    broken.write_text("[")
    assert Settings.from_file(broken).content_root == Settings().content_root


def test_logger_config_from_settings(tmp_path):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"logLevel": "warning", "logChannels": {"parameters": True}}))
    config = LoggerConfig.from_settings(settings_path)
    assert config.level == logging.WARNING
    assert config.channels["parameters"] is True

    missing = LoggerConfig.from_settings(tmp_path / "nope.json")
    assert missing.level == logging.INFO
    assert missing.channels == DEFAULT_CHANNELS


def test_unknown_channels_start_disabled(tmp_path):
    logger = init_logger(tmp_path / "settings.json")
    assert logger.channel("sheets").enabled
    assert not logger.channel("telemetry").enabled
    logger.set_enabled("telemetry", True)
    assert logger.channel("telemetry").enabled
    assert "telemetry" in logger.channels()


def test_settings_ignore_content_root_that_is_not_a_path(tmp_path):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"contentRoot": None, "logLevel": "debug"}))
    settings = Settings.from_file(settings_path)
    assert settings.content_root == tmp_path / DEFAULT_CONTENT_ROOT
    assert settings.logger.level == logging.DEBUG

    settings_path.write_text(json.dumps({"contentRoot": 42}))
    assert Settings.from_file(settings_path).content_root == tmp_path / DEFAULT_CONTENT_ROOT


def test_content_manager_loads_on_first_item_lookup(tmp_path):
    _write_content(tmp_path)
    content = ContentManager(tmp_path, _quiet_logger())
    assert content.collection is None
    assert content.item(100).name == "Test Circlet"
    assert content.collection is not None
    assert content.items is content.collection.get_sheet("Item")

import json
import logging

import pytest
from config.settings import DEFAULT_SETTINGS, SETTINGS_FILE_PATH, get_log_level, load_settings

@pytest.fixture
def settings_file(tmp_path):
    return tmp_path / "settings.json"

def test_load_bundled_settings():
    settings = load_settings(SETTINGS_FILE_PATH)
    assert set(settings) == set(DEFAULT_SETTINGS)
    assert settings["log_file"] == "ip_validator.log"

def test_missing_file_returns_defaults(settings_file):
    assert load_settings(str(settings_file)) == DEFAULT_SETTINGS

@pytest.mark.parametrize("content", [
    "{not json",
    "",
    "[1, 2, 3]",
])
def test_unusable_file_returns_defaults(settings_file, content):
    settings_file.write_text(content)
    assert load_settings(str(settings_file)) == DEFAULT_SETTINGS

def test_overrides_are_merged(settings_file):
    settings_file.write_text(json.dumps({"show_guidance": False, "log_level": "DEBUG"}))
    settings = load_settings(str(settings_file))
    assert settings["show_guidance"] is False
    assert settings["log_level"] == "DEBUG"
    assert settings["use_color"] is DEFAULT_SETTINGS["use_color"]

def test_unknown_keys_are_ignored(settings_file, caplog):
    settings_file.write_text(json.dumps({"colour": False}))
    with caplog.at_level(logging.WARNING):
        settings = load_settings(str(settings_file))
    assert "colour" not in settings
    assert "Ignoring unknown setting 'colour'" in caplog.text

def test_defaults_are_not_mutated(settings_file):
    settings_file.write_text(json.dumps({"use_color": False}))
    load_settings(str(settings_file))
    assert DEFAULT_SETTINGS["use_color"] is True

@pytest.mark.parametrize("name, expected", [
    ("DEBUG", logging.DEBUG),
    ("info", logging.INFO),
    ("Warning", logging.WARNING),
    ("ERROR", logging.ERROR),
    ("LOUD", logging.INFO),
])
def test_get_log_level(name, expected):
    assert get_log_level({"log_level": name}) == expected

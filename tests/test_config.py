import json

import pytest

from passforge.charsets import CharacterClass
from passforge.config import (
    DEFAULTS,
    coerce_value,
    config_path,
    config_to_generator,
    load_config,
    reset_config,
    save_config,
)


def test_defaults_when_missing(home):
    assert load_config() == DEFAULTS


def test_saved_values_merge_over_defaults(home):
    save_config({"length": 24, "bogus": 1})
    cfg = load_config()
    assert cfg["length"] == 24
    assert cfg["upper"] is True
    assert "bogus" not in cfg


def test_corrupt_file_falls_back(home):
    with open(config_path(), "w", encoding="utf-8") as f:
        f.write("{oops")
    assert load_config() == DEFAULTS


def test_reset(home):
    save_config(dict(DEFAULTS, length=40, special=False))
    reset_config()
    with open(config_path(), encoding="utf-8") as f:
        assert json.load(f) == DEFAULTS


def test_coerce_value():
    assert coerce_value("length", "20") == 20
    assert coerce_value("exclude_ambiguous", "yes") is True
    assert coerce_value("upper", "off") is False
    with pytest.raises(ValueError):
        coerce_value("upper", "maybe")
    with pytest.raises(KeyError):
        coerce_value("colour", "red")


def test_config_to_generator():
    cfg = dict(DEFAULTS, length=20, digits=False, exclude_ambiguous=True)
    gen = config_to_generator(cfg)
    assert gen.length == 20
    assert gen.exclude_ambiguous is True
    assert gen.enabled_classes == {CharacterClass.UPPERCASE, CharacterClass.LOWERCASE, CharacterClass.SPECIAL}


@pytest.mark.parametrize("key,value", [
    ("history_size", "abc"),
    ("history_size", 0),
    ("copies", -2),
    ("length", "16"),
    ("upper", "false"),
    ("history_enabled", 1),
])
def test_badly_typed_values_fall_back(home, key, value):
    save_config({key: value, "length": 20} if key != "length" else {key: value})
    cfg = load_config()
    assert cfg[key] == DEFAULTS[key]
    if key != "length":
        assert cfg["length"] == 20

# passforge/config.py
"""
Simple settings persistence for passforge.
Settings saved as JSON in <data dir>/config.json, see storage.data_dir().
"""

import os
import json
import logging
from typing import Dict, Any, Optional

from .generator import GeneratorConfig
from .storage import atomic_write_bytes, data_dir, dump_json_bytes

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "upper": True,
    "lower": True,
    "digits": True,
    "special": True,
    "exclude_ambiguous": False,
    "copies": 1,
    "history_size": 10,
    "history_enabled": True,
}

def config_path() -> str:
    return os.path.join(data_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults, unknown keys and badly typed values are dropped
    out = DEFAULTS.copy()
    for k, v in data.items():
        if k not in DEFAULTS:
            continue
        if not _valid_value(k, v):
            logger.warning("ignoring setting %s=%r in %s", k, v, p)
            continue
        out[k] = v
    return out

def _valid_value(key: str, value: Any) -> bool:
    default = DEFAULTS[key]
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    # counts must be positive, length is checked by the generator
    return key == "length" or value >= 1

def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> None:
    atomic_write_bytes(path or config_path(), dump_json_bytes(cfg))

def reset_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Write the default settings back and return them."""
    cfg = DEFAULTS.copy()
    save_config(cfg, path)
    return cfg

def coerce_value(key: str, raw: str) -> Any:
    """Convert a string from the command line to the type of the default."""
    if key not in DEFAULTS:
        raise KeyError(key)
    default = DEFAULTS[key]
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"{key} expects true/false, got {raw!r}")
    return int(raw)

def config_to_generator(cfg: Dict[str, Any]) -> GeneratorConfig:
    return GeneratorConfig.from_flags(
        length=cfg["length"],
        upper=cfg["upper"],
        lower=cfg["lower"],
        digits=cfg["digits"],
        special=cfg["special"],
        exclude_ambiguous=cfg["exclude_ambiguous"],
    )

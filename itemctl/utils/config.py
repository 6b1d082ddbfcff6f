import copy
import os
from pathlib import Path
from typing import Any

import tomli
import tomli_w


def get_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        base = Path(xdg)
    else:
        base = Path.home() / ".config"
    return base / "itemctl"


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


LOG_LEVELS = ["debug", "info", "warning", "error"]

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "warning",
    },
}


def load_config() -> dict[str, Any]:
    config_path = get_config_path()
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path.exists():
        with open(config_path, "rb") as f:
            user_config = tomli.load(f)
            _merge_config(config, user_config)

    return config


def save_config(config: dict[str, Any]) -> None:
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)


def _merge_config(base: dict, override: dict) -> None:
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_config(base[key], value)
        else:
            base[key] = value


def set_log_level_default(level: str, config: dict) -> None:
    config.setdefault("logging", {})["level"] = level
    save_config(config)

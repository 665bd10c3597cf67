import os
from pathlib import Path

import yaml

from best_effort_parser.core.exceptions import ConfigError

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "best_effort_parser.yml"
CONFIG_ENV_VAR = "BEST_EFFORT_PARSER_CONFIG"


class BEPConfig:
    def __init__(self, data):
        self.logging = data.get("logging") or {}
        self.date = data.get("date") or {}
        self.output = data.get("output") or {}
        self.debug = bool(data.get("debug", False))
        self.source = data.get("_source")


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path=None) -> 'BEPConfig':
    explicit = path is not None or bool(os.environ.get(CONFIG_ENV_VAR))
    path = Path(path) if path is not None else config_path()

    # An installed wheel has no config/ directory next to it; fall back to defaults.
    if not path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return BEPConfig({})

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at the top level")

    data["_source"] = str(path)
    return BEPConfig(data)

_config_cache = None

def get_config() -> 'BEPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None

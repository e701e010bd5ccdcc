"""Configuration management for taskpal."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TASKPAL_HOME = Path(os.environ.get("TASKPAL_HOME", Path.home() / ".taskpal"))
CONFIG_FILE = TASKPAL_HOME / "taskpal.conf"
DATA_DIR = TASKPAL_HOME / "data"

_TRUE = ("true", "yes", "on", "1")
_FALSE = ("false", "no", "off", "0")


@dataclass
class Config:
    """taskpal configuration."""

    data_file: str = ""
    # Persist after every add/done/delete instead of only on exit
    eager_save: bool = False

    @property
    def data_path(self) -> Path:
        """Resolved task file location."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DATA_DIR / "tasks.txt"


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Ignoring invalid boolean for {key.upper()}: {value!r}")
    return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from taskpal.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Quoted values keep '#'; unquoted values drop inline comments
        if value[:1] in ('"', "'"):
            end_quote = value.find(value[0], 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "data_file":
                config.data_file = value
            case "eager_save":
                config.eager_save = _parse_bool(key, value, config.eager_save)
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config

"""Configuration management for vocabsync."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .adapters.maimemo_api import API_BASE

logger = logging.getLogger(__name__)

VOCABSYNC_HOME = Path(os.environ.get("VOCABSYNC_HOME", Path.home() / "vocabsync"))
CONFIG_FILE = VOCABSYNC_HOME / "config" / "vocabsync.conf"


@dataclass
class Config:
    """vocabsync configuration."""

    auth_token: str = ""
    notebook_id: str = ""
    vocabulary_id: str = ""
    api_base: str = API_BASE
    source: str = "vocabsync"
    timeout: float = 30


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from vocabsync.conf file."""
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
        value = _unquote(value.strip())

        match key:
            case "auth_token":
                config.auth_token = value
            case "notebook_id":
                config.notebook_id = value
            case "vocabulary_id":
                config.vocabulary_id = value
            case "api_base":
                config.api_base = value
            case "source":
                config.source = value
            case "timeout":
                try:
                    config.timeout = float(value)
                except ValueError:
                    logger.warning(f"Invalid TIMEOUT value: {value}")
            case _:
                logger.warning(f"Unknown config key: {key}")

    return config

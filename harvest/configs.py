import os
from typing import Any, Optional

import yaml

from harvest import config as env
from harvest.domain.config import CrawlConfig
from harvest.exceptions import ConfigError
from harvest.services.header_parser import parse_headers

PROFILE_KEYS = (
    "seed",
    "max_depth",
    "common_word_limit",
    "follow_offsite",
    "min_length",
    "min_count",
    "user_agent",
    "headers",
    "common_words_path",
)


def load_profile(path: str) -> dict:
    """Load a YAML crawl profile from `path` and return its settings as a dict.

    A profile may contain any of:
      - seed: string
      - max_depth, common_word_limit, min_length, min_count: integer
      - follow_offsite: boolean
      - user_agent, common_words_path: string
      - headers: string or list of 'Name: Value' strings
    Unknown keys are rejected.
    """
    if not os.path.isfile(path):
        raise ConfigError(f"Profile '{path}' not found")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Profile '{path}' could not be read: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Profile '{path}' must be a mapping")
    unknown = sorted(set(data) - set(PROFILE_KEYS))
    if unknown:
        raise ConfigError(f"Profile '{path}' has unknown keys: {', '.join(unknown)}")
    headers = data.get("headers")
    if isinstance(headers, str):
        data["headers"] = [headers]
    return data


def build_config(profile: Optional[dict] = None, **overrides: Any) -> CrawlConfig:
    """Build a CrawlConfig from environment defaults, a profile, then explicit overrides.

    Overrides whose value is None are ignored so unset CLI flags fall through.
    """
    settings: dict[str, Any] = {
        "max_depth": env.DEFAULT_DEPTH,
        "common_word_limit": env.COMMON_WORD_LIMIT,
        "follow_offsite": env.FOLLOW_OFFSITE,
        "min_length": env.MIN_LENGTH,
        "min_count": None,
        "user_agent": None,
        "headers": [],
        "common_words_path": env.COMMON_WORDS_PATH,
    }
    for source in (profile or {}, overrides):
        for key, value in source.items():
            if key == "seed" or value is None:
                continue
            if key not in settings:
                raise ConfigError(f"Unknown setting {key!r}")
            settings[key] = value

    headers = settings.pop("headers")
    if isinstance(headers, str):
        headers = [headers]
    for key in ("max_depth", "common_word_limit", "min_length", "min_count"):
        settings[key] = _as_int(key, settings[key])
    if not isinstance(settings["follow_offsite"], bool):
        raise ConfigError(f"follow_offsite must be a boolean, got {settings['follow_offsite']!r}")
    return CrawlConfig(headers=parse_headers(headers), **settings)


def _as_int(key: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from e

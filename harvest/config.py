import os
import logging
from pathlib import Path
from typing import Optional

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_optional_str_env(name: str) -> Optional[str]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except ValueError:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_optional_int_env(name: str) -> Optional[int]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	try:
		return int(raw)
	except ValueError:
		logging.exception("Invalid %s: %r", name, raw)
		return None


def get_bool_env(name: str, default: bool) -> bool:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	value = raw.strip().lower()
	if value in _TRUE_VALUES:
		return True
	if value in _FALSE_VALUES:
		return False
	logging.warning("Invalid %s: %r", name, raw)
	return default


USER_AGENT = get_str_env("USER_AGENT", "HARVEST/0.1")
HTTP_TIMEOUT = get_int_env("HARVEST_HTTP_TIMEOUT", 10)
DEFAULT_DEPTH = get_int_env("HARVEST_DEFAULT_DEPTH", 2)
COMMON_WORD_LIMIT = get_int_env("HARVEST_COMMON_WORD_LIMIT", 100)
MIN_LENGTH = get_int_env("HARVEST_MIN_LENGTH", 3)
COMMON_WORDS_PATH = get_str_env("HARVEST_COMMON_WORDS_PATH", "common_words.txt")
FOLLOW_OFFSITE = get_bool_env("HARVEST_FOLLOW_OFFSITE", False)


def log_level() -> str:
	return get_str_env("HARVEST_LOG_LEVEL", "INFO").strip().upper()

"""Settings loaded from environment variables, plus an optional .env file.

One Settings object is built in app.py and handed to whatever needs it; no
secrets are required at import time.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from BackEnd.core.paths import user_data_dir

ENV_PREFIX = "STUDYPLANNER"


def _k(suffix: str) -> str:
	return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
	v = os.getenv(name)
	return default if v is None else v.strip()


def _env_float(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return default
	try:
		return float(raw)
	except ValueError:
		return default


def _env_level(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return default
	level = logging.getLevelName(raw.strip().upper())
	return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
	supabase_url: str
	supabase_anon_key: str
	http_timeout: float
	log_level: int
	data_dir: Path

	@property
	def backend_configured(self) -> bool:
		return bool(self.supabase_url and self.supabase_anon_key)


def load_settings(dotenv: bool = True) -> Settings:
	"""Build Settings from the process environment."""
	if dotenv:
		load_dotenv(override=False)
	return Settings(
		supabase_url=_env("SUPABASE_URL").rstrip("/"),
		supabase_anon_key=_env("SUPABASE_ANON_KEY"),
		http_timeout=_env_float(_k("TIMEOUT"), 10.0),
		log_level=_env_level(_k("LOG_LEVEL"), logging.INFO),
		data_dir=user_data_dir(),
	)

import logging

import pytest

from BackEnd.core.config import load_settings
from BackEnd.core.paths import log_path, session_path, settings_path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
	for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "STUDYPLANNER_TIMEOUT", "STUDYPLANNER_LOG_LEVEL"):
		monkeypatch.delenv(name, raising=False)
	monkeypatch.setenv("STUDYPLANNER_DATA_DIR", str(tmp_path / "data"))


def test_defaults(tmp_path):
	settings = load_settings(dotenv=False)

	assert settings.supabase_url == ""
	assert settings.backend_configured is False
	assert settings.http_timeout == 10.0
	assert settings.log_level == logging.INFO
	assert settings.data_dir == tmp_path / "data"
	assert settings.data_dir.is_dir()


def test_from_environment(monkeypatch):
	monkeypatch.setenv("SUPABASE_URL", "https://proj.example.co/")
	monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
	monkeypatch.setenv("STUDYPLANNER_TIMEOUT", "2.5")
	monkeypatch.setenv("STUDYPLANNER_LOG_LEVEL", "debug")

	settings = load_settings(dotenv=False)

	assert settings.supabase_url == "https://proj.example.co"
	assert settings.backend_configured is True
	assert settings.http_timeout == 2.5
	assert settings.log_level == logging.DEBUG


def test_bad_values_fall_back(monkeypatch):
	monkeypatch.setenv("STUDYPLANNER_TIMEOUT", "soon")
	monkeypatch.setenv("STUDYPLANNER_LOG_LEVEL", "chatty")

	settings = load_settings(dotenv=False)

	assert settings.http_timeout == 10.0
	assert settings.log_level == logging.INFO


def test_files_live_in_data_dir(tmp_path):
	settings = load_settings(dotenv=False)

	assert session_path(settings.data_dir) == tmp_path / "data" / "session.json"
	assert settings_path(settings.data_dir) == tmp_path / "data" / "settings.json"
	assert log_path(settings.data_dir) == tmp_path / "data" / "studyplanner.log"

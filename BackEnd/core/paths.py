import os
from pathlib import Path

APP_NAME = "StudyPlanner"

def user_data_dir(app_name=APP_NAME):
	"""Return per-user data dir (Windows/macOS/Linux).

	STUDYPLANNER_DATA_DIR overrides the platform location.
	"""
	override = os.environ.get("STUDYPLANNER_DATA_DIR", "").strip()
	if override:
		path = Path(override).expanduser()
	else:
		if os.name == "nt":
			base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
		elif os.name == "posix":
			base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
		else:
			base = os.path.expanduser("~")
		path = Path(base) / app_name
	path.mkdir(parents=True, exist_ok=True)
	return path

def session_path(base=None):
	"""Return Path to the stored auth session inside the user data dir."""
	return (base or user_data_dir()) / "session.json"

def settings_path(base=None):
	"""Return Path to settings.json (theme and other preferences)."""
	return (base or user_data_dir()) / "settings.json"

def log_path(base=None):
	return (base or user_data_dir()) / "studyplanner.log"

import json
import logging

from BackEnd.core.paths import settings_path

log = logging.getLogger(__name__)

THEMES = ("light", "dark")


def load_theme(path=None):
	"""Return the saved theme, 'light' when nothing valid is stored."""
	path = path or settings_path()
	if not path.exists():
		return "light"
	try:
		with open(path, 'r', encoding='utf-8') as f:
			theme = json.load(f).get("theme")
	except (OSError, ValueError) as e:
		log.warning("Could not read %s: %s", path, e)
		return "light"
	return theme if theme in THEMES else "light"


def save_theme(theme, path=None):
	if theme not in THEMES:
		raise ValueError(f"Unknown theme: {theme}")
	path = path or settings_path()
	data = {}
	if path.exists():
		try:
			with open(path, 'r', encoding='utf-8') as f:
				data = json.load(f)
		except (OSError, ValueError):
			data = {}
	data["theme"] = theme
	path.parent.mkdir(parents=True, exist_ok=True)
	with open(path, 'w', encoding='utf-8') as f:
		json.dump(data, f, indent=2)

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
	"""Keep our own records; let third-party libraries through only at WARNING+."""

	def filter(self, record):
		if record.name.startswith(("BackEnd", "FrontEnd", "__main__", "app")):
			return True
		return record.levelno >= logging.WARNING


def setup_logging(log_file, console_level=logging.INFO, file_level=logging.DEBUG):
	"""Configure console + file logging. Call once, before the first log line."""
	log_file = Path(log_file)
	log_file.parent.mkdir(parents=True, exist_ok=True)

	root = logging.getLogger()
	root.setLevel(logging.DEBUG)
	for h in list(root.handlers):
		root.removeHandler(h)

	fmt = logging.Formatter(
		fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
		datefmt="%Y-%m-%d %H:%M:%S",
	)

	ch = logging.StreamHandler(sys.stderr)
	ch.setLevel(console_level)
	ch.setFormatter(fmt)
	ch.addFilter(_ConsoleNoiseFilter())
	root.addHandler(ch)

	fh = logging.FileHandler(str(log_file), encoding="utf-8")
	fh.setLevel(file_level)
	fh.setFormatter(fmt)
	root.addHandler(fh)

	# httpx logs every request at INFO
	logging.getLogger("httpx").setLevel(logging.WARNING)
	logging.getLogger("matplotlib").setLevel(logging.WARNING)
	logging.captureWarnings(True)

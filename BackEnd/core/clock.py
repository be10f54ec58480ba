from datetime import datetime, timezone, timedelta

def utc_now():
	"""Return the current time as an aware UTC datetime."""
	return datetime.now(timezone.utc)

def parse_iso(value):
	"""Parse an ISO8601 timestamp from the backend into an aware datetime.

	Accepts a trailing 'Z', any fractional-second precision and naive strings
	(treated as UTC). Returns None for None or an empty string.
	"""
	if value is None or value == "":
		return None
	if isinstance(value, datetime):
		dt = value
	else:
		text = str(value).strip()
		if text.endswith("Z") or text.endswith("z"):
			text = text[:-1] + "+00:00"
		# fromisoformat on older interpreters only takes 3 or 6 fraction digits
		if "." in text:
			head, _, rest = text.partition(".")
			digits = ""
			for ch in rest:
				if not ch.isdigit():
					break
				digits += ch
			suffix = rest[len(digits):]
			text = f"{head}.{(digits + '000000')[:6]}{suffix}"
		dt = datetime.fromisoformat(text)
	if dt.tzinfo is None:
		dt = dt.replace(tzinfo=timezone.utc)
	return dt

def to_iso(dt):
	"""Serialize an aware datetime for the backend, or None."""
	if dt is None:
		return None
	if dt.tzinfo is None:
		dt = dt.replace(tzinfo=timezone.utc)
	return dt.astimezone(timezone.utc).isoformat()

def whole_seconds_between(start, end):
	"""Floor of (end - start) in seconds, never negative."""
	delta = (end - start) // timedelta(seconds=1)
	return max(0, int(delta))

def format_elapsed(seconds: int) -> str:
	"""Format seconds as H:MM:SS from one hour upwards, otherwise M:SS."""
	seconds = max(0, int(seconds))
	h = seconds // 3600
	m = (seconds % 3600) // 60
	s = seconds % 60
	if h > 0:
		return f"{h}:{m:02}:{s:02}"
	return f"{m}:{s:02}"

def format_duration(seconds: int) -> str:
	"""Format seconds for summaries: '1h 2m 5s', '7m 0s' or '45s'."""
	seconds = max(0, int(seconds))
	h = seconds // 3600
	m = (seconds % 3600) // 60
	s = seconds % 60
	if h > 0:
		return f"{h}h {m}m {s}s"
	if m > 0:
		return f"{m}m {s}s"
	return f"{s}s"

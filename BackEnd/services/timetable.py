import itertools
import re

from BackEnd.core.errors import ValidationError
from BackEnd.models.timetable import DAYS, TimetableEntry

_TIME_RE = re.compile(r"^\s*(\d{1,2})(?::(\d{2}))?\s*([AaPp][Mm])?\s*$")


def time_sort_key(text):
	"""Minutes after midnight for '14:30', '2:30 PM', '9 am'; unparseable sorts last."""
	m = _TIME_RE.match(text or "")
	if not m:
		return (1, 0, text or "")
	hour = int(m.group(1))
	minute = int(m.group(2) or 0)
	meridiem = (m.group(3) or "").lower()
	if meridiem == "pm" and hour < 12:
		hour += 12
	elif meridiem == "am" and hour == 12:
		hour = 0
	return (0, hour * 60 + minute, text)


class Timetable:
	"""Weekly study sessions held in memory for the lifetime of the window."""

	def __init__(self):
		self._entries = []
		self._ids = itertools.count(1)

	def add(self, day, time, subject, topic=""):
		subject = (subject or "").strip()
		if not subject:
			raise ValidationError("Please enter a subject")
		if day not in DAYS:
			raise ValidationError(f"Unknown day: {day}")
		entry = TimetableEntry(
			id=str(next(self._ids)),
			day=day,
			time=(time or "").strip(),
			subject=subject,
			topic=(topic or "").strip(),
		)
		self._entries.append(entry)
		return entry

	def remove(self, entry_id):
		"""Drop an entry; returns False if it was not there."""
		before = len(self._entries)
		self._entries = [e for e in self._entries if e.id != entry_id]
		return len(self._entries) != before

	def entries_for(self, day):
		return sorted((e for e in self._entries if e.day == day), key=lambda e: time_sort_key(e.time))

	def days(self):
		"""(day, entries) pairs, Monday first."""
		return [(day, self.entries_for(day)) for day in DAYS]

	def __len__(self):
		return len(self._entries)

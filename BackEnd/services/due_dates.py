from dataclasses import dataclass
from datetime import timedelta

OVERDUE = "overdue"
TODAY = "today"
TOMORROW = "tomorrow"
UPCOMING = "upcoming"

# badge text stays English whatever the system locale is
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class DueBadge:
	text: str
	kind: str


def due_badge(due_date, now, tz=None):
	"""Label for a task's due date relative to ``now`` (both aware datetimes).

	Both are converted to ``tz`` before comparing calendar days. With no ``tz``
	the system zone is used, with the UTC offset in effect at each instant, so
	dates across a daylight-saving change land on the right day. Returns None
	when the task has no due date.
	"""
	if due_date is None:
		return None
	local_due = due_date.astimezone(tz)
	local_now = now.astimezone(tz)
	today = local_now.date()
	if local_due.date() == today:
		return DueBadge("Today", TODAY)
	if local_due < local_now:
		return DueBadge("Overdue", OVERDUE)
	if local_due.date() == today + timedelta(days=1):
		return DueBadge("Tomorrow", TOMORROW)
	return DueBadge(f"{MONTHS[local_due.month - 1]} {local_due.day}", UPCOMING)

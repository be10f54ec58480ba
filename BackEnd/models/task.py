from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from BackEnd.core.clock import parse_iso, to_iso

TABLE = "todos"


class TimerStatus(str, Enum):
	STOPPED = "stopped"
	RUNNING = "running"
	PAUSED = "paused"


@dataclass
class Task:
	"""A row of the remote ``todos`` table.

	``elapsed_time`` is the committed baseline in seconds; it never includes a
	running interval. ``timer_started_at`` is set exactly while the timer runs.
	"""
	id: str
	title: str
	completed: bool = False
	created_at: Optional[datetime] = None
	due_date: Optional[datetime] = None
	user_id: Optional[str] = None
	elapsed_time: int = 0
	timer_status: TimerStatus = TimerStatus.STOPPED
	timer_started_at: Optional[datetime] = None

	@property
	def is_running(self) -> bool:
		return self.timer_status == TimerStatus.RUNNING

	@classmethod
	def from_row(cls, row: dict) -> "Task":
		started = parse_iso(row.get("timer_started_at"))
		try:
			status = TimerStatus(row.get("timer_status") or TimerStatus.STOPPED.value)
		except ValueError:
			# unknown states must not break loading the whole list
			status = TimerStatus.STOPPED
		# a running row without a start stamp cannot produce a live value
		if status == TimerStatus.RUNNING and started is None:
			status = TimerStatus.STOPPED
		if status != TimerStatus.RUNNING:
			started = None
		return cls(
			id=str(row["id"]),
			title=row.get("title") or "",
			completed=bool(row.get("completed", False)),
			created_at=parse_iso(row.get("created_at")),
			due_date=parse_iso(row.get("due_date")),
			user_id=row.get("user_id"),
			elapsed_time=max(0, int(row.get("elapsed_time") or 0)),
			timer_status=status,
			timer_started_at=started,
		)

	@staticmethod
	def insert_row(title: str, user_id: str, due_date: Optional[datetime] = None) -> dict:
		"""Payload for creating a task; the backend fills in the rest."""
		return {
			"title": title,
			"user_id": user_id,
			"due_date": to_iso(due_date),
		}

"""Start/pause/stop state machine for a task's timer.

Each transition returns the partial row to write to the backend; nothing here
mutates a Task. The caller applies the change only once the write succeeds.
"""

from BackEnd.core.clock import to_iso, whole_seconds_between
from BackEnd.core.errors import InvalidTransition
from BackEnd.models.task import TimerStatus

START = "start"
RESUME = "resume"
PAUSE = "pause"
STOP = "stop"

_ACTIONS = {
	TimerStatus.STOPPED: (START,),
	TimerStatus.RUNNING: (PAUSE, STOP),
	TimerStatus.PAUSED: (RESUME, STOP),
}


def available_actions(status):
	"""Buttons shown for a status. RESUME is the START transition from paused."""
	return _ACTIONS[TimerStatus(status)]


def _folded_elapsed(task, now):
	return task.elapsed_time + whole_seconds_between(task.timer_started_at, now)


def start(task, now):
	if task.timer_status == TimerStatus.RUNNING:
		raise InvalidTransition("Timer is already running")
	return {
		"timer_status": TimerStatus.RUNNING.value,
		"timer_started_at": to_iso(now),
	}


def pause(task, now):
	if task.timer_status != TimerStatus.RUNNING:
		raise InvalidTransition("Only a running timer can be paused")
	return {
		"timer_status": TimerStatus.PAUSED.value,
		"elapsed_time": _folded_elapsed(task, now),
		"timer_started_at": None,
	}


def stop(task, now):
	if task.timer_status == TimerStatus.STOPPED:
		raise InvalidTransition("Timer is not running")
	if task.timer_status == TimerStatus.RUNNING:
		elapsed = _folded_elapsed(task, now)
	else:
		elapsed = task.elapsed_time
	return {
		"timer_status": TimerStatus.STOPPED.value,
		"elapsed_time": elapsed,
		"timer_started_at": None,
	}


def live_elapsed(task, now):
	"""Seconds to display right now; the stored baseline while not running."""
	if task.timer_status == TimerStatus.RUNNING and task.timer_started_at is not None:
		return _folded_elapsed(task, now)
	return task.elapsed_time


def transition(action, task, now):
	"""Dispatch by action name (as returned by available_actions)."""
	if action in (START, RESUME):
		return start(task, now)
	if action == PAUSE:
		return pause(task, now)
	if action == STOP:
		return stop(task, now)
	raise InvalidTransition(f"Unknown timer action: {action}")

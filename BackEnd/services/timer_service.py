from PySide6.QtCore import QObject, Signal, QTimer
from BackEnd.core.clock import utc_now
from BackEnd.models import timer
from BackEnd.models.task import TimerStatus

class TimerService(QObject):
	"""Drives the once-a-second display of one task's timer.

	Purely presentational: the stored elapsed_time is only changed by a
	pause/stop write, never by ticking.
	"""
	tick = Signal(int)  # emits live elapsed seconds
	state_changed = Signal(str)  # emits 'stopped', 'running', 'paused'

	def __init__(self, clock=utc_now, parent=None):
		super().__init__(parent)
		self.clock = clock
		self.task = None
		self._timer = QTimer(self)
		self._timer.setInterval(1000)
		self._timer.timeout.connect(self._on_tick)

	@property
	def ticking(self):
		return self._timer.isActive()

	def bind(self, task):
		"""Take a fresh snapshot of the task; cancels any tick from the old one first."""
		self._timer.stop()
		previous = self.task.timer_status if self.task is not None else None
		self.task = task
		if task.timer_status == TimerStatus.RUNNING and task.timer_started_at is not None:
			self._timer.start()
		self.tick.emit(self.elapsed())
		if task.timer_status != previous:
			self.state_changed.emit(task.timer_status.value)

	def elapsed(self):
		if self.task is None:
			return 0
		return timer.live_elapsed(self.task, self.clock())

	def shutdown(self):
		"""Stop ticking for good; call when the owning view is torn down."""
		self._timer.stop()
		self.task = None

	def _on_tick(self):
		if self.task is None or self.task.timer_status != TimerStatus.RUNNING:
			self._timer.stop()
			return
		self.tick.emit(self.elapsed())

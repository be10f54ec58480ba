import logging

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Qt, Signal, Slot

from BackEnd.core.errors import StudyPlannerError

log = logging.getLogger(__name__)


class _Job(QRunnable):
	def __init__(self, runner, fn, args, on_success, on_error):
		super().__init__()
		self.runner = runner
		self.fn = fn
		self.args = args
		self.on_success = on_success
		self.on_error = on_error

	def run(self):
		try:
			result = self.fn(*self.args)
		except StudyPlannerError as e:
			self.runner._finished.emit(self, None, e.message)
		except Exception as e:
			log.exception("Background call %s failed", getattr(self.fn, "__name__", self.fn))
			self.runner._finished.emit(self, None, str(e) or "An error occurred")
		else:
			self.runner._finished.emit(self, result, None)


class TaskRunner(QObject):
	"""Runs backend calls on the global thread pool and calls back on the GUI thread.

	Must be created on the GUI thread; callbacks are delivered through a queued
	connection to this object.
	"""
	_finished = Signal(object, object, object)

	def __init__(self, parent=None, pool=None):
		super().__init__(parent)
		self.pool = pool or QThreadPool.globalInstance()
		self._pending = set()
		self._finished.connect(self._dispatch, Qt.ConnectionType.QueuedConnection)

	def run(self, fn, *args, on_success=None, on_error=None):
		job = _Job(self, fn, args, on_success, on_error)
		job.setAutoDelete(False)
		self._pending.add(job)
		self.pool.start(job)
		return job

	@Slot(object, object, object)
	def _dispatch(self, job, result, error):
		self._pending.discard(job)
		if error is not None:
			if job.on_error is not None:
				job.on_error(error)
		elif job.on_success is not None:
			job.on_success(result)


class LatestCall:
	"""Tickets for overlapping calls of one kind; only the newest result counts.

	Results from the pool arrive in completion order, not submission order.
	"""

	def __init__(self):
		self._ticket = 0

	def issue(self):
		self._ticket += 1
		return self._ticket

	def invalidate(self):
		self._ticket += 1

	def is_current(self, ticket):
		return ticket == self._ticket

import logging

from BackEnd.core.clock import utc_now
from BackEnd.core.errors import RemoteError
from BackEnd.models import timer
from BackEnd.models.task import TABLE, Task

log = logging.getLogger(__name__)


class TodoRepo:
	"""CRUD and timer writes against the remote ``todos`` table.

	Every call needs a live session; ``clock`` is injectable for tests.
	"""

	def __init__(self, client, auth, clock=utc_now):
		self.client = client
		self.auth = auth
		self.clock = clock

	def _session(self):
		session = self.auth.current_session()
		if session is None:
			raise RemoteError("You are not signed in")
		return session

	def list_todos(self):
		"""All of the user's tasks, newest first."""
		rows = self.client.select(TABLE, access_token=self._session().access_token, order="created_at.desc")
		return [Task.from_row(r) for r in rows]

	def add_todo(self, title, due_date=None):
		title = (title or "").strip()
		if not title:
			return None
		session = self._session()
		row = self.client.insert(TABLE, Task.insert_row(title, session.user_id, due_date), access_token=session.access_token)
		log.info("Added task %s", row.get("id"))
		return Task.from_row(row) if row else None

	def toggle_completed(self, task):
		row = self.client.update(TABLE, task.id, {"completed": not task.completed}, access_token=self._session().access_token)
		return Task.from_row(row)

	def delete_todo(self, task_id):
		self.client.delete(TABLE, task_id, access_token=self._session().access_token)
		log.info("Deleted task %s", task_id)

	def apply_timer(self, action, task):
		"""Write one timer transition and return the task as stored by the backend."""
		patch = timer.transition(action, task, self.clock())
		row = self.client.update(TABLE, task.id, patch, access_token=self._session().access_token)
		updated = Task.from_row(row)
		log.info("Timer %s on task %s: %s, elapsed %ss", action, task.id, updated.timer_status.value, updated.elapsed_time)
		return updated

	def start_timer(self, task):
		return self.apply_timer(timer.START, task)

	def pause_timer(self, task):
		return self.apply_timer(timer.PAUSE, task)

	def stop_timer(self, task):
		return self.apply_timer(timer.STOP, task)

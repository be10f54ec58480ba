from datetime import datetime, timedelta, timezone

import pytest

from BackEnd.models.task import Task, TimerStatus
from BackEnd.services.auth_service import Session

T0 = datetime(2026, 10, 19, 9, 0, 0, tzinfo=timezone.utc)


class FakeClock:
	"""Callable clock that only moves when told to."""

	def __init__(self, start=T0):
		self.now = start

	def __call__(self):
		return self.now

	def advance(self, seconds):
		self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture()
def clock():
	return FakeClock()


@pytest.fixture()
def make_task():
	def _make(**overrides):
		fields = dict(
			id="t-1",
			title="Read chapter 3",
			created_at=T0,
			user_id="u-1",
		)
		fields.update(overrides)
		return Task(**fields)
	return _make


@pytest.fixture()
def running_task(make_task):
	return make_task(elapsed_time=60, timer_status=TimerStatus.RUNNING, timer_started_at=T0)


@pytest.fixture()
def session():
	return Session(access_token="access-1", refresh_token="refresh-1", user_id="u-1", email="student@example.com")


@pytest.fixture(scope="session")
def qapp():
	"""A QCoreApplication so QTimer-backed objects can start timers."""
	from PySide6.QtCore import QCoreApplication
	app = QCoreApplication.instance() or QCoreApplication([])
	yield app

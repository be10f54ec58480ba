"""Tests for the once-a-second display ticker."""

import pytest

from BackEnd.models.task import TimerStatus
from BackEnd.services.timer_service import TimerService

from .conftest import T0


@pytest.fixture()
def service(qapp, clock):
	svc = TimerService(clock=clock)
	yield svc
	svc.shutdown()


@pytest.fixture()
def ticks(service):
	seen = []
	service.tick.connect(seen.append)
	return seen


def test_running_task_ticks(service, ticks, running_task, clock):
	service.bind(running_task)
	assert service.ticking
	assert ticks == [60]

	clock.advance(3)
	service._on_tick()

	assert ticks == [60, 63]


def test_paused_task_does_not_tick(service, ticks, make_task):
	service.bind(make_task(elapsed_time=42, timer_status=TimerStatus.PAUSED))

	assert not service.ticking
	assert ticks == [42]


def test_rebind_away_from_running_cancels(service, running_task, make_task):
	service.bind(running_task)
	service.bind(make_task(elapsed_time=75, timer_status=TimerStatus.STOPPED))

	assert not service.ticking
	assert service.elapsed() == 75


def test_shutdown_cancels_and_forgets(service, ticks, running_task):
	service.bind(running_task)
	service.shutdown()

	assert not service.ticking
	service._on_tick()
	assert ticks == [60]


def test_ticking_does_not_touch_baseline(service, running_task, clock):
	service.bind(running_task)
	clock.advance(30)
	service._on_tick()

	assert running_task.elapsed_time == 60
	assert running_task.timer_started_at == T0


def test_state_changed_only_on_status_change(service, running_task, make_task):
	states = []
	service.state_changed.connect(states.append)

	service.bind(running_task)
	service.bind(running_task)
	service.bind(make_task(timer_status=TimerStatus.PAUSED))

	assert states == ["running", "paused"]

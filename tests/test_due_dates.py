import locale
import os
import time
from datetime import datetime, timedelta, timezone

import pytest

from BackEnd.services.due_dates import OVERDUE, TODAY, TOMORROW, UPCOMING, due_badge

LOCAL = timezone(timedelta(hours=-5))
NOW = datetime(2026, 10, 19, 15, 30, tzinfo=LOCAL)


def badge_for(due):
	return due_badge(due, NOW, LOCAL)


def test_no_due_date():
	assert due_badge(None, NOW) is None


def test_tomorrow():
	badge = badge_for(datetime(2026, 10, 20, tzinfo=LOCAL))

	assert badge.text == "Tomorrow"
	assert badge.kind == TOMORROW


@pytest.mark.parametrize("due", [
	datetime(2026, 10, 19, 0, 0, tzinfo=LOCAL),
	datetime(2026, 10, 19, 23, 59, tzinfo=LOCAL),
])
def test_today_even_if_earlier_in_the_day(due):
	badge = badge_for(due)

	assert badge.text == "Today"
	assert badge.kind == TODAY


def test_past_day_is_overdue():
	badge = badge_for(datetime(2026, 10, 17, tzinfo=LOCAL))

	assert badge.text == "Overdue"
	assert badge.kind == OVERDUE


def test_later_date_is_formatted():
	badge = badge_for(datetime(2026, 11, 5, tzinfo=LOCAL))

	assert badge.text == "Nov 5"
	assert badge.kind == UPCOMING


def test_compared_in_local_time():
	# 03:00 UTC on the 20th is still the evening of the 19th locally
	badge = badge_for(datetime(2026, 10, 20, 3, 0, tzinfo=timezone.utc))

	assert badge.text == "Today"


def test_month_name_ignores_locale():
	previous = locale.setlocale(locale.LC_TIME)
	try:
		locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
	except locale.Error:
		pytest.skip("de_DE locale not available")
	try:
		badge = badge_for(datetime(2026, 12, 3, tzinfo=LOCAL))
	finally:
		locale.setlocale(locale.LC_TIME, previous)

	assert badge.text == "Dec 3"


@pytest.fixture()
def new_york():
	if not hasattr(time, "tzset"):
		pytest.skip("time.tzset is not available on this platform")
	previous = os.environ.get("TZ")
	os.environ["TZ"] = "America/New_York"
	time.tzset()
	yield
	if previous is None:
		del os.environ["TZ"]
	else:
		os.environ["TZ"] = previous
	time.tzset()


class TestAcrossDaylightSaving:
	# clocks go forward in New York on Sunday 8 March 2026

	def test_midnight_after_change_stays_on_its_day(self, new_york):
		# local midnight 5 April (EDT) is 04:00 UTC
		due = datetime(2026, 4, 5, 4, 0, tzinfo=timezone.utc)
		now = datetime(2026, 3, 1, 17, 0, tzinfo=timezone.utc)

		assert due_badge(due, now).text == "Apr 5"

	def test_monday_after_change_is_not_tomorrow_on_saturday(self, new_york):
		due = datetime(2026, 3, 9, 4, 0, tzinfo=timezone.utc)
		now = datetime(2026, 3, 7, 17, 0, tzinfo=timezone.utc)

		badge = due_badge(due, now)

		assert badge.text == "Mar 9"
		assert badge.kind == UPCOMING

	def test_local_date_picked_in_the_app(self, new_york):
		# the add form builds the due date from a naive local date
		due = datetime(2026, 3, 9).astimezone()
		now = datetime(2026, 3, 8, 12, 0).astimezone()

		assert due_badge(due, now).kind == TOMORROW

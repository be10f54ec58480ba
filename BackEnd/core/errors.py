"""Error types shared by the backend layer and the views.

Two kinds only: validation failures caught before any network call, and
failures reported by the hosted auth/data service. Views catch both at the
call site and show the message in a toast.
"""


class StudyPlannerError(Exception):
	"""Base class; ``message`` is what the user sees."""

	def __init__(self, message):
		super().__init__(message)
		self.message = message


class ValidationError(StudyPlannerError):
	"""A client-side field check failed."""


class RemoteError(StudyPlannerError):
	"""The auth or data service rejected a call or could not be reached."""

	def __init__(self, message, status_code=None):
		super().__init__(message)
		self.status_code = status_code


class InvalidTransition(StudyPlannerError):
	"""A timer operation is not defined for the task's current status."""

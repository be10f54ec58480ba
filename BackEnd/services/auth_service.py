import json
import logging
import threading
from dataclasses import dataclass
from typing import Optional

from BackEnd.core.errors import RemoteError
from BackEnd.core.validation import validate_credentials

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
	access_token: str
	refresh_token: str
	user_id: str
	email: str

	@classmethod
	def from_auth_response(cls, data: dict) -> Optional["Session"]:
		"""Session from a token/signup response, None when no tokens were issued."""
		if not data or not data.get("access_token"):
			return None
		user = data.get("user") or {}
		return cls(
			access_token=data["access_token"],
			refresh_token=data.get("refresh_token", ""),
			user_id=str(user.get("id", "")),
			email=user.get("email", ""),
		)


class Subscription:
	"""Handle returned by AuthService.subscribe; call unsubscribe() on teardown."""

	def __init__(self, service, callback):
		self._service = service
		self._callback = callback
		self.active = True

	def unsubscribe(self):
		if self.active:
			self._service._remove(self._callback)
			self.active = False


class AuthService:
	"""Owns the signed-in session and tells subscribers when it changes.

	Network methods may be called from a worker thread; callbacks run on the
	calling thread, so UI subscribers must hop back to the GUI thread.
	"""

	def __init__(self, client, store_path=None):
		self.client = client
		self.store_path = store_path
		self._session = None
		self._callbacks = []
		self._lock = threading.Lock()

	def current_session(self) -> Optional[Session]:
		with self._lock:
			return self._session

	def subscribe(self, callback) -> Subscription:
		with self._lock:
			self._callbacks.append(callback)
		return Subscription(self, callback)

	def _remove(self, callback):
		with self._lock:
			if callback in self._callbacks:
				self._callbacks.remove(callback)

	def _set_session(self, session):
		with self._lock:
			self._session = session
			callbacks = list(self._callbacks)
		self._persist(session)
		for cb in callbacks:
			try:
				cb(session)
			except Exception:
				log.exception("Session listener %r failed", cb)

	def _persist(self, session):
		if self.store_path is None:
			return
		try:
			if session is None:
				if self.store_path.exists():
					self.store_path.unlink()
				return
			self.store_path.parent.mkdir(parents=True, exist_ok=True)
			with open(self.store_path, 'w', encoding='utf-8') as f:
				json.dump({"refresh_token": session.refresh_token, "email": session.email}, f)
		except OSError as e:
			log.warning("Could not persist session to %s: %s", self.store_path, e)

	def sign_up(self, email, password) -> Optional[Session]:
		"""Create an account. Returns the new session, or None when email confirmation is pending."""
		email = validate_credentials(email, password)
		data = self.client.sign_up(email, password)
		session = Session.from_auth_response(data)
		log.info("Signed up %s (session issued: %s)", email, session is not None)
		if session is not None:
			self._set_session(session)
		return session

	def sign_in(self, email, password) -> Session:
		email = validate_credentials(email, password)
		session = Session.from_auth_response(self.client.sign_in(email, password))
		if session is None:
			raise RemoteError("Sign in did not return a session")
		log.info("Signed in %s", email)
		self._set_session(session)
		return session

	def sign_out(self):
		"""Revoke the token remotely, then drop the local session regardless."""
		session = self.current_session()
		if session is None:
			return
		try:
			self.client.sign_out(session.access_token)
		finally:
			log.info("Signed out %s", session.email)
			self._set_session(None)

	def restore(self) -> Optional[Session]:
		"""Resume the stored session by refreshing its token, if there is one."""
		if self.store_path is None or not self.store_path.exists():
			return None
		try:
			with open(self.store_path, 'r', encoding='utf-8') as f:
				refresh_token = json.load(f).get("refresh_token")
		except (OSError, ValueError) as e:
			log.warning("Ignoring unreadable session file %s: %s", self.store_path, e)
			return None
		if not refresh_token:
			return None
		try:
			session = Session.from_auth_response(self.client.refresh(refresh_token))
		except RemoteError as e:
			log.info("Stored session expired: %s", e.message)
			self._set_session(None)
			return None
		self._set_session(session)
		return session

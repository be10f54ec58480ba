import json
from unittest.mock import MagicMock

import pytest

from BackEnd.core.errors import RemoteError, ValidationError
from BackEnd.services.auth_service import AuthService, Session

TOKENS = {
	"access_token": "access-1",
	"refresh_token": "refresh-1",
	"user": {"id": "u-1", "email": "student@example.com"},
}


@pytest.fixture()
def client():
	client = MagicMock()
	client.sign_in.return_value = dict(TOKENS)
	client.sign_up.return_value = dict(TOKENS)
	client.refresh.return_value = dict(TOKENS, access_token="access-2")
	return client


@pytest.fixture()
def store(tmp_path):
	return tmp_path / "session.json"


@pytest.fixture()
def auth(client, store):
	return AuthService(client, store_path=store)


class TestSignIn:
	def test_sets_session_and_notifies(self, auth, client):
		seen = []
		auth.subscribe(seen.append)

		session = auth.sign_in(" student@example.com ", "secret1")

		client.sign_in.assert_called_once_with("student@example.com", "secret1")
		assert session == Session("access-1", "refresh-1", "u-1", "student@example.com")
		assert auth.current_session() == session
		assert seen == [session]

	def test_validation_happens_before_network(self, auth, client):
		with pytest.raises(ValidationError) as exc:
			auth.sign_in("not-an-email", "secret1")
		assert exc.value.message == "Invalid email address"
		client.sign_in.assert_not_called()

	def test_short_password_rejected_before_network(self, auth, client):
		with pytest.raises(ValidationError) as exc:
			auth.sign_in("student@example.com", "abc")
		assert exc.value.message == "Password must be at least 6 characters"
		client.sign_in.assert_not_called()

	def test_remote_error_propagates_and_keeps_state(self, auth, client):
		client.sign_in.side_effect = RemoteError("Invalid login credentials", 400)
		seen = []
		auth.subscribe(seen.append)

		with pytest.raises(RemoteError):
			auth.sign_in("student@example.com", "secret1")
		assert auth.current_session() is None
		assert seen == []

	def test_persists_refresh_token(self, auth, store):
		auth.sign_in("student@example.com", "secret1")

		assert json.loads(store.read_text(encoding="utf-8")) == {"refresh_token": "refresh-1", "email": "student@example.com"}


class TestSignUp:
	def test_with_immediate_session(self, auth):
		assert auth.sign_up("student@example.com", "secret1").user_id == "u-1"

	def test_pending_confirmation(self, auth, client):
		client.sign_up.return_value = {"id": "u-1", "email": "student@example.com"}

		assert auth.sign_up("student@example.com", "secret1") is None
		assert auth.current_session() is None


class TestSignOut:
	def test_clears_session_and_store(self, auth, client, store):
		auth.sign_in("student@example.com", "secret1")
		seen = []
		auth.subscribe(seen.append)

		auth.sign_out()

		client.sign_out.assert_called_once_with("access-1")
		assert auth.current_session() is None
		assert seen == [None]
		assert not store.exists()

	def test_local_session_dropped_even_if_revoke_fails(self, auth, client):
		auth.sign_in("student@example.com", "secret1")
		client.sign_out.side_effect = RemoteError("network down")

		with pytest.raises(RemoteError):
			auth.sign_out()
		assert auth.current_session() is None

	def test_noop_without_session(self, auth, client):
		auth.sign_out()
		client.sign_out.assert_not_called()


class TestSubscriptions:
	def test_unsubscribe_stops_callbacks(self, auth):
		seen = []
		sub = auth.subscribe(seen.append)
		sub.unsubscribe()
		sub.unsubscribe()

		auth.sign_in("student@example.com", "secret1")

		assert seen == []
		assert sub.active is False

	def test_failing_listener_does_not_block_others(self, auth):
		def broken(_session):
			raise RuntimeError("boom")

		seen = []
		auth.subscribe(broken)
		auth.subscribe(seen.append)

		auth.sign_in("student@example.com", "secret1")

		assert len(seen) == 1


class TestRestore:
	def test_refreshes_stored_token(self, auth, client, store):
		store.write_text(json.dumps({"refresh_token": "refresh-1"}), encoding="utf-8")

		session = auth.restore()

		client.refresh.assert_called_once_with("refresh-1")
		assert session.access_token == "access-2"
		assert auth.current_session() == session

	def test_nothing_stored(self, auth, client):
		assert auth.restore() is None
		client.refresh.assert_not_called()

	def test_expired_token_clears_store(self, auth, client, store):
		store.write_text(json.dumps({"refresh_token": "old"}), encoding="utf-8")
		client.refresh.side_effect = RemoteError("Invalid Refresh Token", 400)

		assert auth.restore() is None
		assert not store.exists()

	def test_corrupt_store_ignored(self, auth, client, store):
		store.write_text("{not json", encoding="utf-8")

		assert auth.restore() is None
		client.refresh.assert_not_called()

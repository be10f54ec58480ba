"""Tests for the HTTP layer, using httpx.MockTransport in place of the network."""

import json

import httpx
import pytest

from BackEnd.core.errors import RemoteError
from BackEnd.services.backend_client import BackendClient


def make_client(handler):
	return BackendClient("https://proj.example.co/", "anon-key", transport=httpx.MockTransport(handler))


class TestAuthCalls:
	def test_sign_in_uses_password_grant(self):
		seen = {}

		def handler(request):
			seen["request"] = request
			return httpx.Response(200, json={"access_token": "a", "refresh_token": "r", "user": {"id": "u", "email": "s@x.io"}})

		data = make_client(handler).sign_in("s@x.io", "secret1")

		request = seen["request"]
		assert request.method == "POST"
		assert request.url.path == "/auth/v1/token"
		assert request.url.params["grant_type"] == "password"
		assert json.loads(request.content) == {"email": "s@x.io", "password": "secret1"}
		assert request.headers["apikey"] == "anon-key"
		assert request.headers["Authorization"] == "Bearer anon-key"
		assert data["access_token"] == "a"

	def test_sign_out_sends_user_token(self):
		seen = {}

		def handler(request):
			seen["auth"] = request.headers["Authorization"]
			return httpx.Response(204)

		make_client(handler).sign_out("user-token")

		assert seen["auth"] == "Bearer user-token"

	def test_error_message_from_body(self):
		def handler(request):
			return httpx.Response(400, json={"error": "invalid_grant", "error_description": "Invalid login credentials"})

		with pytest.raises(RemoteError) as exc:
			make_client(handler).sign_in("s@x.io", "wrongpw")
		assert exc.value.message == "Invalid login credentials"
		assert exc.value.status_code == 400

	def test_msg_key_preferred(self):
		def handler(request):
			return httpx.Response(422, json={"msg": "User already registered"})

		with pytest.raises(RemoteError) as exc:
			make_client(handler).sign_up("s@x.io", "secret1")
		assert exc.value.message == "User already registered"

	def test_transport_failure(self):
		def handler(request):
			raise httpx.ConnectError("connection refused", request=request)

		with pytest.raises(RemoteError) as exc:
			make_client(handler).sign_in("s@x.io", "secret1")
		assert "Could not reach the server" in exc.value.message
		assert exc.value.status_code is None


class TestDataCalls:
	def test_select_with_order(self):
		seen = {}

		def handler(request):
			seen["request"] = request
			return httpx.Response(200, json=[{"id": "1", "title": "A"}])

		rows = make_client(handler).select("todos", access_token="tok", order="created_at.desc")

		params = seen["request"].url.params
		assert seen["request"].url.path == "/rest/v1/todos"
		assert params["select"] == "*"
		assert params["order"] == "created_at.desc"
		assert seen["request"].headers["Authorization"] == "Bearer tok"
		assert rows == [{"id": "1", "title": "A"}]

	def test_insert_returns_created_row(self):
		seen = {}

		def handler(request):
			seen["request"] = request
			return httpx.Response(201, json=[{"id": "9", "title": "Essay"}])

		row = make_client(handler).insert("todos", {"title": "Essay"}, access_token="tok")

		assert seen["request"].headers["Prefer"] == "return=representation"
		assert json.loads(seen["request"].content) == [{"title": "Essay"}]
		assert row == {"id": "9", "title": "Essay"}

	def test_update_filters_by_id(self):
		seen = {}

		def handler(request):
			seen["request"] = request
			return httpx.Response(200, json=[{"id": "9", "completed": True}])

		row = make_client(handler).update("todos", "9", {"completed": True}, access_token="tok")

		assert seen["request"].method == "PATCH"
		assert seen["request"].url.params["id"] == "eq.9"
		assert row["completed"] is True

	def test_update_of_missing_row(self):
		def handler(request):
			return httpx.Response(200, json=[])

		with pytest.raises(RemoteError) as exc:
			make_client(handler).update("todos", "404", {"completed": True}, access_token="tok")
		assert exc.value.message == "Task not found"

	def test_delete(self):
		seen = {}

		def handler(request):
			seen["request"] = request
			return httpx.Response(204)

		make_client(handler).delete("todos", "9", access_token="tok")

		assert seen["request"].method == "DELETE"
		assert seen["request"].url.params["id"] == "eq.9"

	def test_plain_text_error(self):
		def handler(request):
			return httpx.Response(503, text="Service Unavailable")

		with pytest.raises(RemoteError) as exc:
			make_client(handler).delete("todos", "9", access_token="tok")
		assert exc.value.message == "Service Unavailable"
		assert exc.value.status_code == 503

"""HTTP client for the hosted auth (GoTrue) and data (PostgREST) service."""

import logging
from typing import Any, Optional

import httpx

from BackEnd.core.errors import RemoteError

log = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
	"""Pull the human-readable message out of an error response body."""
	try:
		body = response.json()
	except ValueError:
		body = None
	if isinstance(body, dict):
		for key in ("msg", "message", "error_description", "error"):
			value = body.get(key)
			if isinstance(value, str) and value:
				return value
	text = response.text.strip()
	return text or f"Request failed with status {response.status_code}"


class BackendClient:
	"""Thin wrapper over httpx.Client for one project URL and API key."""

	def __init__(self, base_url: str, api_key: str, timeout: float = 10.0, transport=None):
		self.base_url = base_url.rstrip("/")
		self.api_key = api_key
		self._client = httpx.Client(
			base_url=self.base_url,
			timeout=timeout,
			follow_redirects=True,
			transport=transport,
			headers={
				"apikey": api_key,
				"Content-Type": "application/json",
				"Accept": "application/json",
			},
		)

	def close(self) -> None:
		self._client.close()

	def _headers(self, access_token: Optional[str], extra: Optional[dict] = None) -> dict:
		headers = {"Authorization": f"Bearer {access_token or self.api_key}"}
		if extra:
			headers.update(extra)
		return headers

	def request(
		self,
		method: str,
		path: str,
		*,
		json: Any = None,
		params: Optional[dict] = None,
		access_token: Optional[str] = None,
		headers: Optional[dict] = None,
	) -> httpx.Response:
		"""Send one request; no retries. Non-2xx and transport errors raise RemoteError."""
		log.debug("%s %s", method, path)
		try:
			response = self._client.request(
				method,
				path,
				json=json,
				params=params,
				headers=self._headers(access_token, headers),
			)
		except httpx.RequestError as e:
			log.warning("%s %s failed: %s", method, path, e)
			raise RemoteError(f"Could not reach the server: {e}") from e
		if response.is_error:
			message = _error_message(response)
			log.warning("%s %s -> %s: %s", method, path, response.status_code, message)
			raise RemoteError(message, status_code=response.status_code)
		return response

	@staticmethod
	def _json(response: httpx.Response):
		if not response.content:
			return None
		return response.json()

	# ---- auth ----

	def sign_up(self, email: str, password: str) -> dict:
		response = self.request("POST", "/auth/v1/signup", json={"email": email, "password": password})
		return self._json(response) or {}

	def sign_in(self, email: str, password: str) -> dict:
		response = self.request(
			"POST",
			"/auth/v1/token",
			params={"grant_type": "password"},
			json={"email": email, "password": password},
		)
		return self._json(response) or {}

	def refresh(self, refresh_token: str) -> dict:
		response = self.request(
			"POST",
			"/auth/v1/token",
			params={"grant_type": "refresh_token"},
			json={"refresh_token": refresh_token},
		)
		return self._json(response) or {}

	def sign_out(self, access_token: str) -> None:
		self.request("POST", "/auth/v1/logout", access_token=access_token)

	# ---- data ----

	def select(self, table: str, *, access_token: str, filters: Optional[dict] = None, order: Optional[str] = None) -> list:
		"""Rows of ``table``. ``filters`` maps column to a PostgREST expression ('eq.1')."""
		params = {"select": "*"}
		if filters:
			params.update(filters)
		if order:
			params["order"] = order
		return self._json(self.request("GET", f"/rest/v1/{table}", params=params, access_token=access_token)) or []

	def insert(self, table: str, record: dict, *, access_token: str) -> dict:
		rows = self._json(self.request(
			"POST",
			f"/rest/v1/{table}",
			json=[record],
			access_token=access_token,
			headers={"Prefer": "return=representation"},
		)) or []
		return rows[0] if rows else {}

	def update(self, table: str, row_id: str, fields: dict, *, access_token: str) -> dict:
		rows = self._json(self.request(
			"PATCH",
			f"/rest/v1/{table}",
			params={"id": f"eq.{row_id}"},
			json=fields,
			access_token=access_token,
			headers={"Prefer": "return=representation"},
		)) or []
		if not rows:
			raise RemoteError("Task not found")
		return rows[0]

	def delete(self, table: str, row_id: str, *, access_token: str) -> None:
		self.request("DELETE", f"/rest/v1/{table}", params={"id": f"eq.{row_id}"}, access_token=access_token)

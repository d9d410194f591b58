"""Social graph API client.

A thin wrapper around the HTTP surface of the social graph service.
The client uses the ``requests`` library internally and exposes one
method per route:

* :meth:`create_user` – ``POST /create``
* :meth:`list_users` – ``GET /users``
* :meth:`make_friends` – ``POST /make_friends``
* :meth:`delete_user` – ``DELETE /user``
* :meth:`get_friends` – ``GET /friends/{user_id}``
* :meth:`update_age` – ``PUT /user_age/{user_id}``
* :meth:`health` – ``GET /health``

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty collection
for list operations) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class SocialGraphAPI:
    """Client for the social graph service."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service including any API prefix,
                e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        JSON responses are parsed; any other response body is returned
        as text.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None, None
            if "application/json" in response.headers.get("Content-Type", ""):
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def create_user(
        self, name: str, age: int, friends: Optional[List[str]] = None
    ) -> Tuple[Optional[str], Optional[Error]]:
        """Create a user and return its ID.

        The service answers with ``User ID: <id>``; the ID part is
        extracted from that text.
        """
        data, error = self._request(
            "POST", "/create", json_body={"name": name, "age": age, "friends": friends or []}
        )
        if error:
            return None, error
        if isinstance(data, str) and ":" in data:
            return data.rsplit(":", 1)[1].strip(), None
        return data, None

    def list_users(self) -> Tuple[Dict[str, Dict[str, Any]], Optional[Error]]:
        """Return every user keyed by ID."""
        data, error = self._request("GET", "/users")
        if error:
            return {}, error
        return data if isinstance(data, dict) else {}, None

    def delete_user(self, target_id: str) -> Tuple[Optional[str], Optional[Error]]:
        """Delete a user.  Returns the confirmation text."""
        return self._request("DELETE", "/user", json_body={"target_id": target_id})

    def update_age(self, user_id: str, new_age: int) -> Tuple[Optional[str], Optional[Error]]:
        """Set a user's age.  Returns the confirmation text."""
        return self._request("PUT", f"/user_age/{user_id}", json_body={"new_age": new_age})

    # ------------------------------------------------------------------
    # Friendship operations
    # ------------------------------------------------------------------
    def make_friends(self, source_id: str, target_id: str) -> Tuple[Optional[str], Optional[Error]]:
        """Link two users.  Returns the confirmation text."""
        return self._request(
            "POST", "/make_friends", json_body={"source_id": source_id, "target_id": target_id}
        )

    def get_friends(self, user_id: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return the friend records of a user."""
        data, error = self._request("GET", f"/friends/{user_id}")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/health")

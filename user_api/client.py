"""User REST API client.

A small wrapper around the HTTP interface of :mod:`user_api.app`,
built on the ``requests`` library.  The client exposes one method per
operation:

* :meth:`UserApiClient.health` – query the health check.
* :meth:`UserApiClient.list_users` – return all users.
* :meth:`UserApiClient.get_user` – fetch a single user by id.
* :meth:`UserApiClient.create_user` – create a user.
* :meth:`UserApiClient.update_user` – change a user's name and email.
* :meth:`UserApiClient.delete_user` – remove a user.

Methods never raise on HTTP or transport failures.  They return a
tuple ``(value, error)`` where ``error`` is ``None`` on success and a
dictionary with ``status_code`` and ``message`` otherwise.  The
message is taken from the response envelope when the server sent one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

USERS_PATH = "/api/users"


class UserApiClient:
    """Client for interacting with the user API."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response on success; on failure it is ``None`` and
            ``error`` describes the issue.
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
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _user_path(user_id: Any) -> str:
        return f"{USERS_PATH}/{user_id}"

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/health")

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users.

        Returns:
            A tuple ``(users, error)``.  ``users`` is empty on failure.
        """
        data, error = self._request("GET", USERS_PATH)
        if error:
            return [], error
        if isinstance(data, dict) and isinstance(data.get("data"), list):
            return data["data"], None
        return [], None

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", self._user_path(user_id))
        if error:
            return None, error
        return (data or {}).get("data"), None

    def create_user(self, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("POST", USERS_PATH, json_body={"name": name, "email": email})
        if error:
            return None, error
        return (data or {}).get("data"), None

    def update_user(
        self, user_id: Any, name: str, email: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request(
            "PUT", self._user_path(user_id), json_body={"name": name, "email": email}
        )
        if error:
            return None, error
        return (data or {}).get("data"), None

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a user.

        Returns:
            A tuple ``(deleted, error)``.
        """
        data, error = self._request("DELETE", self._user_path(user_id))
        if error:
            return False, error
        return bool((data or {}).get("success")), None

"""Jokes API client.

This module defines a simple client wrapper around the Jokes REST API.
The client uses the ``requests`` library internally to make HTTP
calls and exposes one method per endpoint:

* :meth:`random_joke` – fetch a random joke.
* :meth:`get_joke` – fetch a single joke by its identifier.
* :meth:`list_jokes_by_type` – fetch every joke of a given type.
* :meth:`create_joke` – add a new joke.
* :meth:`replace_joke` / :meth:`patch_joke` – full or partial update.
* :meth:`delete_joke` / :meth:`delete_all_jokes` – remove jokes.

Mutating methods require the master key, passed at initialisation as
``master_key`` and sent in the ``key`` query parameter.  Every method
returns a ``(data, error)`` tuple instead of raising, where ``error``
is a dictionary with ``status_code`` and ``message`` keys.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class JokesClient:
    """Client for interacting with the Jokes API."""

    def __init__(
        self,
        *,
        base_url: str,
        master_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            master_key: Optional master key used for mutating requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.master_key = master_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        form: Dict[str, Any] | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``PATCH`` or ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/jokes``).
            params: Query parameters to include in the request.
            form: Fields sent form‑urlencoded in the request body.
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``.  On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                data=form,
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

    def _key_params(self) -> Dict[str, Any]:
        return {"key": self.master_key} if self.master_key is not None else {}

    @staticmethod
    def _fields(text: Optional[str], joke_type: Optional[str]) -> Dict[str, str]:
        """Build a form body, leaving out fields that are ``None``."""
        fields = {}
        if text is not None:
            fields["text"] = text
        if joke_type is not None:
            fields["type"] = joke_type
        return fields

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------
    def random_joke(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/jokes/random")

    def get_joke(self, joke_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/jokes/{joke_id}")

    def list_jokes_by_type(self, joke_type: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all jokes of ``joke_type`` (case insensitive).

        Returns:
            A tuple ``(jokes, error)``.  ``jokes`` is empty on failure,
            including when the server reports no match (404).
        """
        data, error = self._request("GET", "/jokes", params={"type": joke_type})
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------
    def create_joke(
        self, text: Optional[str], joke_type: Optional[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/jokes", params=self._key_params(), form=self._fields(text, joke_type))

    def replace_joke(
        self, joke_id: Any, text: Optional[str], joke_type: Optional[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace both fields of a joke; omitted fields are cleared by the server."""
        return self._request(
            "PUT", f"/jokes/{joke_id}", params=self._key_params(), form=self._fields(text, joke_type)
        )

    def patch_joke(
        self, joke_id: Any, text: Optional[str] = None, joke_type: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update only the given fields of a joke."""
        return self._request(
            "PATCH", f"/jokes/{joke_id}", params=self._key_params(), form=self._fields(text, joke_type)
        )

    def delete_joke(self, joke_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/jokes/{joke_id}", params=self._key_params())
        return error is None, error

    def delete_all_jokes(self) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", "/jokes", params=self._key_params())
        return error is None, error

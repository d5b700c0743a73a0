"""Blog API client.

This module defines a small client wrapper around the Blog REST API.
It uses the ``requests`` library internally and exposes one method per
endpoint:

* :meth:`BlogApiClient.list_blogs` – return all blogs.
* :meth:`BlogApiClient.get_blog` – fetch a single blog by its identifier.
* :meth:`BlogApiClient.create_blog` – create a blog.
* :meth:`BlogApiClient.update_blog` – change some fields of a blog.
* :meth:`BlogApiClient.delete_blog` – delete a blog.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  The message is taken
from the ``error`` (or ``message``) field of the server's JSON body,
so a missing blog is reported as ``"Blog not found"``.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that put the
service behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class BlogApiClient:
    """Client for interacting with the Blog API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3200``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/blogs``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
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
                    if isinstance(err_json, dict):
                        message = err_json.get("error") or err_json.get("message") or ""
                    message = message or str(err_json)
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
    # Blog operations
    # ------------------------------------------------------------------
    def list_blogs(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all blogs in creation order."""
        data, error = self._request("GET", "/blogs")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_blog(self, blog_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single blog by ID."""
        return self._request("GET", f"/blogs/{blog_id}")

    def create_blog(
        self, title: str, content: str, author: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a blog and return it as stored by the server."""
        payload = {"title": title, "content": content, "author": author}
        return self._request("POST", "/blogs", json_body=payload)

    def update_blog(
        self,
        blog_id: Any,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
        author: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update the given fields of a blog.

        Fields left as ``None`` are not sent and stay unchanged on the
        server.
        """
        payload = {
            key: value
            for key, value in (("title", title), ("content", content), ("author", author))
            if value is not None
        }
        return self._request("PUT", f"/blogs/{blog_id}", json_body=payload)

    def delete_blog(self, blog_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a blog.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/blogs/{blog_id}")
        if error:
            return False, error
        return True, None

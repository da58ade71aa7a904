"""Company directory API client.

This module defines a small client wrapper around the directory's REST
API.  The client uses the ``requests`` library internally and exposes
one method per CRUD operation:

* :meth:`list_companies` – return the full list of companies.
* :meth:`create_company` – create a company and return the stored record.
* :meth:`update_company` – change some fields of a company.
* :meth:`delete_company` – remove a company.

Failures are raised as the typed errors from
:mod:`company_directory.errors` so that callers can tell a rejected
payload (:class:`ValidationFailure`) from a vanished record
(:class:`NotFoundFailure`) and from an unreachable or misbehaving
server (:class:`TransportFailure`).

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import requests

from company_directory.errors import NotFoundFailure, TransportFailure, ValidationFailure

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3002/api/v1"
REQUEST_TIMEOUT = 15


class CompanyDirectoryAPI:
    """Client for the ``/companies`` resource of the directory API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3002/api/v1``.
                Defaults to ``DIRECTORY_API_URL`` from the environment.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        base_url = base_url or os.getenv("DIRECTORY_API_URL", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Optional[Any]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/companies``).
            json_body: JSON body to send with the request.
        Returns:
            The parsed JSON response, or ``None`` for an empty body.
        Raises:
            ValidationFailure: the server answered 400 or 422.
            NotFoundFailure: the server answered 404.
            TransportFailure: any other error status, a connection
                problem, or a body that is not JSON.
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
                timeout=REQUEST_TIMEOUT,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = self._error_message(exc)
            logger.error("API request %s %s failed (%s): %s", method, url, status, message)
            if status in (400, 422):
                details = None
                if exc.response is not None:
                    try:
                        details = exc.response.json().get("detail")
                    except (ValueError, AttributeError):
                        details = None
                raise ValidationFailure(message, details) from exc
            if status == 404:
                raise NotFoundFailure(message) from exc
            raise TransportFailure(message, status) from exc
        except requests.RequestException as exc:
            logger.error("API request %s %s failed: %s", method, url, exc)
            raise TransportFailure(str(exc)) from exc
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.error("API returned a non-JSON body for %s %s", method, url)
            raise TransportFailure("Response was not valid JSON", response.status_code) from exc

    @staticmethod
    def _error_message(exc: requests.HTTPError) -> str:
        message = ""
        if exc.response is not None:
            try:
                err_json = exc.response.json()
            except ValueError:
                message = exc.response.text
            else:
                if isinstance(err_json, dict):
                    detail = err_json.get("detail") or err_json.get("message")
                    if isinstance(detail, list):
                        # FastAPI validation errors: one entry per offending field.
                        message = "; ".join(
                            f"{'.'.join(str(p) for p in item.get('loc', [])[1:])}: {item.get('msg')}"
                            for item in detail
                            if isinstance(item, dict)
                        )
                    elif detail:
                        message = str(detail)
                    else:
                        message = str(err_json)
                else:
                    message = str(err_json)
        return message or str(exc)

    @staticmethod
    def _expect_record(data: Any) -> Dict[str, Any]:
        if not isinstance(data, dict) or "id" not in data:
            raise TransportFailure("Expected a company record in the response")
        return data

    # ------------------------------------------------------------------
    # Company operations
    # ------------------------------------------------------------------
    def list_companies(self) -> List[Dict[str, Any]]:
        """Retrieve every company.

        Returns:
            The list of company records as returned by the server.
        """
        data = self._request("GET", "/companies")
        if isinstance(data, list):
            return data
        # Some deployments wrap the list inside an object.
        if isinstance(data, dict):
            for key in ["companies", "data", "items"]:
                if key in data and isinstance(data[key], list):
                    return data[key]
        raise TransportFailure("Expected a list of companies in the response")

    def create_company(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create a company.

        Args:
            payload: Company fields; ``name``, ``ceo``, ``industry`` and
                ``location`` are required by the server.
        Returns:
            The stored record including its ``id``.
        """
        return self._expect_record(self._request("POST", "/companies", json_body=payload))

    def update_company(self, company_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Update some fields of a company and return the stored record."""
        return self._expect_record(
            self._request("PUT", f"/companies/{company_id}", json_body=payload)
        )

    def delete_company(self, company_id: str) -> None:
        """Delete a company."""
        self._request("DELETE", f"/companies/{company_id}")

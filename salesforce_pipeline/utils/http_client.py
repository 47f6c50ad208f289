"""Shared HTTP helpers for the Salesforce OAuth and REST endpoints."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Optional

import requests

from ..models import Session
from .errors import AuthenticationError, ResourceCallError

LOGIN_URL = "https://login.salesforce.com"
SANDBOX_LOGIN_URL = "https://test.salesforce.com"
TOKEN_PATH = "/services/oauth2/token"

USER_AGENT = "salesforce-pipeline/0.1.0"

DEFAULT_HEADERS: Dict[str, str] = {
    "accept": "application/json",
    "user-agent": USER_AGENT,
}


def _decode_body(response: requests.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text


def _extract_errors(payload: Any) -> List[Any]:
    """Normalises a Salesforce error body into the list it reports."""

    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("errors"), list):
        return payload["errors"]
    return [payload]


class HttpClient:
    """Sends token requests and bearer-authenticated REST calls.

    ``timeout`` is passed to every request; ``None`` leaves the transport
    without a timeout.
    """

    def __init__(self, session: Optional[Session] = None, timeout: Optional[float] = None) -> None:
        self.timeout = timeout
        self.session = session
        self._http = requests.Session()
        self._http.headers.update(DEFAULT_HEADERS)

    def request_token(self, login_url: str, form: Mapping[str, str]) -> Dict[str, Any]:
        """POST the password grant to ``<login_url>/services/oauth2/token``."""

        url = login_url.rstrip("/") + TOKEN_PATH
        try:
            response = self._http.request(
                "POST",
                url,
                data=dict(form),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:  # pragma: no cover - network errors
            logging.error("HTTP POST to %s failed: %s", url, exc)
            raise

        payload = _decode_body(response)
        if not response.ok:
            error = payload.get("error") if isinstance(payload, dict) else None
            description = payload.get("error_description") if isinstance(payload, dict) else str(payload)
            logging.error(
                "Authentication failed (status %s): %s - %s",
                response.status_code,
                error,
                description,
            )
            raise AuthenticationError(
                f"Salesforce rejected the password grant: {error or response.status_code}"
                + (f" ({description})" if description else ""),
                error=error,
                error_description=description,
                status_code=response.status_code,
            )
        if not isinstance(payload, dict):
            raise AuthenticationError(
                "Token endpoint returned a non-JSON body",
                status_code=response.status_code,
            )
        return payload

    def request_resource(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Issue a bearer-authenticated call relative to the session instance URL."""

        if self.session is None:
            raise AuthenticationError(f"No active session; authenticate before calling {method} {path}")

        method = method.upper()
        url = self.session.instance_url.rstrip("/") + "/" + path.lstrip("/")
        headers = {"Authorization": f"Bearer {self.session.access_token}"}
        logging.debug("%s %s", method, url)
        try:
            response = self._http.request(
                method,
                url,
                json=body,
                params=dict(params) if params else None,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logging.error("HTTP %s to %s failed: %s", method, url, exc)
            raise

        payload = _decode_body(response)
        if not response.ok:
            errors = _extract_errors(payload)
            logging.error(
                "%s %s failed (status %s): %s",
                method,
                path,
                response.status_code,
                json.dumps(errors, ensure_ascii=False),
            )
            raise ResourceCallError(method, path, response.status_code, errors)
        return payload

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

"""API client for custom Apex REST resources."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..utils.http_client import HttpClient

APEX_REST_PREFIX = "/services/apexrest/"


def apex_path(path: str) -> str:
    path = path.strip()
    if path.startswith(APEX_REST_PREFIX):
        return path
    return APEX_REST_PREFIX + path.lstrip("/")


class ApexAPI:
    """Invokes ``/services/apexrest/<path>``; the response shape belongs to the endpoint."""

    def __init__(self, http_client: HttpClient) -> None:
        self._client = http_client

    def invoke(self, path: str, body: Optional[Any] = None, method: str = "POST") -> Any:
        resource = apex_path(path)
        logging.info("Invoking Apex REST %s %s", method.upper(), resource)
        return self._client.request_resource(method, resource, body)

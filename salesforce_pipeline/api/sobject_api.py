"""API client for creating and retrieving SObject records such as Lead."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from ..models import CreateResult, Lead
from ..utils.errors import ResourceCallError
from ..utils.http_client import HttpClient

DEFAULT_API_VERSION = "57.0"
LEAD_OBJECT = "Lead"


def sobject_path(api_version: str, object_name: str, record_id: Optional[str] = None) -> str:
    path = f"/services/data/v{api_version.lstrip('v')}/sobjects/{object_name}"
    if record_id:
        path = f"{path}/{record_id}"
    return path


class SObjectAPI:
    """Wraps the ``/sobjects`` REST resource for a given API version."""

    def __init__(self, http_client: HttpClient, api_version: str = DEFAULT_API_VERSION) -> None:
        self._client = http_client
        self.api_version = api_version

    def create(self, object_name: str, record: Union[Mapping[str, Any], Lead]) -> CreateResult:
        payload = record.to_payload() if isinstance(record, Lead) else dict(record)
        path = sobject_path(self.api_version, object_name)
        data = self._client.request_resource("POST", path, payload)
        if not isinstance(data, dict) or not data.get("id") or not data.get("success"):
            errors = data.get("errors") if isinstance(data, dict) else None
            logging.error("Create %s returned no record id: %s", object_name, data)
            raise ResourceCallError("POST", path, None, errors if isinstance(errors, list) and errors else [data])
        result = CreateResult(
            id=data["id"],
            success=True,
            errors=data.get("errors") or [],
            raw=data,
        )
        logging.info("Created %s %s", object_name, result.id)
        return result

    def get(self, object_name: str, record_id: str, fields: Optional[Sequence[str]] = None) -> Dict[str, Any]:
        params = {"fields": ",".join(fields)} if fields else None
        data = self._client.request_resource(
            "GET",
            sobject_path(self.api_version, object_name, record_id),
            params=params,
        )
        logging.info("Retrieved %s %s", object_name, record_id)
        return data

    def create_lead(self, lead: Union[Lead, Mapping[str, Any]]) -> CreateResult:
        return self.create(LEAD_OBJECT, lead)

    def get_lead(self, lead_id: str, fields: Optional[Sequence[str]] = None) -> Dict[str, Any]:
        return self.get(LEAD_OBJECT, lead_id, fields)

"""Pydantic models for the Lead SObject and SObject create responses."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field


class Lead(BaseModel):
    """Subset of the Lead object fields this tool reads and writes.

    Field names mirror the Salesforce API names so the model can be dumped
    straight into a request body.
    """

    FirstName: Optional[str] = None
    LastName: str
    Company: str
    Email: Optional[str] = None
    Phone: Optional[str] = None
    Title: Optional[str] = None
    LeadSource: Optional[str] = None
    Description: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class CreateResult(BaseModel):
    """Response body of ``POST /sobjects/<Object>``."""

    id: str
    success: bool
    errors: List[Any] = Field(default_factory=list)
    raw: Dict[str, Any] = Field(default_factory=dict, repr=False)


# Lead field -> (Apex response key, placeholder used when the key is absent or empty).
# LastName and Company are required on Lead, so their placeholders are never None.
LEAD_FIELD_DEFAULTS: Dict[str, Tuple[str, Optional[str]]] = {
    "FirstName": ("firstName", None),
    "LastName": ("lastName", "Unknown"),
    "Company": ("company", "Unknown Company"),
    "Email": ("email", None),
    "Phone": ("phone", None),
    "Title": ("title", None),
    "LeadSource": ("leadSource", "Apex REST"),
    "Description": ("description", None),
}


def _scalar_text(value: Any) -> Optional[str]:
    """Returns ``value`` as text, or ``None`` for empty and non-scalar values."""

    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return None
    text = str(value)
    return text or None


def lead_from_apex_result(result: Optional[Mapping[str, Any]]) -> Lead:
    """Builds a Lead from an Apex REST response using ``LEAD_FIELD_DEFAULTS``.

    Keys are matched against the camelCase names first and the Lead API
    names second, so both ``{"lastName": ...}`` and ``{"LastName": ...}``
    are accepted. Empty strings, booleans, and nested objects or lists
    count as missing.
    """

    source = result or {}
    fields: Dict[str, Any] = {}
    for field_name, (apex_key, default) in LEAD_FIELD_DEFAULTS.items():
        value = _scalar_text(source.get(apex_key))
        if value is None:
            value = _scalar_text(source.get(field_name))
        if value is None:
            value = default
        fields[field_name] = value
    return Lead(**fields)

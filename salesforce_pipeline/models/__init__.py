"""Data models for credentials, sessions, and Lead records."""

from .auth_models import Credentials, Session
from .lead_models import LEAD_FIELD_DEFAULTS, CreateResult, Lead, lead_from_apex_result

__all__ = [
    "Credentials",
    "Session",
    "Lead",
    "CreateResult",
    "LEAD_FIELD_DEFAULTS",
    "lead_from_apex_result",
]

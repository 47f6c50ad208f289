"""Exception types raised across the Salesforce request pipeline."""

from __future__ import annotations

import json
from typing import Any, List, Optional, Sequence


class SalesforcePipelineError(Exception):
    """Base class for every failure surfaced by the pipeline."""


class AuthenticationError(SalesforcePipelineError):
    """Raised when the OAuth token endpoint rejects the password grant."""

    def __init__(
        self,
        message: str,
        error: Optional[str] = None,
        error_description: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.error = error
        self.error_description = error_description
        self.status_code = status_code


class ConfigurationError(AuthenticationError):
    """Raised when credentials are missing or malformed, before any request is sent."""

    def __init__(self, message: str, missing_fields: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.missing_fields = list(missing_fields)


class ResourceCallError(SalesforcePipelineError):
    """Raised when an SObject or Apex REST endpoint rejects a call or answers with an unusable body.

    ``status_code`` is ``None`` when the call succeeded but the body lacks what the caller needs.
    """

    def __init__(self, method: str, path: str, status_code: Optional[int], errors: List[Any]) -> None:
        self.method = method
        self.path = path
        self.status_code = status_code
        self.errors = errors
        outcome = f"failed with status {status_code}" if status_code is not None else "returned an unusable response"
        super().__init__(f"{method} {path} {outcome}: {json.dumps(errors, ensure_ascii=False, default=str)}")


class PersistenceError(SalesforcePipelineError):
    """Raised when a result cannot be written to disk."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path

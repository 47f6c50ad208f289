"""Utility helpers for HTTP, configuration, and filesystem operations."""

from .config import credentials_from_mapping, load_credentials
from .errors import (
    AuthenticationError,
    ConfigurationError,
    PersistenceError,
    ResourceCallError,
    SalesforcePipelineError,
)
from .file_utils import ensure_directory, persist_json, render_timestamp, sanitize_filename
from .http_client import HttpClient

__all__ = [
    "HttpClient",
    "load_credentials",
    "credentials_from_mapping",
    "ensure_directory",
    "sanitize_filename",
    "render_timestamp",
    "persist_json",
    "SalesforcePipelineError",
    "AuthenticationError",
    "ConfigurationError",
    "ResourceCallError",
    "PersistenceError",
]

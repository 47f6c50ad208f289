"""Loading and validating the OAuth credentials configuration file."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from ..models import Credentials
from .errors import ConfigurationError

REQUIRED_FIELDS = ("grant_type", "client_id", "client_secret", "username", "password")

EXPECTED_SHAPE = """{
  "grant_type": "password",
  "client_id": "<connected app consumer key>",
  "client_secret": "<connected app consumer secret>",
  "username": "<salesforce username>",
  "password": "<password>",
  "security_token": "<optional security token>"
}"""


def _instructions(source: str) -> str:
    return f"Create {source} as a JSON object shaped like:\n{EXPECTED_SHAPE}"


def credentials_from_mapping(data: Mapping[str, Any], source: str = "the configuration") -> Credentials:
    """Validates ``data`` and returns typed credentials.

    Every field in ``REQUIRED_FIELDS`` must be present and non-empty; all
    missing ones are reported together.
    """

    missing = [name for name in REQUIRED_FIELDS if not str(data.get(name) or "").strip()]
    if missing:
        raise ConfigurationError(
            f"Missing required field(s) in {source}: {', '.join(missing)}.\n{_instructions(source)}",
            missing_fields=missing,
        )
    security_token = data.get("security_token")
    return Credentials(
        grant_type=str(data["grant_type"]),
        client_id=str(data["client_id"]),
        client_secret=str(data["client_secret"]),
        username=str(data["username"]),
        password=str(data["password"]),
        security_token=str(security_token) if security_token else None,
    )


def load_credentials(path: str) -> Credentials:
    """Reads the JSON credentials file at ``path``."""

    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Configuration file {path} not found.\n{_instructions(path)}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Configuration file {path} is not valid JSON: {exc}\n{_instructions(path)}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object.\n{_instructions(path)}")

    credentials = credentials_from_mapping(data, source=path)
    logging.debug("Loaded credentials for %s from %s", credentials.username, path)
    return credentials

"""Filesystem helpers for writing JSON results to timestamped files."""

from __future__ import annotations

import json
import logging
import os
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from .errors import PersistenceError

INVALID_FILENAME_CHARS = re.compile(r"[\\/:*?\"<>|]")
DEFAULT_TEMPLATE = "lead-{timestamp}.json"


def sanitize_filename(value: str, default: str = "file") -> str:
    """Removes characters that are invalid on most filesystems."""

    sanitized = INVALID_FILENAME_CHARS.sub("", value or "").strip()
    return sanitized or default


def ensure_directory(path: str) -> str:
    """Creates a directory (and its parents) if needed."""

    Path(path).mkdir(parents=True, exist_ok=True)
    return path


def render_timestamp(moment: Optional[datetime] = None) -> str:
    """Returns a sortable, filename-safe UTC timestamp.

    ``2023-12-03T08:45:00.000Z`` becomes ``2023-12-03T08-45-00-000Z``.
    """

    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    iso = moment.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
    return iso.replace(":", "-").replace(".", "-")


def build_output_path(output_dir: str, template: str = DEFAULT_TEMPLATE, moment: Optional[datetime] = None) -> str:
    """Renders ``template`` with the current timestamp under ``output_dir``."""

    try:
        filename = template.format(timestamp=render_timestamp(moment))
    except (KeyError, IndexError, ValueError) as exc:
        raise PersistenceError(f"Invalid output template {template!r}: {exc}") from exc
    return os.path.join(output_dir, sanitize_filename(filename, default=f"result-{render_timestamp(moment)}.json"))


def persist_json(
    result: Any,
    output_dir: str = ".",
    template: str = DEFAULT_TEMPLATE,
    moment: Optional[datetime] = None,
) -> str:
    """Writes ``result`` as two-space indented JSON and returns the file path."""

    path = build_output_path(output_dir, template, moment)
    try:
        body = json.dumps(result, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise PersistenceError(f"Result is not JSON serializable: {exc}", path=path) from exc

    try:
        ensure_directory(output_dir)
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(body)
            handle.write("\n")
    except OSError as exc:
        logging.error("Failed to write %s: %s", path, exc)
        raise PersistenceError(f"Unable to write {path}: {exc}", path=path) from exc

    logging.info("Saved result to %s", path)
    return path

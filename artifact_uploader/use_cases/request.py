"""Build the upload request from resolved inputs."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from ..inputs import parse_bool, parse_int
from ..models import RawInputs, UploadRequest

logger = logging.getLogger(__name__)


def parse_paths(raw_path: str) -> Tuple[str, ...]:
    """
    Split a multi-line path input into entries.

    Each line is stripped (which also drops a trailing carriage return) and
    blank lines are skipped. Order and duplicates are kept.
    """
    entries = (line.strip() for line in raw_path.split("\n"))
    return tuple(entry for entry in entries if entry)


def parse_retention_days(value: str) -> Optional[int]:
    """Positive day count, or None to let the uploader apply its default."""
    days = parse_int(value)
    if days is None or days <= 0:
        return None
    return days


def parse_compression_level(value: str) -> Optional[int]:
    level = parse_int(value)
    if level is None:
        # Passed through as-is; the uploader decides what an unset level means.
        logger.warning("compression-level %r is not a number", value)
    return level


def build_upload_request(raw: RawInputs, root_directory: Path) -> UploadRequest:
    return UploadRequest(
        root_directory=root_directory,
        paths=parse_paths(raw.path),
        name=raw.name,
        retention_days=parse_retention_days(raw.retention_days),
        compression_level=parse_compression_level(raw.compression_level),
        overwrite=parse_bool(raw.overwrite),
        include_hidden_files=parse_bool(raw.include_hidden_files),
    )

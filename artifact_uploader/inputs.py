"""Input resolution: named step inputs with defaults, plus weak numeric parsing."""
from __future__ import annotations

import logging
import re
from typing import Optional

from .errors import ConfigurationError
from .models import (
    DEFAULT_ARTIFACT_NAME,
    DEFAULT_COMPRESSION_LEVEL,
    DEFAULT_REGION,
    ActionEnvironment,
    NoFilesFoundPolicy,
    RawInputs,
)

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse a base-10 integer prefix.

    Leading whitespace and a sign are accepted and trailing garbage is
    ignored ("12abc" -> 12). Returns None when there are no digits, which
    callers treat as "not a number".
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(1))


def parse_bool(value: Optional[str]) -> bool:
    """Only the exact string "true" is truthy."""
    return value == "true"


class InputResolver:
    """Reads step inputs from an ActionEnvironment."""

    def __init__(self, env: ActionEnvironment):
        self._env = env

    def get_input(self, name: str, required: bool = False, default: str = "") -> str:
        value = self._env.get_input(name).strip()
        if value:
            return value
        if required:
            raise ConfigurationError(f"Input required and not supplied: {name}")
        return default

    def resolve(self) -> RawInputs:
        """Resolve every input; raises ConfigurationError for a missing required one."""
        path = self.get_input("path", required=True)
        s3_bucket = self.get_input("s3-bucket", required=True)

        raw = RawInputs(
            path=path,
            s3_bucket=s3_bucket,
            name=self.get_input("name", default=DEFAULT_ARTIFACT_NAME),
            if_no_files_found=self.get_input(
                "if-no-files-found", default=NoFilesFoundPolicy.WARN.value
            ),
            retention_days=self.get_input("retention-days", default="0"),
            compression_level=self.get_input(
                "compression-level", default=str(DEFAULT_COMPRESSION_LEVEL)
            ),
            overwrite=self.get_input("overwrite", default="false"),
            include_hidden_files=self.get_input("include-hidden-files", default="false"),
            s3_prefix=self.get_input("s3-prefix"),
            s3_endpoint=self.get_input("s3-endpoint"),
            s3_region=self.get_input("s3-region", default=DEFAULT_REGION),
            s3_force_path_style=self.get_input("s3-force-path-style", default="false"),
        )
        logger.debug("Resolved inputs: %s", raw)
        return raw


def resolve_inputs(env: ActionEnvironment) -> RawInputs:
    return InputResolver(env).resolve()

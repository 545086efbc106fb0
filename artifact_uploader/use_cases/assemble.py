"""Turn resolved inputs and environment into storage config and run context."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

from ..inputs import parse_bool, parse_int
from ..models import (
    UNKNOWN_REPOSITORY,
    ActionEnvironment,
    RawInputs,
    RunContext,
    StorageConfig,
)


def _int_or_default(value: Optional[str], default: int) -> int:
    parsed = parse_int(value) if value else None
    return default if parsed is None else parsed


def assemble_storage_config(raw: RawInputs) -> StorageConfig:
    endpoint = raw.s3_endpoint or None
    return StorageConfig(
        bucket=raw.s3_bucket,
        prefix=raw.s3_prefix or None,
        endpoint=endpoint,
        region=raw.s3_region,
        force_path_style=parse_bool(raw.s3_force_path_style) or bool(endpoint),
    )


def assemble_run_context(env: ActionEnvironment) -> RunContext:
    return RunContext(
        repository=env.repository or UNKNOWN_REPOSITORY,
        run_id=_int_or_default(env.run_id, 0),
        run_attempt=_int_or_default(env.run_attempt, 1),
    )


def resolve_root_directory(env: ActionEnvironment) -> Path:
    """Workspace if set, else the working directory; absolute and normalized."""
    workspace = env.workspace or env.cwd
    return Path(os.path.abspath(os.path.join(env.cwd, workspace)))


def assemble(raw: RawInputs, env: ActionEnvironment) -> Tuple[StorageConfig, RunContext]:
    """Pure: same inputs always give equal results."""
    return assemble_storage_config(raw), assemble_run_context(env)

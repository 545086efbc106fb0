"""Application use cases: assemble, build, classify."""

from .assemble import (
    assemble,
    assemble_run_context,
    assemble_storage_config,
    resolve_root_directory,
)
from .classify import (
    NO_FILES_FOUND_MARKER,
    OutcomeKind,
    UploadOutcome,
    classify_failure,
    classify_result,
    extract_diagnostics,
    is_no_files_found,
)
from .request import (
    build_upload_request,
    parse_compression_level,
    parse_paths,
    parse_retention_days,
)

__all__ = [
    "assemble",
    "assemble_run_context",
    "assemble_storage_config",
    "resolve_root_directory",
    "NO_FILES_FOUND_MARKER",
    "OutcomeKind",
    "UploadOutcome",
    "classify_failure",
    "classify_result",
    "extract_diagnostics",
    "is_no_files_found",
    "build_upload_request",
    "parse_compression_level",
    "parse_paths",
    "parse_retention_days",
]

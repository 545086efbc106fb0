"""
Outcome classification for a single upload attempt.

A typed UploadError kind wins. Collaborators that raise plain exceptions are
classified by message: any failure whose message contains NO_FILES_FOUND_MARKER
is treated as "no files found", even if it was raised for another reason.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Optional

from ..errors import StorageDiagnostics, UploadError, UploadErrorKind
from ..models import UploadResult

NO_FILES_FOUND_MARKER = "No files found"


class OutcomeKind(Enum):
    SUCCESS = "success"
    NO_FILES_FOUND = "no_files_found"
    FAILURE = "failure"


@dataclass(frozen=True)
class UploadOutcome:
    """Exactly one of: a result, a no-files failure, or any other failure."""
    kind: OutcomeKind
    result: Optional[UploadResult] = None
    error: Optional[BaseException] = None

    @property
    def success(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    @classmethod
    def ok(cls, result: UploadResult) -> "UploadOutcome":
        return cls(kind=OutcomeKind.SUCCESS, result=result)

    @classmethod
    def no_files(cls, error: BaseException) -> "UploadOutcome":
        return cls(kind=OutcomeKind.NO_FILES_FOUND, error=error)

    @classmethod
    def fail(cls, error: BaseException) -> "UploadOutcome":
        return cls(kind=OutcomeKind.FAILURE, error=error)


def classify_result(result: UploadResult) -> UploadOutcome:
    return UploadOutcome.ok(result)


def is_no_files_found(error: BaseException) -> bool:
    if isinstance(error, UploadError) and error.kind is not None:
        return error.kind == UploadErrorKind.NO_FILES_FOUND
    return NO_FILES_FOUND_MARKER in str(error)


def classify_failure(error: BaseException) -> UploadOutcome:
    if is_no_files_found(error):
        return UploadOutcome.no_files(error)
    return UploadOutcome.fail(error)


def extract_diagnostics(error: BaseException) -> StorageDiagnostics:
    """
    Collect structured failure details.

    UploadError carries them explicitly. Other exceptions are read the way
    botocore's ClientError exposes them: a ``response`` mapping holding
    ``ResponseMetadata`` and ``Error.Code``, or a ``code`` attribute.
    """
    cause = error.__cause__

    if isinstance(error, UploadError) and error.diagnostics is not None:
        diagnostics = error.diagnostics
        if diagnostics.cause is None and cause is not None:
            diagnostics = replace(diagnostics, cause=cause)
        return diagnostics

    metadata: Optional[Mapping[str, Any]] = None
    code: Any = None

    response = getattr(error, "response", None)
    if isinstance(response, Mapping):
        response_metadata = response.get("ResponseMetadata")
        if isinstance(response_metadata, Mapping):
            metadata = response_metadata
        error_info = response.get("Error")
        if isinstance(error_info, Mapping):
            code = error_info.get("Code")

    if code is None:
        code = getattr(error, "code", None)
    if code is None:
        code = getattr(error, "Code", None)

    return StorageDiagnostics(
        metadata=metadata,
        code=None if code is None else str(code),
        cause=cause,
    )

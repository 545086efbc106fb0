"""Exception hierarchy for artifact uploader."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class ArtifactUploaderError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(ArtifactUploaderError):
    """A required input is missing or the run cannot be configured."""


class UploadErrorKind(Enum):
    """Typed failure categories a collaborator may attach to an error."""
    NO_FILES_FOUND = "no_files_found"
    STORAGE = "storage"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class StorageDiagnostics:
    """Structured details surfaced when an upload fails.

    Each field is optional; the reporter emits one line per present field.
    """
    metadata: Optional[Mapping[str, Any]] = None
    code: Optional[str] = None
    cause: Optional[Any] = None

    @property
    def is_empty(self) -> bool:
        return self.metadata is None and self.code is None and self.cause is None


class UploadError(ArtifactUploaderError):
    """Failure raised by (or on behalf of) the uploading collaborator."""

    def __init__(
        self,
        message: str,
        kind: Optional[UploadErrorKind] = None,
        diagnostics: Optional[StorageDiagnostics] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.diagnostics = diagnostics


class NoFilesFoundError(UploadError):
    """No files matched the requested paths."""

    def __init__(self, message: str = "No files found", diagnostics: Optional[StorageDiagnostics] = None):
        super().__init__(message, kind=UploadErrorKind.NO_FILES_FOUND, diagnostics=diagnostics)

"""
Models for artifact uploader.

Immutable dataclasses, one instance of each per run.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from .errors import UploadError

DEFAULT_ARTIFACT_NAME = "artifact"
DEFAULT_REGION = "us-east-1"
DEFAULT_COMPRESSION_LEVEL = 6
UNKNOWN_REPOSITORY = "unknown/unknown"


class NoFilesFoundPolicy(Enum):
    """Behavior when no files match the given paths."""
    WARN = "warn"
    IGNORE = "ignore"
    ERROR = "error"

    @classmethod
    def parse(cls, value: Optional[str]) -> "NoFilesFoundPolicy":
        """Map an input string to a policy; unrecognized values fall back to ERROR."""
        if not value:
            return cls.WARN
        try:
            return cls(value)
        except ValueError:
            return cls.ERROR


@dataclass(frozen=True)
class StorageConfig:
    """Where the artifact is stored."""
    bucket: str
    prefix: Optional[str] = None
    endpoint: Optional[str] = None
    region: str = DEFAULT_REGION
    force_path_style: bool = False

    def __post_init__(self):
        # Custom endpoints are treated as non-AWS and need path-style addressing.
        if self.endpoint and not self.force_path_style:
            object.__setattr__(self, "force_path_style", True)


@dataclass(frozen=True)
class RunContext:
    """Identity of the pipeline run producing the artifact."""
    repository: str = UNKNOWN_REPOSITORY
    run_id: int = 0
    run_attempt: int = 1


@dataclass(frozen=True)
class UploadRequest:
    """What to upload and how."""
    root_directory: Path
    paths: Tuple[str, ...] = ()
    name: str = DEFAULT_ARTIFACT_NAME
    retention_days: Optional[int] = None  # None = collaborator default
    compression_level: Optional[int] = DEFAULT_COMPRESSION_LEVEL
    overwrite: bool = False
    include_hidden_files: bool = False


@dataclass(frozen=True)
class UploadResult:
    """Opaque identifiers assigned by the uploading collaborator."""
    id: Any
    url: Any
    digest: Any

    @classmethod
    def from_value(cls, value: Any) -> "UploadResult":
        """Accept an UploadResult, a mapping or any object exposing id/url/digest."""
        if isinstance(value, cls):
            return value

        if isinstance(value, Mapping):
            missing = [key for key in ("id", "url", "digest") if key not in value]
            if missing:
                raise UploadError(f"Uploader result is missing fields: {', '.join(missing)}")
            return cls(id=value["id"], url=value["url"], digest=value["digest"])

        missing = [key for key in ("id", "url", "digest") if not hasattr(value, key)]
        if missing:
            raise UploadError(
                f"Uploader returned {type(value).__name__} without fields: {', '.join(missing)}"
            )
        return cls(id=value.id, url=value.url, digest=value.digest)


@dataclass(frozen=True)
class RawInputs:
    """Step inputs as strings, with defaults applied."""
    path: str
    s3_bucket: str
    name: str = DEFAULT_ARTIFACT_NAME
    if_no_files_found: str = NoFilesFoundPolicy.WARN.value
    retention_days: str = "0"
    compression_level: str = str(DEFAULT_COMPRESSION_LEVEL)
    overwrite: str = "false"
    include_hidden_files: str = "false"
    s3_prefix: str = ""
    s3_endpoint: str = ""
    s3_region: str = DEFAULT_REGION
    s3_force_path_style: str = "false"

    @property
    def no_files_policy(self) -> NoFilesFoundPolicy:
        return NoFilesFoundPolicy.parse(self.if_no_files_found)


@dataclass(frozen=True)
class ActionEnvironment:
    """
    Everything the run reads from its surroundings.

    Built once at the process boundary so nothing below the CLI touches
    os.environ. Credentials are captured as lengths only. ``cwd`` is
    required; a relative workspace resolves against it.
    """
    cwd: str
    inputs: Mapping[str, str] = field(default_factory=dict)
    repository: Optional[str] = None
    run_id: Optional[str] = None
    run_attempt: Optional[str] = None
    workspace: Optional[str] = None
    output_file: Optional[str] = None
    access_key_id_length: Optional[int] = None
    secret_access_key_length: Optional[int] = None

    @staticmethod
    def input_key(name: str) -> str:
        """Key of an input, as in INPUT_<KEY> set by the runner."""
        return name.replace(" ", "_").upper()

    @classmethod
    def from_environ(cls, environ: Mapping[str, str], cwd: str) -> "ActionEnvironment":
        inputs = {
            key[len("INPUT_"):]: value
            for key, value in environ.items()
            if key.startswith("INPUT_")
        }

        def _length(key: str) -> Optional[int]:
            value = environ.get(key)
            return None if value is None else len(value)

        return cls(
            inputs=inputs,
            repository=environ.get("GITHUB_REPOSITORY"),
            run_id=environ.get("GITHUB_RUN_ID"),
            run_attempt=environ.get("GITHUB_RUN_ATTEMPT"),
            workspace=environ.get("GITHUB_WORKSPACE"),
            cwd=cwd,
            output_file=environ.get("GITHUB_OUTPUT"),
            access_key_id_length=_length("AWS_ACCESS_KEY_ID"),
            secret_access_key_length=_length("AWS_SECRET_ACCESS_KEY"),
        )

    def get_input(self, name: str) -> str:
        """Raw input value, empty string when unset."""
        return self.inputs.get(self.input_key(name), "")

"""Translate run state and upload outcomes into pipeline signals."""
from __future__ import annotations

import json
import logging
import traceback
from typing import Any, Mapping

from .errors import StorageDiagnostics
from .models import ActionEnvironment, NoFilesFoundPolicy, StorageConfig, UploadRequest, UploadResult
from .protocols import IPipeline
from .use_cases.classify import OutcomeKind, UploadOutcome, extract_diagnostics

logger = logging.getLogger(__name__)

OUTPUT_ARTIFACT_ID = "artifact-id"
OUTPUT_ARTIFACT_URL = "artifact-url"
OUTPUT_ARTIFACT_DIGEST = "artifact-digest"


def describe_exception(exc: BaseException) -> str:
    message = str(exc)
    if message:
        return message
    return type(exc).__name__


def _render(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, BaseException):
        return json.dumps({"type": type(value).__name__, "message": str(value)})
    if isinstance(value, Mapping):
        value = dict(value)
    try:
        return json.dumps(value, default=str)
    except (TypeError, ValueError):
        return str(value)


def no_files_message(raw_path: str) -> str:
    return (
        f"No files were found with the provided path: {raw_path}. "
        "No artifacts will be uploaded."
    )


class Reporter:
    """Writes every user-visible message of a run through an IPipeline."""

    def __init__(self, pipeline: IPipeline):
        self._pipeline = pipeline

    def announce(self, request: UploadRequest, storage: StorageConfig) -> None:
        self._pipeline.info(f"Artifact name: {request.name}")
        self._pipeline.info(f"Paths: {', '.join(request.paths)}")
        self._pipeline.info(f"S3 bucket: {storage.bucket}")
        if storage.prefix:
            self._pipeline.info(f"S3 prefix: {storage.prefix}")
        if storage.endpoint:
            self._pipeline.info(f"S3 endpoint: {storage.endpoint}")

    def report_credentials(self, env: ActionEnvironment) -> None:
        """Presence and length only, never the values."""
        credentials = (
            ("AWS_ACCESS_KEY_ID", env.access_key_id_length),
            ("AWS_SECRET_ACCESS_KEY", env.secret_access_key_length),
        )
        for label, length in credentials:
            self._pipeline.debug(f"{label} present: {'true' if length else 'false'}")
        for label, length in credentials:
            self._pipeline.debug(f"{label} length: {length or 0}")

    def report(self, outcome: UploadOutcome, policy: NoFilesFoundPolicy, raw_path: str) -> None:
        if outcome.kind == OutcomeKind.SUCCESS:
            self.report_success(outcome.result)
        elif outcome.kind == OutcomeKind.NO_FILES_FOUND:
            self.report_no_files(policy, raw_path)
        else:
            self.report_failure(outcome.error)

    def report_success(self, result: UploadResult) -> None:
        self._pipeline.set_output(OUTPUT_ARTIFACT_ID, result.id)
        self._pipeline.set_output(OUTPUT_ARTIFACT_URL, result.url)
        self._pipeline.set_output(OUTPUT_ARTIFACT_DIGEST, result.digest)

        self._pipeline.info("")
        self._pipeline.info("Artifact upload complete!")
        self._pipeline.info(f"  ID: {result.id}")
        self._pipeline.info(f"  URL: {result.url}")
        self._pipeline.info(f"  Digest: {result.digest}")

    def report_no_files(self, policy: NoFilesFoundPolicy, raw_path: str) -> None:
        message = no_files_message(raw_path)
        logger.debug("No files found, applying policy %s", policy.value)
        if policy == NoFilesFoundPolicy.WARN:
            self._pipeline.warning(message)
        elif policy == NoFilesFoundPolicy.IGNORE:
            self._pipeline.info(message)
        else:
            self._pipeline.set_failed(message)

    def report_failure(self, error: BaseException) -> None:
        self._pipeline.set_failed(describe_exception(error))
        if error.__traceback__ is not None:
            self._pipeline.debug(
                "".join(traceback.format_exception(type(error), error, error.__traceback__))
            )
        self.report_diagnostics(extract_diagnostics(error))

    def report_diagnostics(self, diagnostics: StorageDiagnostics) -> None:
        if diagnostics.metadata is not None:
            self._pipeline.error(f"Storage provider metadata: {_render(diagnostics.metadata)}")
        if diagnostics.code is not None:
            self._pipeline.error(f"Error Code: {diagnostics.code}")
        if diagnostics.cause is not None:
            self._pipeline.error(f"Cause: {_render(diagnostics.cause)}")

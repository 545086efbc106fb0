"""Tests for the reporter."""
from pathlib import Path
from unittest.mock import Mock, call

from artifact_uploader.errors import StorageDiagnostics, UploadError
from artifact_uploader.models import (
    ActionEnvironment,
    NoFilesFoundPolicy,
    StorageConfig,
    UploadRequest,
    UploadResult,
)
from artifact_uploader.reporter import Reporter, describe_exception, no_files_message
from artifact_uploader.use_cases import UploadOutcome


def _reporter():
    pipeline = Mock()
    return Reporter(pipeline), pipeline


def test_describe_exception():
    assert describe_exception(RuntimeError("boom")) == "boom"
    assert describe_exception(TimeoutError()) == "TimeoutError"


def test_announce_with_prefix_and_endpoint():
    reporter, pipeline = _reporter()
    request = UploadRequest(root_directory=Path("/w"), paths=("dist/", "logs/"), name="web")
    storage = StorageConfig(bucket="builds", prefix="ci", endpoint="http://minio:9000")

    reporter.announce(request, storage)

    assert pipeline.info.call_args_list == [
        call("Artifact name: web"),
        call("Paths: dist/, logs/"),
        call("S3 bucket: builds"),
        call("S3 prefix: ci"),
        call("S3 endpoint: http://minio:9000"),
    ]


def test_announce_skips_unset_fields():
    reporter, pipeline = _reporter()
    reporter.announce(UploadRequest(root_directory=Path("/w"), paths=("a",)), StorageConfig(bucket="b"))
    assert pipeline.info.call_count == 3


def test_credentials_never_logs_values():
    reporter, pipeline = _reporter()
    env = ActionEnvironment(cwd="/w", access_key_id_length=20, secret_access_key_length=None)

    reporter.report_credentials(env)

    assert pipeline.debug.call_args_list == [
        call("AWS_ACCESS_KEY_ID present: true"),
        call("AWS_SECRET_ACCESS_KEY present: false"),
        call("AWS_ACCESS_KEY_ID length: 20"),
        call("AWS_SECRET_ACCESS_KEY length: 0"),
    ]


def test_success_sets_outputs_verbatim():
    reporter, pipeline = _reporter()
    result = UploadResult(id="a1", url="https://x", digest="sha256:deadbeef")

    reporter.report(UploadOutcome.ok(result), NoFilesFoundPolicy.WARN, "dist")

    assert pipeline.set_output.call_args_list == [
        call("artifact-id", "a1"),
        call("artifact-url", "https://x"),
        call("artifact-digest", "sha256:deadbeef"),
    ]
    assert call("Artifact upload complete!") in pipeline.info.call_args_list
    assert call("  Digest: sha256:deadbeef") in pipeline.info.call_args_list
    pipeline.set_failed.assert_not_called()


def test_no_files_warn():
    reporter, pipeline = _reporter()
    reporter.report(UploadOutcome.no_files(RuntimeError("No files found")), NoFilesFoundPolicy.WARN, "dist/**")
    pipeline.warning.assert_called_once_with(no_files_message("dist/**"))
    pipeline.set_failed.assert_not_called()
    pipeline.set_output.assert_not_called()


def test_no_files_ignore():
    reporter, pipeline = _reporter()
    reporter.report(UploadOutcome.no_files(RuntimeError("No files found")), NoFilesFoundPolicy.IGNORE, "dist")
    pipeline.info.assert_called_once_with(
        "No files were found with the provided path: dist. No artifacts will be uploaded."
    )
    pipeline.warning.assert_not_called()
    pipeline.set_failed.assert_not_called()


def test_no_files_error():
    reporter, pipeline = _reporter()
    reporter.report(UploadOutcome.no_files(RuntimeError("No files found")), NoFilesFoundPolicy.ERROR, "dist")
    pipeline.set_failed.assert_called_once_with(no_files_message("dist"))


def test_failure_with_diagnostics():
    reporter, pipeline = _reporter()
    error = UploadError(
        "Access Denied",
        diagnostics=StorageDiagnostics(
            metadata={"httpStatusCode": 403, "requestId": "R1"},
            code="AccessDenied",
            cause=ConnectionResetError("reset"),
        ),
    )

    reporter.report(UploadOutcome.fail(error), NoFilesFoundPolicy.WARN, "dist")

    pipeline.set_failed.assert_called_once_with("Access Denied")
    assert pipeline.error.call_args_list == [
        call('Storage provider metadata: {"httpStatusCode": 403, "requestId": "R1"}'),
        call("Error Code: AccessDenied"),
        call('Cause: {"type": "ConnectionResetError", "message": "reset"}'),
    ]


def test_failure_without_diagnostics_emits_no_error_lines():
    reporter, pipeline = _reporter()
    reporter.report_failure(ValueError("bad"))
    pipeline.set_failed.assert_called_once_with("bad")
    pipeline.error.assert_not_called()


def test_failure_traceback_goes_to_debug():
    reporter, pipeline = _reporter()
    try:
        raise RuntimeError("exploded")
    except RuntimeError as exc:
        reporter.report_failure(exc)
    traceback_text = pipeline.debug.call_args[0][0]
    assert "Traceback" in traceback_text
    assert "RuntimeError: exploded" in traceback_text


def test_string_cause_rendered_verbatim():
    reporter, pipeline = _reporter()
    reporter.report_diagnostics(StorageDiagnostics(cause="socket hang up"))
    pipeline.error.assert_called_once_with("Cause: socket hang up")


def test_unserializable_metadata_falls_back_to_str():
    reporter, pipeline = _reporter()
    metadata = {("region", 1): "eu-west-1"}
    reporter.report_failure(UploadError("denied", diagnostics=StorageDiagnostics(metadata=metadata, code="X")))
    pipeline.set_failed.assert_called_once_with("denied")
    assert pipeline.error.call_args_list == [
        call(f"Storage provider metadata: {metadata}"),
        call("Error Code: X"),
    ]

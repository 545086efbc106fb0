"""
Protocols (Interfaces) for Dependency Inversion.

The uploading collaborator and the pipeline command sink are injected,
so the orchestration can run against fakes in tests.
"""
from typing import Any, Protocol, runtime_checkable

from .models import RunContext, StorageConfig, UploadRequest


@runtime_checkable
class IArtifactUploader(Protocol):
    """Interface for the external collaborator that performs the transfer."""

    def upload(
        self,
        config: StorageConfig,
        context: RunContext,
        request: UploadRequest,
    ) -> Any:
        """Upload the artifact; may return the result or an awaitable of it."""
        ...


@runtime_checkable
class IPipeline(Protocol):
    """Interface for pipeline-visible signals (log lines, outputs, failure)."""

    def info(self, message: str) -> None:
        ...

    def debug(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...

    def set_output(self, name: str, value: Any) -> None:
        ...

    def set_failed(self, message: str) -> None:
        ...

    @property
    def exit_code(self) -> int:
        ...

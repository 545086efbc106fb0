"""
Artifact uploader - CI step that stores a build artifact in S3-compatible storage.

The transfer itself is delegated to an injected uploader; this package
resolves inputs, builds the request, classifies the outcome and reports it
to the pipeline.

Usage:
    from artifact_uploader import ActionEnvironment, ActionOrchestrator, GitHubActionsPipeline

    env = ActionEnvironment.from_environ(os.environ, cwd=os.getcwd())
    pipeline = GitHubActionsPipeline(env.output_file)
    exit_code = await ActionOrchestrator(env, my_uploader, pipeline).run()

    # my_uploader(config, context, request) -> {"id": ..., "url": ..., "digest": ...}
"""
__version__ = "0.1.0"

from .errors import (
    ArtifactUploaderError,
    ConfigurationError,
    NoFilesFoundError,
    StorageDiagnostics,
    UploadError,
    UploadErrorKind,
)
from .models import (
    ActionEnvironment,
    NoFilesFoundPolicy,
    RawInputs,
    RunContext,
    StorageConfig,
    UploadRequest,
    UploadResult,
)
from .orchestrator import ActionOrchestrator, UploadHandler
from .services import GitHubActionsPipeline, load_uploader

__all__ = [
    # Main
    "ActionOrchestrator",
    "UploadHandler",
    # Models
    "ActionEnvironment",
    "NoFilesFoundPolicy",
    "RawInputs",
    "RunContext",
    "StorageConfig",
    "UploadRequest",
    "UploadResult",
    # Errors
    "ArtifactUploaderError",
    "ConfigurationError",
    "NoFilesFoundError",
    "StorageDiagnostics",
    "UploadError",
    "UploadErrorKind",
    # Services
    "GitHubActionsPipeline",
    "load_uploader",
]

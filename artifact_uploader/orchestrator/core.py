"""Core orchestrator - one artifact upload per process."""
from __future__ import annotations

import logging
from typing import Any, Callable

from ..inputs import resolve_inputs
from ..models import ActionEnvironment
from ..protocols import IPipeline
from ..reporter import Reporter
from ..use_cases import (
    assemble,
    build_upload_request,
    classify_failure,
    classify_result,
    resolve_root_directory,
)
from .upload_handler import UploadHandler

logger = logging.getLogger(__name__)


class ActionOrchestrator:
    """
    Runs the step: resolve inputs, assemble config, build the request,
    upload, classify the outcome and report it.

    Usage:
        pipeline = GitHubActionsPipeline(env.output_file)
        exit_code = await ActionOrchestrator(env, uploader, pipeline).run()
    """

    def __init__(self, env: ActionEnvironment, uploader: Callable[..., Any], pipeline: IPipeline):
        self._env = env
        self._handler = UploadHandler(uploader)
        self._pipeline = pipeline
        self._reporter = Reporter(pipeline)

    async def run(self) -> int:
        """Returns the process exit code; never raises for an ordinary failure."""
        try:
            await self._run()
        except Exception as exc:
            logger.error("Artifact upload failed: %s", exc, exc_info=True)
            self._reporter.report_failure(exc)
        return self._pipeline.exit_code

    async def _run(self) -> None:
        raw = resolve_inputs(self._env)
        storage, context = assemble(raw, self._env)
        request = build_upload_request(raw, resolve_root_directory(self._env))

        self._reporter.announce(request, storage)
        self._reporter.report_credentials(self._env)

        try:
            result = await self._handler.invoke(storage, context, request)
        except Exception as exc:
            outcome = classify_failure(exc)
        else:
            outcome = classify_result(result)

        logger.debug("Upload outcome: %s", outcome.kind.value)
        self._reporter.report(outcome, raw.no_files_policy, raw.path)

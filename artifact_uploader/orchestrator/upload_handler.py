"""Single upload call to the external collaborator."""
from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

from ..models import RunContext, StorageConfig, UploadRequest, UploadResult

logger = logging.getLogger(__name__)


class UploadHandler:
    """
    Invokes the uploader callable exactly once; it may be sync or async.

    No timeout and no retry here: both belong to the uploader. Whatever it
    raises propagates unchanged.
    """

    def __init__(self, uploader: Callable[..., Any]):
        self._upload = uploader

    async def invoke(
        self,
        config: StorageConfig,
        context: RunContext,
        request: UploadRequest,
    ) -> UploadResult:
        logger.debug(
            "Upload started: name=%s paths=%d bucket=%s run=%s/%s",
            request.name,
            len(request.paths),
            config.bucket,
            context.run_id,
            context.run_attempt,
        )
        outcome = self._upload(config, context, request)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        result = UploadResult.from_value(outcome)
        logger.debug("Upload finished: id=%s", result.id)
        return result

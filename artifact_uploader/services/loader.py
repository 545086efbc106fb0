"""Resolve the uploading collaborator from a ``module:attribute`` path."""
from __future__ import annotations

import importlib
import inspect
import logging
from typing import Any, Callable, Optional

from ..errors import ConfigurationError
from ..protocols import IArtifactUploader

logger = logging.getLogger(__name__)

UPLOADER_ENV_VAR = "ARTIFACT_UPLOADER"


def load_uploader(ref: Optional[str]) -> Callable[..., Any]:
    """
    Import the collaborator entry point.

    The attribute may be a callable taking (config, context, request), an
    object whose ``upload`` method does, or a class with such a method that
    can be instantiated without arguments.
    """
    if not ref:
        raise ConfigurationError(
            f"No uploader configured: pass --uploader or set {UPLOADER_ENV_VAR} (module:attribute)"
        )

    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigurationError(f"Uploader must be given as module:attribute, got {ref!r}")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"cannot import uploader module {module_name!r}: {exc}") from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ConfigurationError(f"uploader {ref!r} not found: {exc}") from exc

    if inspect.isclass(target) and isinstance(target, IArtifactUploader):
        try:
            target = target()
        except TypeError as exc:
            raise ConfigurationError(
                f"cannot instantiate uploader class {ref!r} without arguments: {exc}; "
                "point at an instance or a function instead"
            ) from exc

    if isinstance(target, IArtifactUploader):
        logger.debug("Using %s.upload as uploader", ref)
        return target.upload
    if callable(target):
        logger.debug("Using %s as uploader", ref)
        return target
    raise ConfigurationError(f"uploader {ref!r} is not callable and has no upload method")

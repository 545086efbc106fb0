"""Tests for uploader loading."""
import sys
import types
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from artifact_uploader.errors import ConfigurationError
from artifact_uploader.models import RunContext, StorageConfig, UploadRequest, UploadResult
from artifact_uploader.orchestrator import UploadHandler
from artifact_uploader.services.loader import load_uploader


def test_loads_function():
    import json

    assert load_uploader("json:dumps") is json.dumps


def test_loads_upload_method(monkeypatch):
    class Backend:
        def __init__(self):
            self.upload = AsyncMock()

    module = types.ModuleType("fake_backend_object")
    module.client = Backend()
    monkeypatch.setitem(sys.modules, "fake_backend_object", module)

    assert load_uploader("fake_backend_object:client") is module.client.upload


@pytest.mark.asyncio
async def test_loads_class_by_instantiating_it(monkeypatch):
    class S3Uploader:
        def upload(self, config, context, request):
            return {"id": "a1", "url": "https://x", "digest": "d"}

    module = types.ModuleType("fake_backend_class")
    module.S3Uploader = S3Uploader
    monkeypatch.setitem(sys.modules, "fake_backend_class", module)

    uploader = load_uploader("fake_backend_class:S3Uploader")

    assert isinstance(uploader.__self__, S3Uploader)
    result = await UploadHandler(uploader).invoke(
        StorageConfig(bucket="b"), RunContext(), UploadRequest(root_directory=Path("/w"), paths=("dist",))
    )
    assert result == UploadResult(id="a1", url="https://x", digest="d")


def test_class_needing_arguments_is_a_configuration_error(monkeypatch):
    class S3Uploader:
        def __init__(self, client):
            self.client = client

        def upload(self, config, context, request):
            return None

    module = types.ModuleType("fake_backend_class_args")
    module.S3Uploader = S3Uploader
    monkeypatch.setitem(sys.modules, "fake_backend_class_args", module)

    with pytest.raises(ConfigurationError, match="point at an instance or a function"):
        load_uploader("fake_backend_class_args:S3Uploader")


def test_nested_attribute():
    import os.path

    assert load_uploader("os:path.join") is os.path.join


@pytest.mark.parametrize("ref", [None, ""])
def test_missing_ref(ref):
    with pytest.raises(ConfigurationError, match="No uploader configured"):
        load_uploader(ref)


@pytest.mark.parametrize("ref", ["json", "json:", ":dumps"])
def test_bad_format(ref):
    with pytest.raises(ConfigurationError, match="module:attribute"):
        load_uploader(ref)


def test_unknown_module():
    with pytest.raises(ConfigurationError, match="cannot import"):
        load_uploader("no_such_module_for_artifacts:upload")


def test_unknown_attribute():
    with pytest.raises(ConfigurationError, match="not found"):
        load_uploader("json:no_such_function")


def test_not_callable():
    with pytest.raises(ConfigurationError, match="not callable"):
        load_uploader("json:__name__")

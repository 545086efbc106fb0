"""Tests for the composite action definition."""
import re
from pathlib import Path

from artifact_uploader.services import UPLOADER_ENV_VAR

ACTION_FILE = Path(__file__).resolve().parent.parent / "action.yml"


def _action_text():
    return ACTION_FILE.read_text(encoding="utf-8")


def _declared_inputs(text):
    section = text.split("\ninputs:\n", 1)[1].split("\noutputs:\n", 1)[0]
    return re.findall(r"^  ([a-z0-9-]+):$", section, flags=re.MULTILINE)


def test_installs_package_before_running():
    text = _action_text()
    install = text.index('pip install --quiet "$GITHUB_ACTION_PATH"')
    assert install < text.index("python3 -m artifact_uploader")


def test_uploader_input_is_passed_to_the_loader():
    text = _action_text()
    assert "uploader" in _declared_inputs(text)
    assert f"{UPLOADER_ENV_VAR}: ${{{{ inputs.uploader }}}}" in text


def test_step_inputs_are_exported():
    text = _action_text()
    for name in _declared_inputs(text):
        if name.startswith("uploader"):
            continue
        assert f"INPUT_{name.upper()}: ${{{{ inputs.{name} }}}}" in text

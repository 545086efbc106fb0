"""
Workflow Commands Service - Single Responsibility: talk to the Actions runner.

Log lines go to stdout as workflow commands; outputs are appended to the
file named by GITHUB_OUTPUT.
"""
from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any, Optional, TextIO

from rich.console import Console

logger = logging.getLogger(__name__)


def to_command_value(value: Any) -> str:
    """Render an output value: strings verbatim, None empty, anything else as JSON."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str)


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsPipeline:
    """
    Pipeline signals for a GitHub Actions step.

    Tracks the failed state so the caller can turn it into an exit code.
    """

    def __init__(self, output_file: Optional[str] = None, stream: Optional[TextIO] = None):
        self._output_file = Path(output_file) if output_file else None
        self._console = Console(file=stream, highlight=False, soft_wrap=True)
        self._exit_code = 0

    @property
    def exit_code(self) -> int:
        return self._exit_code

    def _write(self, line: str) -> None:
        self._console.out(line, highlight=False)

    def issue_command(self, command: str, message: str = "", **properties: str) -> None:
        rendered = f"::{command}"
        if properties:
            rendered += " " + ",".join(
                f"{key}={escape_property(str(value))}" for key, value in properties.items()
            )
        self._write(f"{rendered}::{escape_data(message)}")

    def info(self, message: str) -> None:
        self._write(message)

    def debug(self, message: str) -> None:
        self.issue_command("debug", message)

    def warning(self, message: str) -> None:
        self.issue_command("warning", message)

    def error(self, message: str) -> None:
        self.issue_command("error", message)

    def set_output(self, name: str, value: Any) -> None:
        rendered = to_command_value(value)
        if self._output_file is None:
            self._write("")
            self.issue_command("set-output", rendered, name=name)
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name:
            raise ValueError(f"Unexpected input: name should not contain the delimiter \"{delimiter}\"")
        if delimiter in rendered:
            raise ValueError(f"Unexpected input: value should not contain the delimiter \"{delimiter}\"")

        with self._output_file.open("a", encoding="utf-8") as handle:
            handle.write(f"{name}<<{delimiter}\n{rendered}\n{delimiter}\n")
        logger.debug("Wrote output %s to %s", name, self._output_file)

    def set_failed(self, message: str) -> None:
        self._exit_code = 1
        self.error(message)

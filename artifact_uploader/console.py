"""Console rendering helpers for the artifact uploader CLI."""
from __future__ import annotations

from typing import Any, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .inputs import InputResolver
from .models import DEFAULT_ARTIFACT_NAME, DEFAULT_REGION, ActionEnvironment
from .use_cases.request import parse_paths

stderr_console = Console(stderr=True)


def build_configuration_summary(env: ActionEnvironment, uploader: Optional[str]) -> Dict[str, Any]:
    """Summarize inputs without validating them; the run reports missing ones."""
    inputs = InputResolver(env)
    return {
        "Artifact": inputs.get_input("name", default=DEFAULT_ARTIFACT_NAME),
        "Path": ", ".join(parse_paths(inputs.get_input("path"))) or "(missing)",
        "If No Files": inputs.get_input("if-no-files-found", default="warn"),
        "Bucket": inputs.get_input("s3-bucket") or "(missing)",
        "Prefix": inputs.get_input("s3-prefix") or None,
        "Endpoint": inputs.get_input("s3-endpoint") or "(AWS)",
        "Region": inputs.get_input("s3-region", default=DEFAULT_REGION),
        "Repository": env.repository or "(unset)",
        "Workspace": env.workspace or env.cwd,
        "Outputs": env.output_file or "(workflow commands)",
        "Uploader": uploader or "(missing)",
    }


def render_configuration_summary(config: Dict[str, Any], console: Optional[Console] = None) -> None:
    """Render startup configuration summary."""
    target = console or stderr_console
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column(style="white")

    for key, value in config.items():
        rendered = "-" if value is None else str(value)
        table.add_row(key, Text(rendered))

    panel = Panel(
        table,
        title="[bold green]artifact-s3-upload[/bold green]",
        subtitle="[dim]artifact uploader[/dim]",
        border_style="blue",
    )
    target.print(panel)

"""Command line interface for artifact uploader."""
from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from rich.logging import RichHandler

from . import __version__
from .console import build_configuration_summary, render_configuration_summary, stderr_console
from .errors import ConfigurationError
from .models import ActionEnvironment
from .orchestrator import ActionOrchestrator
from .services import UPLOADER_ENV_VAR, GitHubActionsPipeline, load_uploader


class CLIError(RuntimeError):
    """Raised when CLI validation/execution fails."""


def _setup_logging(debug: bool, silent: bool, log_level: Optional[str]) -> str:
    """
    Configure logging.

    Default behavior is silent unless --debug or a log level is provided.
    Returns a string describing effective mode.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    logging.disable(logging.NOTSET)

    if silent or (not debug and not log_level):
        logging.disable(logging.CRITICAL)
        root_logger.setLevel(logging.CRITICAL + 1)
        return "silent"

    if debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, log_level.upper(), logging.INFO)

    # stdout carries workflow commands, so logs go to stderr.
    handler = RichHandler(
        console=stderr_console,
        rich_tracebacks=True,
        markup=False,
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return logging.getLevelName(level)


def _strip_optional_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    return value


def _load_env_file(path: Path) -> Dict[str, str]:
    if not path.exists():
        raise CLIError(f"env file not found: {path}")
    if not path.is_file():
        raise CLIError(f"env path is not a file: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CLIError(f"could not read env file {path}: {exc}") from exc

    values: Dict[str, str] = {}
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue

        values[key] = _strip_optional_quotes(value.strip())
    return values


def _resolve_default_env_file() -> Optional[Path]:
    default_env = Path(".env")
    return default_env if default_env.exists() and default_env.is_file() else None


def _parse_input_overrides(pairs: Optional[Sequence[str]]) -> Dict[str, str]:
    """Parse repeated NAME=VALUE arguments; a literal \\n in VALUE becomes a newline."""
    overrides: Dict[str, str] = {}
    for pair in pairs or ():
        name, sep, value = pair.partition("=")
        name = name.strip()
        if not sep or not name:
            raise CLIError(f"invalid --input {pair!r}, expected NAME=VALUE")
        overrides[name] = value.replace("\\n", "\n")
    return overrides


def _build_environ(
    base: Mapping[str, str],
    env_file: Optional[Path],
    overrides: Mapping[str, str],
) -> Dict[str, str]:
    """Process environment, then .env values it lacks, then --input overrides."""
    environ = dict(base)
    if env_file is not None:
        for key, value in _load_env_file(env_file).items():
            environ.setdefault(key, value)
    for name, value in overrides.items():
        environ["INPUT_" + ActionEnvironment.input_key(name)] = value
    return environ


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="artifact-s3-upload",
        description="Upload a build artifact to S3-compatible storage from a CI step.",
    )
    parser.add_argument(
        "-u",
        "--uploader",
        default=None,
        help=f"Uploader entry point as module:attribute (default from {UPLOADER_ENV_VAR})",
    )
    parser.add_argument(
        "-i",
        "--input",
        action="append",
        default=None,
        metavar="NAME=VALUE",
        help="Set a step input, e.g. -i path=dist/ -i s3-bucket=my-bucket",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Load environment variables from this .env file",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the resolved configuration before uploading",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logs")
    parser.add_argument("--silent", action="store_true", help="Only print pipeline messages")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Explicit log level (DEBUG/INFO/WARNING/ERROR), default from LOG_LEVEL",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"artifact-s3-upload {__version__}",
    )
    return parser


def run_cli(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[str] = None,
) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    base = os.environ if environ is None else environ
    used_env_file = args.env_file or _resolve_default_env_file()
    try:
        merged = _build_environ(base, used_env_file, _parse_input_overrides(args.input))
    except CLIError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    _setup_logging(
        debug=args.debug,
        silent=args.silent,
        log_level=args.log_level or merged.get("LOG_LEVEL"),
    )

    env = ActionEnvironment.from_environ(merged, cwd=cwd or os.getcwd())
    pipeline = GitHubActionsPipeline(env.output_file)
    uploader_ref = args.uploader or merged.get(UPLOADER_ENV_VAR)

    if args.summary:
        render_configuration_summary(build_configuration_summary(env, uploader_ref))

    try:
        uploader = load_uploader(uploader_ref)
    except ConfigurationError as exc:
        pipeline.set_failed(str(exc))
        return pipeline.exit_code

    try:
        return asyncio.run(ActionOrchestrator(env, uploader, pipeline).run())
    except KeyboardInterrupt:
        print("Cancelled.", file=sys.stderr)
        return 130


def main() -> None:
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()

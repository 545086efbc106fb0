"""Services for artifact uploader."""
from .loader import UPLOADER_ENV_VAR, load_uploader
from .workflow import GitHubActionsPipeline, to_command_value

__all__ = [
    "GitHubActionsPipeline",
    "UPLOADER_ENV_VAR",
    "load_uploader",
    "to_command_value",
]

"""Orchestrator package - coordinates the upload step."""
from .core import ActionOrchestrator
from .upload_handler import UploadHandler

__all__ = ["ActionOrchestrator", "UploadHandler"]

from __future__ import annotations

"""Centralised error types for the image generator.

Each custom error is JSON-serialisable via ``to_dict`` so the dispatcher can
attach machine-readable diagnostics to protocol errors.
"""

from typing import Any, Dict, Optional


class ImageGeneratorError(Exception):
    """Base class for all structured image generator exceptions."""

    code: str = "IMAGE_GENERATOR_ERROR"

    def __init__(self, message: str, *, data: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class UnsupportedOperation(ImageGeneratorError):
    code = "UNSUPPORTED_OPERATION"


class InvalidArguments(ImageGeneratorError):
    code = "INVALID_ARGUMENTS"


class UpstreamGenerationError(ImageGeneratorError):
    code = "UPSTREAM_GENERATION_ERROR"


class FileSaveError(ImageGeneratorError):
    code = "FILESYSTEM_ERROR"

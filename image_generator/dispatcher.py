from __future__ import annotations

"""Routing and response shaping for the ``generate_image`` tool."""

import re
from typing import Any, Protocol

import mcp.types as types
from loguru import logger
from mcp.shared.exceptions import McpError

from image_generator.errors import (
    FileSaveError,
    ImageGeneratorError,
    InvalidArguments,
    UnsupportedOperation,
    UpstreamGenerationError,
)
from image_generator.models import (
    PNG_MIME_TYPE,
    GenerationRequest,
    GenerationResult,
    is_valid_generation_args,
)

TOOL_NAME = "generate_image"

INPUT_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "prompt": {
            "type": "string",
            "description": "A prompt detailing what image to generate.",
        },
        "imageName": {
            "type": "string",
            "description": "The filename for the image excluding any extensions.",
        },
        "shouldSaveToFile": {
            "type": "boolean",
            "description": (
                "Should the image be saved on the user's computer. "
                "The 'imageName' argument is expected when this is true."
            ),
        },
    },
    "required": ["prompt"],
}

OUTPUT_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "uri": {"type": "string", "description": "file:// URI of the saved image or an inline data: URI"},
        "type": {"type": "string", "enum": ["image"]},
        "data": {"type": "string", "description": "Base64-encoded PNG bytes"},
    },
    "required": ["uri", "type", "data"],
}

_EXTENSION_RE = re.compile(r"\..*$")


class Generator(Protocol):
    async def generate_image(self, prompt: str) -> str: ...


class Saver(Protocol):
    async def save_base64(self, filename: str, encoded: str) -> str: ...


def png_filename(image_name: str) -> str:
    """Replace anything from the first dot of *image_name* with ``.png``.

    ``"cat.jpg"`` becomes ``"cat.png"``. Returns an empty string when no stem
    is left.
    """
    stem = _EXTENSION_RE.sub("", image_name)
    return f"{stem}.png" if stem else ""


def _protocol_error(code: int, err: ImageGeneratorError) -> McpError:
    return McpError(types.ErrorData(code=code, message=err.message, data=err.to_dict()))


class ImageToolDispatcher:
    """Answers list-tools and call-tool requests for the image tool.

    Holds no per-request state; the generator and saver are injected.
    """

    def __init__(self, generator: Generator, saver: Saver) -> None:
        self.generator = generator
        self.saver = saver

    def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(
                name=TOOL_NAME,
                description="Generate an image from a prompt.",
                inputSchema=INPUT_SCHEMA,
                outputSchema=OUTPUT_SCHEMA,
            )
        ]

    async def call_tool(self, name: str, arguments: Any) -> GenerationResult:
        """Validate, generate and optionally save; return the tool result.

        Raises :class:`McpError` with ``METHOD_NOT_FOUND`` for unknown tools,
        ``INVALID_PARAMS`` for malformed arguments and ``INTERNAL_ERROR`` when
        the provider or the filesystem fails.
        """
        if name != TOOL_NAME:
            logger.error("Unknown tool requested: {}", name)
            raise _protocol_error(types.METHOD_NOT_FOUND, UnsupportedOperation(f"Unknown tool: {name}"))

        if not is_valid_generation_args(arguments):
            logger.error("Rejected arguments for {}: {!r}", name, arguments)
            raise _protocol_error(types.INVALID_PARAMS, InvalidArguments("Invalid image generation arguments"))

        request = GenerationRequest.from_arguments(arguments)
        logger.info("🔧 [MCP SERVER] Tool called: {} (save={}, name={})", name, request.should_save_to_file, request.image_name)

        try:
            encoded = await self.generator.generate_image(request.prompt)

            filepath: str | None = None
            if request.should_save_to_file and request.image_name:
                filename = png_filename(request.image_name)
                if filename:
                    filepath = await self.saver.save_base64(filename, encoded)
                else:
                    logger.warning("imageName {!r} has no usable stem; returning inline image", request.image_name)
        except (UpstreamGenerationError, FileSaveError) as exc:
            logger.error("💥 [MCP SERVER] Error handling tool {}: {}", name, exc)
            raise _protocol_error(types.INTERNAL_ERROR, exc) from exc

        if filepath:
            return GenerationResult.from_file(filepath, encoded)
        return GenerationResult.inline(encoded)


def to_tool_content(result: GenerationResult) -> tuple[list[types.TextContent | types.ImageContent], dict]:
    """Split *result* into MCP content blocks and structured content."""
    content: list[types.TextContent | types.ImageContent] = [
        types.ImageContent(type="image", data=result.data, mimeType=PNG_MIME_TYPE),
    ]
    if not result.uri.startswith("data:"):
        content.append(types.TextContent(type="text", text=result.uri))
    return content, result.model_dump()

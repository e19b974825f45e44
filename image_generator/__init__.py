"""MCP server that generates images from prompts and optionally saves them."""

__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Public library API (importing this package loads the mcp and openai SDKs)
# ---------------------------------------------------------------------------

from .dispatcher import TOOL_NAME, ImageToolDispatcher  # noqa: F401,E402
from .file_saver import FileSaver  # noqa: F401,E402
from .generator import ImageGenerator  # noqa: F401,E402
from .models import GenerationRequest, GenerationResult, is_valid_generation_args  # noqa: F401,E402

__all__ = [
    "TOOL_NAME",
    "ImageToolDispatcher",
    "FileSaver",
    "ImageGenerator",
    "GenerationRequest",
    "GenerationResult",
    "is_valid_generation_args",
]

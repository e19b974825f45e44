from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Optional, TypeGuard

from pydantic import BaseModel, ConfigDict, Field

PNG_MIME_TYPE = "image/png"
DATA_URI_PREFIX = f"data:{PNG_MIME_TYPE};base64,"
FILE_URI_PREFIX = "file://"


def is_valid_generation_args(args: Any) -> TypeGuard[Mapping[str, Any]]:
    """Return *True* when *args* is an object carrying a string ``prompt``.

    Extra keys are allowed. This is a predicate, not a validator: callers
    branch on the result and raise their own protocol error.
    """
    return (
        isinstance(args, Mapping)
        and "prompt" in args
        and isinstance(args["prompt"], str)
    )


class GenerationRequest(BaseModel):
    """Arguments accepted by the ``generate_image`` tool.

    Field aliases match the camelCase names used on the wire.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    prompt: str = Field(..., description="A prompt detailing what image to generate")
    image_name: Optional[str] = Field(
        None, alias="imageName", description="The filename for the image excluding any extensions"
    )
    should_save_to_file: Optional[bool] = Field(
        None, alias="shouldSaveToFile", description="Whether the image should be written to disk"
    )

    @classmethod
    def from_arguments(cls, args: Mapping[str, Any]) -> "GenerationRequest":
        """Build a request from arguments already accepted by
        :func:`is_valid_generation_args`.

        Optional fields holding a value of the wrong type are treated as absent.
        """
        image_name = args.get("imageName")
        should_save = args.get("shouldSaveToFile")
        return cls(
            prompt=args["prompt"],
            image_name=image_name if isinstance(image_name, str) else None,
            should_save_to_file=should_save if isinstance(should_save, bool) else None,
        )


class GenerationResult(BaseModel):
    """Result of one ``generate_image`` call."""

    uri: str = Field(..., description="file:// URI of the saved image or an inline data: URI")
    type: Literal["image"] = Field("image", description="Discriminator for image payloads")
    data: str = Field(..., description="Base64-encoded PNG bytes")

    @classmethod
    def inline(cls, encoded_image: str) -> "GenerationResult":
        return cls(uri=f"{DATA_URI_PREFIX}{encoded_image}", data=encoded_image)

    @classmethod
    def from_file(cls, path: str, encoded_image: str) -> "GenerationResult":
        return cls(uri=f"{FILE_URI_PREFIX}{path}", data=encoded_image)

from __future__ import annotations

"""Writes base64-encoded images into a fixed output directory."""

import asyncio
import base64
import binascii
from pathlib import Path

from loguru import logger

from image_generator.errors import FileSaveError


class FileSaver:
    """Persist decoded image payloads below *base_dir*.

    The directory is created on first write. No collision handling is done:
    saving the same filename twice overwrites the earlier file.
    """

    def __init__(self, base_dir: str | Path) -> None:
        self.base_dir = Path(base_dir).expanduser().resolve()

    @classmethod
    def create_desktop_file_saver(cls, dir_name: str, base_dir: str | Path | None = None) -> "FileSaver":
        """Return a saver anchored at ``~/Desktop/<dir_name>``.

        Falls back to ``~/<dir_name>`` when the user has no Desktop folder.
        An explicit *base_dir* replaces the Desktop anchor.
        """
        if base_dir is None:
            desktop = Path.home() / "Desktop"
            base_dir = desktop if desktop.is_dir() else Path.home()
        return cls(Path(base_dir) / dir_name)

    def path_for(self, filename: str) -> Path:
        # only the final component is kept so callers cannot leave base_dir
        name = Path(filename).name
        if not name:
            raise FileSaveError("Empty filename", data={"filename": filename})
        return self.base_dir / name

    async def save_base64(self, filename: str, encoded: str) -> str:
        """Decode *encoded* and write it to ``base_dir/filename``.

        Returns the absolute path written.
        """
        target = self.path_for(filename)
        try:
            payload = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise FileSaveError(f"Image payload is not valid base64: {exc}", data={"path": str(target)}) from exc

        try:
            await asyncio.to_thread(self._write, target, payload)
        except OSError as exc:
            raise FileSaveError(f"Could not write image to {target}: {exc}", data={"path": str(target)}) from exc

        logger.info("💾 Saved image ({} bytes) to {}", len(payload), target)
        return str(target)

    @staticmethod
    def _write(target: Path, payload: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(payload)

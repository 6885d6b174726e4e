"""Clipboard access for the paste client."""

import asyncio
import io
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from PIL import Image, ImageGrab

# Permission states, as reported by a backend
GRANTED = "granted"
PROMPT = "prompt"
DENIED = "denied"


@dataclass(frozen=True)
class ClipboardImageContent:
    raw_bytes: bytes
    mime_type: str


@dataclass
class ClipboardItem:
    """One clipboard entry with the representations it offers, in preference order."""

    types: list[str]
    data: dict[str, bytes] = field(default_factory=dict)

    def get_type(self, mime_type: str) -> bytes:
        try:
            return self.data[mime_type]
        except KeyError:
            raise LookupError(f"Clipboard item has no {mime_type} representation") from None


class ClipboardBackend(ABC):
    @abstractmethod
    async def query_permission(self) -> str:
        """Return GRANTED, PROMPT or DENIED."""

    @abstractmethod
    async def read(self) -> list[ClipboardItem]:
        """Return the current clipboard items, first item first."""


class PillowClipboard(ClipboardBackend):
    """System clipboard through Pillow's ImageGrab.

    Desktop clipboards have no read permission, so access is always granted.
    Images are re-encoded as PNG.
    """

    async def query_permission(self) -> str:
        return GRANTED

    async def read(self) -> list[ClipboardItem]:
        return await asyncio.to_thread(self._grab)

    @staticmethod
    def _grab() -> list[ClipboardItem]:
        content = ImageGrab.grabclipboard()

        if isinstance(content, Image.Image):
            buffer = io.BytesIO()
            content.save(buffer, format="PNG")
            return [ClipboardItem(types=["image/png"], data={"image/png": buffer.getvalue()})]

        # Copied files come back as a list of paths
        if isinstance(content, list):
            uris = "\n".join(str(p) for p in content).encode()
            return [ClipboardItem(types=["text/uri-list"], data={"text/uri-list": uris})]

        return []

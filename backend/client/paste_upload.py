"""Paste client — uploads clipboard images to the paste endpoint.

Every paste event runs on its own asyncio task. Events are not throttled or
ordered, and an upload in flight is never cancelled by a later paste, so the
last upload to finish is the last one handed to ``on_url``.

Capture failures (permission denied, no image, read errors) end the flow
quietly. Only a rejected upload reaches the user, through ``alert``.
"""

import asyncio
import inspect
import sys
from collections.abc import Awaitable, Callable

import httpx
from loguru import logger

from client.clipboard import (
    DENIED,
    ClipboardBackend,
    ClipboardImageContent,
    PillowClipboard,
)
from config import PASTE_SAVE_PATH, SERVER_URL, UPLOAD_FIELD

ERROR_MESSAGE = "An error occurred while attempting to save the pasted image"

UrlCallback = Callable[[str], Awaitable[None] | None]
Alert = Callable[[str], None]


def _stderr_alert(message: str) -> None:
    print(message, file=sys.stderr)


def filename_for_mime(mime_type: str) -> str:
    """'image/png' -> 'pastedImage.png'."""
    return f"{UPLOAD_FIELD}.{mime_type.split('/')[-1]}"


async def get_clipboard_image(backend: ClipboardBackend) -> ClipboardImageContent | None:
    """Return the first clipboard item when it is an image, otherwise None."""
    permission = await backend.query_permission()
    if permission == DENIED:
        logger.debug("Clipboard read permission denied")
        return None

    try:
        items = await backend.read()
        if not items or not items[0].types:
            logger.debug("Clipboard is empty")
            return None

        mime_type = items[0].types[0]
        if "image" not in mime_type:
            logger.debug("Clipboard holds {}, not an image", mime_type)
            return None

        return ClipboardImageContent(raw_bytes=items[0].get_type(mime_type), mime_type=mime_type)
    except Exception as e:
        logger.debug("Clipboard read failed: {}", e)
        return None


async def upload_image(
    http: httpx.AsyncClient,
    content: ClipboardImageContent,
    on_url: UrlCallback,
    alert: Alert = _stderr_alert,
) -> str | None:
    """POST the image as multipart form data and hand the returned URL to on_url."""
    files = {
        UPLOAD_FIELD: (filename_for_mime(content.mime_type), content.raw_bytes, content.mime_type),
    }
    response = await http.post(PASTE_SAVE_PATH, files=files)

    if not response.is_success:
        logger.warning("Upload rejected ({}): {}", response.status_code, response.text)
        alert(ERROR_MESSAGE)
        return None

    url = response.json()["imageUrl"]
    result = on_url(url)
    if inspect.isawaitable(result):
        await result
    return url


class PasteListener:
    def __init__(
        self,
        http: httpx.AsyncClient,
        on_url: UrlCallback,
        backend: ClipboardBackend | None = None,
        alert: Alert | None = None,
    ):
        self.http = http
        self.on_url = on_url
        self.backend = backend or PillowClipboard()
        self.alert = alert or _stderr_alert
        # References only; tasks are never awaited or cancelled from here
        self._tasks: set[asyncio.Task] = set()

    def on_paste_event(self) -> asyncio.Task:
        """Start an independent paste flow and return its task."""
        task = asyncio.get_running_loop().create_task(self.handle_paste())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def handle_paste(self) -> str | None:
        try:
            content = await get_clipboard_image(self.backend)
            if content is None:
                return None
            return await upload_image(self.http, content, self.on_url, self.alert)
        except Exception as e:
            logger.debug("Paste flow failed: {}", e)
            return None

    async def aclose(self) -> None:
        await self.http.aclose()


def enable_image_paste(
    on_url: UrlCallback,
    server_url: str = SERVER_URL,
    backend: ClipboardBackend | None = None,
    alert: Alert | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PasteListener:
    """Create a listener that uploads to server_url on every paste event."""
    http = httpx.AsyncClient(base_url=server_url, transport=transport)
    return PasteListener(http, on_url, backend=backend, alert=alert)

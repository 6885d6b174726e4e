"""Upload the current clipboard image once and print its URL.

Usage:
    python -m client
    python -m client --server http://127.0.0.1:8000 --log-level DEBUG
"""

import argparse
import asyncio

import httpx

from client.clipboard import ClipboardBackend
from client.paste_upload import enable_image_paste
from config import LOG_LEVEL, SERVER_URL
from logging_config import setup_logging


async def _paste_once(
    server_url: str,
    backend: ClipboardBackend | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str | None:
    listener = enable_image_paste(
        on_url=print, server_url=server_url, backend=backend, transport=transport
    )
    try:
        return await listener.on_paste_event()
    finally:
        await listener.aclose()


def main(
    argv: list[str] | None = None,
    backend: ClipboardBackend | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    parser = argparse.ArgumentParser(description="Upload the clipboard image to a paste server")
    parser.add_argument("--server", default=SERVER_URL, help=f"Server base URL (default: {SERVER_URL})")
    parser.add_argument("--log-level", default=LOG_LEVEL, help=f"Log level (default: {LOG_LEVEL})")
    args = parser.parse_args(argv)

    setup_logging(args.log_level.upper())
    url = asyncio.run(_paste_once(args.server, backend=backend, transport=transport))
    return 0 if url else 1


if __name__ == "__main__":
    raise SystemExit(main())

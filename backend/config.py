"""Application configuration."""

import os
import re


def parse_size(size_str: str) -> int:
    """Parse size string like '2MB', '512KB' into bytes."""
    if not size_str:
        return 0

    match = re.match(r"^(\d+(?:\.\d+)?)\s*(B|KB|MB|GB)$", size_str.strip().upper())
    if not match:
        return 0

    value = float(match.group(1))
    unit = match.group(2)

    multipliers = {
        "B": 1,
        "KB": 1024,
        "MB": 1024**2,
        "GB": 1024**3,
    }

    return int(value * multipliers[unit])


# Pasted image uploads
MAX_FILE_SIZE = parse_size(os.environ.get("PASTE_MAX_FILE_SIZE", "2MB")) or 2 * 1024 * 1024
PLACEHOLDER_IMAGE_URL = os.environ.get(
    "PASTE_PLACEHOLDER_URL", "https://via.placeholder.com/150"
).strip()
ALLOWED_EXTENSIONS = tuple(
    ext.strip().lower().lstrip(".")
    for ext in os.environ.get("PASTE_ALLOWED_EXTENSIONS", "").split(",")
    if ext.strip()
)

UPLOAD_FIELD = "pastedImage"
PASTE_SAVE_PATH = "/api/images/paste/save"

# Paste client
SERVER_URL = os.environ.get("PASTE_SERVER_URL", "http://127.0.0.1:8000").rstrip("/")

LOG_LEVEL = os.environ.get("PASTE_LOG_LEVEL", "INFO").strip().upper()

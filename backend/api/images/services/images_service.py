"""Images service — bounded read, format check and storage of pasted images."""

from fastapi import UploadFile
from loguru import logger

from config import ALLOWED_EXTENSIONS, MAX_FILE_SIZE, PLACEHOLDER_IMAGE_URL
from api.images.dto.image import PasteImageResponse
from api.images.validation.file_validator import is_valid_file_extension

CHUNK_SIZE = 64 * 1024


class PayloadTooLargeError(ValueError):
    def __init__(self, max_size: int):
        self.max_size = max_size
        super().__init__(f"File is too big. Maximum size is {max_size} bytes.")


class InvalidFormatError(ValueError):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__("File data is not valid for the specified file format.")


async def read_bounded(file: UploadFile, max_size: int) -> bytes:
    """Read the upload into memory, failing as soon as it grows past max_size."""
    buffer = bytearray()
    while chunk := await file.read(CHUNK_SIZE):
        buffer.extend(chunk)
        if len(buffer) > max_size:
            raise PayloadTooLargeError(max_size)
    return bytes(buffer)


def store_image(filename: str, data: bytes) -> str:
    """Return the URL for an accepted image.

    No object storage is wired in: every image resolves to the configured
    placeholder address.
    """
    logger.info("Accepted pasted image {} ({} bytes)", filename, len(data))
    return PLACEHOLDER_IMAGE_URL


async def save_pasted_image(
    file: UploadFile,
    max_size: int = MAX_FILE_SIZE,
) -> PasteImageResponse:
    """Check the declared size, read the part, validate its bytes and store it."""
    filename = file.filename or ""

    # Part size counted by the multipart parser; checked before copying into memory
    if file.size is not None and file.size > max_size:
        logger.warning("Rejected {}: part size {} exceeds {}", filename, file.size, max_size)
        raise PayloadTooLargeError(max_size)

    try:
        data = await read_bounded(file, max_size)
    except PayloadTooLargeError:
        logger.warning("Rejected {}: content exceeds {} bytes", filename, max_size)
        raise

    if not is_valid_file_extension(filename, data, ALLOWED_EXTENSIONS):
        logger.warning("Rejected {}: content does not match its extension", filename)
        raise InvalidFormatError(filename)

    return PasteImageResponse(image_url=store_image(filename, data))

"""File validator — checks content bytes against the claimed file extension.

Each extension maps to one or more alternative signatures. A signature is a
tuple of magic-byte parts, and every part must be found at its offset for the
signature to match (webp needs both the RIFF header and the WEBP tag).
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import PurePath
from types import MappingProxyType


@dataclass(frozen=True)
class FileSignature:
    magic: bytes
    offset: int = 0

    def matches(self, data: bytes) -> bool:
        end = self.offset + len(self.magic)
        return len(data) >= end and data[self.offset:end] == self.magic


Signature = tuple[FileSignature, ...]

_JPEG: tuple[Signature, ...] = ((FileSignature(b"\xff\xd8\xff"),),)

SIGNATURES: Mapping[str, tuple[Signature, ...]] = MappingProxyType({
    "png": ((FileSignature(b"\x89PNG\r\n\x1a\n"),),),
    "jpg": _JPEG,
    "jpeg": _JPEG,
    "gif": ((FileSignature(b"GIF87a"),), (FileSignature(b"GIF89a"),)),
    "bmp": ((FileSignature(b"BM"),),),
    "webp": ((FileSignature(b"RIFF"), FileSignature(b"WEBP", offset=8)),),
})


def get_extension(filename: str) -> str:
    """Lowercase extension without the dot, or '' when there is none."""
    return PurePath(filename).suffix.lstrip(".").lower()


def is_valid_file_extension(
    filename: str,
    data: bytes,
    accepted: Iterable[str] | None = None,
    signatures: Mapping[str, tuple[Signature, ...]] = SIGNATURES,
) -> bool:
    """Return True when the extension is accepted and the data carries its signature.

    An empty ``accepted`` means every extension known to ``signatures``.
    """
    if not filename or not data:
        return False

    extension = get_extension(filename)
    if not extension:
        return False

    accepted_set = {a.lower().lstrip(".") for a in accepted or ()}
    if accepted_set and extension not in accepted_set:
        return False

    alternatives = signatures.get(extension)
    if not alternatives:
        return False

    return any(all(part.matches(data) for part in signature) for signature in alternatives)

import pytest

from api.images.validation.file_validator import (
    SIGNATURES,
    FileSignature,
    get_extension,
    is_valid_file_extension,
)


@pytest.mark.parametrize("filename,data", [
    ("pastedImage.png", b"\x89PNG\r\n\x1a\n" + b"\x00" * 8),
    ("photo.jpg", b"\xff\xd8\xff\xe0" + b"\x00" * 8),
    ("photo.JPEG", b"\xff\xd8\xff\xdb"),
    ("anim.gif", b"GIF89a" + b"\x00" * 4),
    ("old.gif", b"GIF87a"),
    ("shot.bmp", b"BM" + b"\x00" * 10),
    ("pic.webp", b"RIFF\x24\x00\x00\x00WEBPVP8 "),
])
def test_known_signatures_are_accepted(filename, data):
    assert is_valid_file_extension(filename, data)


def test_content_must_match_claimed_extension():
    jpeg = b"\xff\xd8\xff\xe0" + b"\x00" * 8
    assert not is_valid_file_extension("pastedImage.png", jpeg)


def test_webp_needs_both_markers():
    assert not is_valid_file_extension("pic.webp", b"RIFF\x24\x00\x00\x00WAVEfmt ")


def test_truncated_data_is_rejected():
    assert not is_valid_file_extension("pastedImage.png", b"\x89PN")


@pytest.mark.parametrize("filename", ["", "noextension", "notes.txt", "archive.tar.gz"])
def test_unknown_or_missing_extension_is_rejected(filename):
    assert not is_valid_file_extension(filename, b"\x89PNG\r\n\x1a\n")


def test_empty_data_is_rejected():
    assert not is_valid_file_extension("pastedImage.png", b"")


def test_accepted_set_restricts_extensions():
    png = b"\x89PNG\r\n\x1a\n"
    assert is_valid_file_extension("a.png", png, accepted=[".PNG"])
    assert not is_valid_file_extension("a.png", png, accepted=["jpg", "gif"])


def test_empty_accepted_set_means_whole_table():
    assert is_valid_file_extension("a.gif", b"GIF89a", accepted=[])


def test_custom_signature_table():
    table = {"txt": ((FileSignature(b"hello"),),)}
    assert is_valid_file_extension("greeting.txt", b"hello world", signatures=table)
    assert not is_valid_file_extension("a.png", b"\x89PNG\r\n\x1a\n", signatures=table)


def test_signature_table_is_read_only():
    with pytest.raises(TypeError):
        SIGNATURES["exe"] = ((FileSignature(b"MZ"),),)


def test_get_extension():
    assert get_extension("pastedImage.PNG") == "png"
    assert get_extension("README") == ""

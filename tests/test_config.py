import importlib

import pytest

import config
from config import parse_size


@pytest.mark.parametrize("size_str,expected", [
    ("2MB", 2_097_152),
    ("512KB", 524_288),
    ("100 B", 100),
    ("1.5mb", 1_572_864),
    ("1GB", 1024**3),
    ("", 0),
    ("lots", 0),
    ("10TB", 0),
])
def test_parse_size(size_str, expected):
    assert parse_size(size_str) == expected


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_env_overrides(reload_config):
    cfg = reload_config(
        PASTE_MAX_FILE_SIZE="1MB",
        PASTE_PLACEHOLDER_URL=" https://cdn.example/p.png ",
        PASTE_ALLOWED_EXTENSIONS="PNG, .jpg,,",
        PASTE_SERVER_URL="http://paste.test/",
        PASTE_LOG_LEVEL="debug",
    )
    assert cfg.MAX_FILE_SIZE == 1_048_576
    assert cfg.PLACEHOLDER_IMAGE_URL == "https://cdn.example/p.png"
    assert cfg.ALLOWED_EXTENSIONS == ("png", "jpg")
    assert cfg.SERVER_URL == "http://paste.test"
    assert cfg.LOG_LEVEL == "DEBUG"


def test_unparseable_size_falls_back_to_default(reload_config):
    assert reload_config(PASTE_MAX_FILE_SIZE="huge").MAX_FILE_SIZE == 2_097_152

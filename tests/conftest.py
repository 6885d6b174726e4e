import pytest
from fastapi.testclient import TestClient

from main import app

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def anyio_backend():
    # asyncio only, no trio
    return "asyncio"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def png_bytes():
    return PNG_HEADER + b"\x00\x00\x00\rIHDR" + b"\x00" * 64

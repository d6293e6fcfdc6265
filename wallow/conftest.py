"""
conftest.py

Test configuration for wallow tests.

Defines Pytest fixtures for supplying test data to tests across the entire suite. Fixtures used
within only a single module are defined directly in that module.

No test touches the network, the real crontab, the user's config directory or the desktop: HTTP
goes through a MagicMock session, subprocess calls are injected or patched, and WALLOW_CONFIG_DIR
points into tmp_path for every test.
"""

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests
from PIL import Image

from wallow.config import WallowConfig


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep every test away from the real config directory and credentials."""

    monkeypatch.setenv("WALLOW_CONFIG_DIR", str(tmp_path / "config"))
    for variable in (
        "WALLHAVEN_API_KEY",
        "UNSPLASH_ACCESS_KEY",
        "TERM_PROGRAM",
        "WEZTERM_EXECUTABLE",
        "KITTY_WINDOW_ID",
    ):
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture(scope="session")
def image_bytes() -> bytes:
    """A tiny but valid JPEG, generated instead of shipping test_data images."""

    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), color=(40, 42, 54)).save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def test_image(tmp_path, image_bytes) -> Path:
    path = tmp_path / "wallow-wallhaven-abcd.jpg"
    path.write_bytes(image_bytes)
    return path


@pytest.fixture
def make_response():
    """
    Factory for fake requests.Response objects. json_data=None means the body is not JSON.
    """

    def inner(json_data=None, content: bytes = b"", status_code: int = 200):
        response = MagicMock()
        response.status_code = status_code
        response.content = content

        if json_data is None:
            response.json.side_effect = ValueError("Expecting value: line 1 column 1")
        else:
            response.json.return_value = json_data

        if status_code >= 400:
            response.raise_for_status.side_effect = requests.exceptions.HTTPError(
                f"{status_code} Client Error"
            )

        return response

    return inner


@pytest.fixture
def session() -> MagicMock:
    """A stand-in for requests.Session; configure session.get per test."""

    return MagicMock(spec=requests.Session)


@pytest.fixture
def config(tmp_path) -> WallowConfig:
    config = WallowConfig(
        wallpaper_dir=tmp_path / "wallpapers",
        converted_dir=tmp_path / "wallpapers" / "converted",
    )
    config.ensure_dirs()
    return config

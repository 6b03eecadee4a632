from __future__ import annotations

from pathlib import Path

import pytest

from avatarstore.storage.local import LocalAvatarStore
from tests.utils_images import circles, encode


@pytest.fixture
def png_800x600() -> bytes:
    return encode(circles(800, 600), ".png")


@pytest.fixture
def jpg_600x800() -> bytes:
    return encode(circles(600, 800), ".jpg")


@pytest.fixture
def rgba_png_500x500() -> bytes:
    return encode(circles(500, 500, channels=4), ".png")


@pytest.fixture
def small_png() -> bytes:
    return encode(circles(120, 80), ".png")


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    return tmp_path / "avatars.test"


@pytest.fixture
def store(store_dir: Path) -> LocalAvatarStore:
    return LocalAvatarStore(store_dir, 300)

"""Resize-on-ingest for avatar images.

Resizing is best-effort: anything that can't be decoded, or doesn't need
shrinking, is passed through untouched. Only oversized images are re-encoded,
always as PNG regardless of the input format.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, Optional, Tuple, Union

import cv2
import numpy as np
from loguru import logger

OUTPUT_FORMAT = ".png"


@dataclass(frozen=True)
class Resized:
    data: bytes
    width: int
    height: int


@dataclass(frozen=True)
class Passthrough:
    data: bytes
    reason: str


ResizeOutcome = Union[Resized, Passthrough]


def _read_all(source: Union[BinaryIO, bytes, bytearray]) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    return source.read()


def _decode(data: bytes) -> Optional[np.ndarray]:
    if not data:
        return None
    try:
        return cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
    except cv2.error:
        return None


def scaled_size(width: int, height: int, limit: int) -> Tuple[int, int]:
    """Proportional size with the larger side equal to ``limit``."""
    if width > height:
        return limit, max(1, height * limit // width)
    return max(1, width * limit // height), limit


def resize_outcome(data: bytes, limit: int) -> ResizeOutcome:
    if limit <= 0:
        return Passthrough(data, "resize disabled")

    img = _decode(data)
    if img is None:
        return Passthrough(data, "not a decodable image")

    height, width = img.shape[:2]
    if width <= limit and height <= limit:
        return Passthrough(data, f"{width}x{height} within limit {limit}")

    new_width, new_height = scaled_size(width, height, limit)
    resized = cv2.resize(img, (new_width, new_height), interpolation=cv2.INTER_AREA)
    success, buffer = cv2.imencode(OUTPUT_FORMAT, resized)
    if not success:
        return Passthrough(data, f"can't encode {new_width}x{new_height} image")
    return Resized(buffer.tobytes(), new_width, new_height)


def resize(source: Union[BinaryIO, bytes, bytearray, None], limit: int) -> Optional[BinaryIO]:
    """Shrink an image so that neither side exceeds ``limit``.

    Args:
        source: Readable binary stream or raw bytes. ``None`` yields ``None``.
        limit: Maximum width/height in pixels. ``limit <= 0`` disables resizing.

    Returns:
        A stream over either the original bytes or the re-encoded PNG.
    """
    if source is None:
        return None

    outcome = resize_outcome(_read_all(source), limit)
    if isinstance(outcome, Resized):
        logger.debug(f"Resized avatar to {outcome.width}x{outcome.height} ({len(outcome.data)} bytes)")
    else:
        logger.debug(f"Avatar stored as is: {outcome.reason}")
    return io.BytesIO(outcome.data)


__all__ = [
    "OUTPUT_FORMAT",
    "Resized",
    "Passthrough",
    "ResizeOutcome",
    "scaled_size",
    "resize_outcome",
    "resize",
]

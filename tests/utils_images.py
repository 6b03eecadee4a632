from __future__ import annotations

import cv2
import numpy as np


def circles(width: int, height: int, channels: int = 3) -> np.ndarray:
    img = np.full((height, width, channels), 255, dtype=np.uint8)
    for i, radius in enumerate(range(min(width, height) // 2 - 10, 0, -40)):
        color = ((40 * i) % 256, 90, 255 - (30 * i) % 256) + ((255,) if channels == 4 else ())
        cv2.circle(img, (width // 2, height // 2), radius, color, thickness=8)
    return img


def encode(img: np.ndarray, ext: str) -> bytes:
    success, buffer = cv2.imencode(ext, img)
    assert success
    return buffer.tobytes()


def decode(data: bytes) -> np.ndarray:
    img = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
    assert img is not None
    return img


def decoded_size(data: bytes) -> tuple[int, int]:
    height, width = decode(data).shape[:2]
    return width, height

"""Mapping of owner keys and avatar filenames onto the storage layout.

Layout is ``<base_dir>/<shard>/<sha1(owner key)>.image`` where ``<shard>`` is the
first two hex characters of ``sha1(<avatar filename>)``. Everything here is pure;
the hash decides where existing avatars live, so it must never change.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

AVATAR_SUFFIX = ".image"
SHARD_WIDTH = 2


def encode_id(key: str) -> str:
    return hashlib.sha1(key.encode("utf-8")).hexdigest()


def filename_for(owner_key: str) -> str:
    """Avatar filename for an owner; derived from the key, not the image bytes."""
    return f"{encode_id(owner_key)}{AVATAR_SUFFIX}"


def shard_for(filename: str) -> str:
    return encode_id(filename)[:SHARD_WIDTH]


def location_for(base_dir: str | Path, filename: str) -> Path:
    return Path(base_dir) / shard_for(filename)


__all__ = ["AVATAR_SUFFIX", "SHARD_WIDTH", "encode_id", "filename_for", "shard_for", "location_for"]

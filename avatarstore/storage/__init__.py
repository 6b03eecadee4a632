"""Avatar storage (local filesystem, sharded by filename hash)."""

from __future__ import annotations

from typing import BinaryIO, Protocol, Tuple, Union

from avatarstore.storage.local import LocalAvatarStore, new_store
from avatarstore.storage.placement import encode_id, filename_for, location_for, shard_for


class AvatarStore(Protocol):
    def put(self, owner_key: str, source: Union[BinaryIO, bytes, None]) -> str:  # returns filename
        ...

    def get(self, filename: str) -> Tuple[BinaryIO, int]:  # returns stream, size
        ...

    def id(self, filename: str) -> str:
        ...


__all__ = [
    "AvatarStore",
    "LocalAvatarStore",
    "new_store",
    "encode_id",
    "filename_for",
    "location_for",
    "shard_for",
]

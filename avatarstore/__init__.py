"""Content-addressed avatar image store."""

from avatarstore.exceptions import (
    AvatarStoreError,
    DirectoryCreateError,
    FileCreateError,
    LoadError,
    NilReaderError,
)
from avatarstore.storage import AvatarStore, LocalAvatarStore, new_store

__version__ = "0.1.0"

__all__ = [
    "AvatarStore",
    "LocalAvatarStore",
    "new_store",
    "AvatarStoreError",
    "DirectoryCreateError",
    "FileCreateError",
    "LoadError",
    "NilReaderError",
]

"""Custom exception hierarchy for the avatar store."""

from __future__ import annotations


class AvatarStoreError(Exception):
    """Base exception for all avatar store errors."""

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(AvatarStoreError):
    """Raised when configuration is invalid or missing."""
    pass


class StorageError(AvatarStoreError):
    """Raised when storage operations fail."""
    pass


class NilReaderError(StorageError):
    """Raised when put is called without an image source."""

    def __init__(self, message: str = "avatar reader is nil", details: dict[str, str] | None = None) -> None:
        super().__init__(message, details)


class FileCreateError(StorageError):
    """Raised when an avatar file can't be created or written."""

    @classmethod
    def for_path(cls, path: object, exc: OSError) -> "FileCreateError":
        return cls(f"can't create file {path}: {exc}", {"path": str(path), "error": str(exc)})


class DirectoryCreateError(FileCreateError):
    """Raised when the shard directory of an avatar can't be created."""
    pass


class LoadError(StorageError):
    """Raised when a stored avatar can't be opened for reading."""

    @classmethod
    def for_filename(cls, filename: str, exc: OSError) -> "LoadError":
        return cls(f"can't load avatar {filename}, id: {exc}", {"filename": filename, "error": str(exc)})


__all__ = [
    "AvatarStoreError",
    "ConfigurationError",
    "StorageError",
    "NilReaderError",
    "FileCreateError",
    "DirectoryCreateError",
    "LoadError",
]

from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Iterator, Tuple, Union

from loguru import logger

from avatarstore.exceptions import DirectoryCreateError, FileCreateError, LoadError, NilReaderError
from avatarstore.imaging.resize import resize
from avatarstore.storage.placement import encode_id, filename_for, location_for

if TYPE_CHECKING:
    from avatarstore.settings import Settings


class LocalAvatarStore:
    """Avatar store on the local filesystem.

    Avatars live at ``<base_dir>/<shard>/<filename>``. Shard directories are
    created on demand by ``put`` and never removed. The store keeps no state
    besides its two settings, so several instances can share a process.
    """

    def __init__(self, base_dir: Union[str, Path], max_dimension: int) -> None:
        self._base_dir = Path(base_dir)
        self._max_dimension = int(max_dimension)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "LocalAvatarStore":
        return cls(settings.avatars.base_dir, settings.avatars.max_dimension)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @property
    def max_dimension(self) -> int:
        return self._max_dimension

    def location(self, key: str) -> Path:
        """Shard directory for ``key``, whether it's an owner key or a filename."""
        return location_for(self._base_dir, key)

    def path_for(self, filename: str) -> Path:
        return self.location(filename) / filename

    def put(self, owner_key: str, source: Union[BinaryIO, bytes, None]) -> str:
        """Store an avatar for ``owner_key`` and return its filename.

        An existing avatar of the same owner is overwritten. Images larger than
        ``max_dimension`` are shrunk and re-encoded as PNG; anything else is
        written as received.

        Raises:
            NilReaderError: If ``source`` is None.
            DirectoryCreateError: If the shard directory can't be created.
            FileCreateError: If the avatar file can't be opened or written.
        """
        if source is None:
            raise NilReaderError()

        filename = filename_for(owner_key)
        directory = self.location(filename)
        path = directory / filename

        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreateError.for_path(path, exc) from exc

        data = resize(source, self._max_dimension).read()

        try:
            with open(path, "wb") as fh:
                fh.write(data)
        except OSError as exc:
            raise FileCreateError.for_path(path, exc) from exc

        logger.info(f"Saved avatar {filename} ({len(data)} bytes)")
        return filename

    def get(self, filename: str) -> Tuple[BinaryIO, int]:
        """Open a stored avatar for reading.

        The returned stream belongs to the caller, who must close it (it is a
        context manager). ``reading`` wraps this for ``with`` statements.

        Raises:
            LoadError: If the avatar can't be opened, including when it's missing.
        """
        path = self.path_for(filename)
        try:
            fh = open(path, "rb")
        except OSError as exc:
            raise LoadError.for_filename(filename, exc) from exc
        return fh, os.fstat(fh.fileno()).st_size

    @contextmanager
    def reading(self, filename: str) -> Iterator[Tuple[BinaryIO, int]]:
        fh, size = self.get(filename)
        try:
            yield fh, size
        finally:
            fh.close()

    def id(self, filename: str) -> str:
        """Cache-busting identifier of a stored avatar.

        Mixes the modification time into the filename hash, so rewriting the
        file yields a new id. Falls back to the bare filename hash when the
        file can't be stat'ed; never raises.
        """
        try:
            stat = self.path_for(filename).stat()
        except OSError as exc:
            logger.debug(f"Can't stat avatar {filename}: {exc}")
            return encode_id(filename)
        # whole seconds, rounded down also before the epoch
        return encode_id(f"{filename}{stat.st_mtime_ns // 1_000_000_000}")


def new_store(base_dir: Union[str, Path], max_dimension: int) -> LocalAvatarStore:
    return LocalAvatarStore(base_dir, max_dimension)


__all__ = ["LocalAvatarStore", "new_store"]

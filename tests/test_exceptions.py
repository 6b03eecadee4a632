"""Tests for custom exception hierarchy."""

import pytest

from avatarstore.exceptions import (
    AvatarStoreError,
    ConfigurationError,
    DirectoryCreateError,
    FileCreateError,
    LoadError,
    NilReaderError,
    StorageError,
)


def test_avatar_store_error_base():
    """Test base AvatarStoreError."""
    error = AvatarStoreError("Test error", {"key": "value"})
    assert str(error) == "Test error"
    assert error.message == "Test error"
    assert error.details == {"key": "value"}


def test_configuration_error():
    error = ConfigurationError("Config missing", {"setting": "base_dir"})
    assert isinstance(error, AvatarStoreError)
    assert error.message == "Config missing"


def test_nil_reader_error_message():
    error = NilReaderError()
    assert str(error) == "avatar reader is nil"
    assert error.details == {}


def test_file_create_error_for_path():
    cause = NotADirectoryError(20, "Not a directory")
    error = FileCreateError.for_path("/dev/null/30/x.image", cause)
    assert error.message == "can't create file /dev/null/30/x.image: [Errno 20] Not a directory"
    assert error.details == {"path": "/dev/null/30/x.image", "error": "[Errno 20] Not a directory"}


def test_directory_create_error_is_file_create_error():
    error = DirectoryCreateError.for_path("/x/y.image", PermissionError(13, "Permission denied"))
    assert isinstance(error, DirectoryCreateError)
    assert isinstance(error, FileCreateError)
    assert error.message == "can't create file /x/y.image: [Errno 13] Permission denied"


def test_load_error_for_filename():
    cause = FileNotFoundError(2, "No such file or directory")
    error = LoadError.for_filename("some_random_name.image", cause)
    assert error.message == "can't load avatar some_random_name.image, id: [Errno 2] No such file or directory"
    assert error.details["filename"] == "some_random_name.image"


def test_exception_inheritance():
    assert issubclass(ConfigurationError, AvatarStoreError)
    assert issubclass(StorageError, AvatarStoreError)
    for cls in (NilReaderError, FileCreateError, DirectoryCreateError, LoadError):
        assert issubclass(cls, StorageError)


def test_storage_errors_are_catchable_as_base():
    with pytest.raises(AvatarStoreError):
        raise LoadError("can't load avatar x, id: boom")

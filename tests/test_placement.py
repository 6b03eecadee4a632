import hashlib
from pathlib import Path

from avatarstore.storage.placement import (
    AVATAR_SUFFIX,
    encode_id,
    filename_for,
    location_for,
    shard_for,
)


def test_encode_id_is_sha1_hex():
    assert encode_id("abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert encode_id("some_random_name.image") == "a008de0a2ccb3308b5d99ffff66436e15538f701"


def test_filename_for_owner():
    assert filename_for("user1") == "b3daa77b4c04a9551b8781d03191fe098f325e67.image"
    assert filename_for("user2") == "a1881c06eec96db9901c7bbfe41c42a3f08e9cb4.image"
    assert filename_for("user1").endswith(AVATAR_SUFFIX)


def test_filenames_differ_per_owner():
    owners = [f"user{i}" for i in range(200)] + ["", "github_1234", "юзер"]
    assert len({filename_for(owner) for owner in owners}) == len(owners)


def test_shard_is_two_hex_chars_of_filename_hash():
    filename = filename_for("user1")
    shard = shard_for(filename)
    assert shard == hashlib.sha1(filename.encode()).hexdigest()[:2]
    assert len(shard) == 2
    assert all(c in "0123456789abcdef" for c in shard)


def test_location_is_deterministic():
    base = Path("/tmp/avatars.test")
    for key in ("abc", "xyz", "blah blah", filename_for("user1")):
        first = location_for(base, key)
        assert first == location_for(str(base), key)
        assert first == base / shard_for(key)
        assert first.parent == base

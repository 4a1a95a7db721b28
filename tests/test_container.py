import gzip
import struct

import pytest

from bootanim.container import (
    Animation,
    AnimationFlags,
    gzip_frame,
    read_animation,
    write_animation,
    write_splash,
)


def test_default_flags_bytes():
    assert AnimationFlags().to_bytes() == bytes([1, 1, 0, 0])


@pytest.mark.parametrize(
    "flags",
    [
        AnimationFlags(),
        AnimationFlags(loop=False),
        AnimationFlags(compressed=False, no_preload=True),
        AnimationFlags(False, False, True, True),
    ],
)
def test_flags_round_trip(flags):
    assert AnimationFlags.from_bytes(flags.to_bytes()) == flags


def test_flags_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        AnimationFlags.from_bytes(b"\x01\x01\x00")


def test_gzip_frame_round_trip():
    data = bytes(range(256)) * 8
    assert gzip.decompress(gzip_frame(data)) == data


def test_write_and_read_compressed(tmp_path):
    path = tmp_path / "anim.img"
    frames = [b"\x00" * 64, b"\xff" * 32, b"\x10\x20\x30\x40"]
    count = write_animation(path, frames, AnimationFlags())
    assert count == len(frames)
    animation = read_animation(path)
    assert animation.flags == AnimationFlags()
    assert [gzip.decompress(f) for f in animation.frames] == frames


def test_write_uncompressed_layout(tmp_path):
    path = tmp_path / "anim.img"
    flags = AnimationFlags(loop=False, compressed=False)
    write_animation(path, [b"ab", b"cde"], flags)
    raw = path.read_bytes()
    assert raw[:4] == struct.pack("<I", 1)
    assert raw[4:8] == flags.to_bytes()
    assert raw[8:] == struct.pack("<I", 2) + b"ab" + struct.pack("<I", 3) + b"cde"
    assert read_animation(path) == Animation(flags, [b"ab", b"cde"])


def test_empty_animation_header(tmp_path):
    path = tmp_path / "anim.img"
    assert write_animation(path, [], AnimationFlags()) == 0
    assert path.read_bytes() == struct.pack("<I", 0) + AnimationFlags().to_bytes()
    assert read_animation(path).frames == []


def test_write_accepts_generator(tmp_path):
    path = tmp_path / "anim.img"
    frames = (bytes([n]) * 4 for n in range(5))
    flags = AnimationFlags(compressed=False)
    write_animation(path, frames, flags)
    assert read_animation(path).frames == [bytes([n]) * 4 for n in range(5)]


def test_read_truncated_frame(tmp_path):
    path = tmp_path / "anim.img"
    write_animation(path, [b"abcdef"], AnimationFlags(compressed=False))
    path.write_bytes(path.read_bytes()[:-1])
    with pytest.raises(ValueError):
        read_animation(path)


def test_read_truncated_header(tmp_path):
    path = tmp_path / "anim.img"
    path.write_bytes(b"\x00\x00\x00")
    with pytest.raises(ValueError):
        read_animation(path)


def test_read_mismatched_frame_count(tmp_path):
    path = tmp_path / "anim.img"
    write_animation(path, [b"a", b"b"], AnimationFlags(compressed=False))
    raw = bytearray(path.read_bytes())
    raw[:4] = struct.pack("<I", 5)
    path.write_bytes(bytes(raw))
    with pytest.raises(ValueError):
        read_animation(path)


def test_write_splash_appends(tmp_path):
    path = tmp_path / "splash.img"
    data = b"\x01\x02\x03\x04" * 10
    assert write_splash(path, data, compress=False) == len(data)
    write_splash(path, data, compress=False)
    assert path.read_bytes() == data + data


def test_write_splash_compressed(tmp_path):
    path = tmp_path / "splash.img"
    data = b"\x7f" * 400
    written = write_splash(path, data)
    assert written == path.stat().st_size
    assert gzip.decompress(path.read_bytes()) == data
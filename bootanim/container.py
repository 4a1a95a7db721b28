"""Reading and writing boot animation and splash image files.

A boot animation file starts with an eight byte header: the index of the
last frame as a little-endian 32-bit integer, followed by four flag bytes
(loop, compressed, no preload, slow mode).  Each frame follows as a
little-endian 32-bit length and that many bytes of frame data, which is
raw RGBA pixels or, when the compressed flag is set, gzip-compressed RGBA.
"""

from __future__ import annotations

import gzip
import os
import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, Union

PathType = Union[str, "os.PathLike[str]"]

_U32 = struct.Struct("<I")
_FLAG_COUNT = 4


@dataclass(frozen=True)
class AnimationFlags:
    """Playback options stored in the animation header."""

    loop: bool = True
    compressed: bool = True
    no_preload: bool = False
    slow_mode: bool = False

    def to_bytes(self) -> bytes:
        """Encode the flags as the four header bytes."""
        return bytes(
            int(value)
            for value in (self.loop, self.compressed, self.no_preload, self.slow_mode)
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "AnimationFlags":
        """Decode the four header flag bytes."""
        if len(data) != _FLAG_COUNT:
            raise ValueError(f"expected {_FLAG_COUNT} flag bytes, got {len(data)}")
        return cls(*(byte != 0 for byte in data))


@dataclass
class Animation:
    """A decoded animation: its flags and the frame payloads as stored."""

    flags: AnimationFlags
    frames: list[bytes] = field(default_factory=list)


def gzip_frame(data: bytes) -> bytes:
    """Compress one frame at the highest gzip level."""
    return gzip.compress(bytes(data), compresslevel=9, mtime=0)


def _pack_length(length: int) -> bytes:
    try:
        return _U32.pack(length)
    except struct.error as exc:
        raise ValueError(f"frame of {length} bytes is too large") from exc


def write_animation(path: PathType, frames: Iterable[bytes], flags: AnimationFlags) -> int:
    """Write an animation file from raw RGBA frames and return the frame count.

    Frames are gzip-compressed when ``flags.compressed`` is set.
    """
    count = 0
    with open(path, "wb") as out:
        out.write(_U32.pack(0))
        out.write(flags.to_bytes())
        for frame in frames:
            payload = gzip_frame(frame) if flags.compressed else bytes(frame)
            out.write(_pack_length(len(payload)))
            out.write(payload)
            count += 1
        out.seek(0)
        out.write(_U32.pack(max(count - 1, 0)))
    return count


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ValueError(f"truncated {what}: expected {size} bytes, got {len(data)}")
    return data


def read_animation(path: PathType) -> Animation:
    """Read an animation file; frame payloads are returned as stored."""
    with open(path, "rb") as stream:
        (last_index,) = _U32.unpack(_read_exact(stream, _U32.size, "header"))
        flags = AnimationFlags.from_bytes(_read_exact(stream, _FLAG_COUNT, "header"))
        frames: list[bytes] = []
        while prefix := stream.read(_U32.size):
            if len(prefix) != _U32.size:
                raise ValueError("truncated frame length")
            (size,) = _U32.unpack(prefix)
            frames.append(_read_exact(stream, size, "frame"))
    expected = max(len(frames) - 1, 0)
    if last_index != expected:
        raise ValueError(
            f"header names last frame {last_index} but file holds {len(frames)} frames"
        )
    return Animation(flags, frames)


def write_splash(path: PathType, data: bytes, compress: bool = True) -> int:
    """Append a static RGBA image to a splash file; return the bytes written."""
    payload = gzip_frame(data) if compress else bytes(data)
    with open(path, "ab") as out:
        out.write(payload)
    return len(payload)
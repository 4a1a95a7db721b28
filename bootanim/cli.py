"""Command line tool that builds boot animation and splash image files."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from itertools import count
from pathlib import Path
from typing import Iterator, Optional, Sequence

from .container import AnimationFlags, write_animation, write_splash
from .convert import Resize, extract_gif_frames, to_rgba

ANIMATION_FILE = "boot_animation.img"
SPLASH_FILE = "boot_splash.img"

USAGE = """\
usage: bootanim -TYPE PATTERN [options]

input types:
  -p   static image frames (png, jpg, ...) named by PATTERN, e.g. frame_%d.png
  -g   animated gif
  -i   single static image written to boot_splash.img
  prefix the type with "s" to stretch to 960x544, or with "l" (-lp, -lg)
  to stretch to 960x128

options:
  -noloop      play the animation once
  -nocompress  store frames uncompressed
  -nopreload   read frames from the file instead of loading them first
  -slowmode    play slower but without artifacts
"""


class InputType(Enum):
    """What kind of input the pattern names."""

    IMAGES = "images"
    GIF = "gif"
    STATIC = "static"


class UsageError(Exception):
    """The command line could not be understood."""


@dataclass(frozen=True)
class Options:
    """Settings taken from the command line."""

    input_type: InputType
    pattern: str
    resize: Resize = Resize.NONE
    flags: AnimationFlags = AnimationFlags()

    @property
    def compress(self) -> bool:
        return self.flags.compressed


_MODES = {
    "-p": (InputType.IMAGES, Resize.NONE),
    "-sp": (InputType.IMAGES, Resize.FULL),
    "-lp": (InputType.IMAGES, Resize.LOGO),
    "-g": (InputType.GIF, Resize.NONE),
    "-sg": (InputType.GIF, Resize.FULL),
    "-lg": (InputType.GIF, Resize.LOGO),
    "-i": (InputType.STATIC, Resize.NONE),
    "-si": (InputType.STATIC, Resize.FULL),
}


def parse_args(argv: Sequence[str]) -> Options:
    """Turn the arguments (without the program name) into options."""
    if len(argv) < 2:
        raise UsageError("an input type and a file pattern are required")
    mode, pattern, *extra = argv
    try:
        input_type, resize = _MODES[mode]
    except KeyError:
        raise UsageError(f"unknown input type {mode!r}") from None
    options = set(extra)
    flags = AnimationFlags(
        loop="-noloop" not in options,
        compressed="-nocompress" not in options,
        no_preload="-nopreload" in options,
        slow_mode="-slowmode" in options,
    )
    return Options(input_type, pattern, resize, flags)


def _frame_path(pattern: str, index: int) -> str:
    try:
        return pattern % index
    except (TypeError, ValueError):
        return pattern


def iter_frame_paths(pattern: str) -> Iterator[str]:
    """Yield pattern % 0, pattern % 1, ... for as long as the files exist."""
    for index in count():
        path = _frame_path(pattern, index)
        if not Path(path).is_file():
            return
        yield path
        if path == pattern:
            return


def _make_splash(options: Options) -> int:
    print("creating static image...")
    source = _frame_path(options.pattern, 0)
    if not Path(source).is_file():
        print(f"input file not found: {source}", file=sys.stderr)
        return 1
    print("converting...")
    data = to_rgba(source, options.resize)
    if options.compress:
        print("compressing...")
    print(f"creating output file [{SPLASH_FILE}]")
    write_splash(SPLASH_FILE, data, options.compress)
    print("done...")
    return 0


def _convert_frames(options: Options) -> list[bytes]:
    if options.input_type is InputType.GIF:
        print("extracting...")
        source = _frame_path(options.pattern, 0)
        print(f"wait ( {source} )")
        images = extract_gif_frames(source)
        print("...done")
        print("converting...")
        frames = []
        for index, image in enumerate(images):
            print(f"converting frame {index}")
            frames.append(to_rgba(image, options.resize))
    else:
        print("converting...")
        frames = []
        for path in iter_frame_paths(options.pattern):
            print(f"converting {path}")
            frames.append(to_rgba(path, options.resize))
    print("...done")
    return frames


def _make_animation(options: Options) -> int:
    frames = _convert_frames(options)
    if options.compress:
        print("compressing...")
    print(f"creating output file [{ANIMATION_FILE}]")
    print(f"combining [{ANIMATION_FILE}]...")
    write_animation(ANIMATION_FILE, frames, options.flags)
    print(f"...done [{ANIMATION_FILE}]")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the tool; output files are written to the current directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except UsageError as exc:
        print(f"error: {exc}\n\n{USAGE}", file=sys.stderr)
        return 1
    try:
        if options.input_type is InputType.STATIC:
            return _make_splash(options)
        return _make_animation(options)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
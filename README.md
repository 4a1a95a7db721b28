# bootanim

Builds a boot animation file (`boot_animation.img`) from an animated GIF or a
numbered series of still images, or a static boot splash file
(`boot_splash.img`) from a single image. Images are decoded with Pillow and
stored as raw RGBA pixels, gzip-compressed by default.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Usage

```
bootanim -TYPE PATTERN [options]
```

Output files are written to the current directory.

`PATTERN` is a file name that may contain `%d`. For still-image frames the
number is replaced with 0, 1, 2, … and frames are read until a file is
missing. A pattern without `%d` names a single file. For `-g` and `-i`
inputs, the pattern is used with the number 0.

Input types:

| type  | input                                                | resize       |
|-------|------------------------------------------------------|--------------|
| `-p`  | numbered still images (PNG, JPEG, anything Pillow reads) | none     |
| `-sp` | numbered still images                                | 960x544      |
| `-lp` | numbered still images                                | 960x128      |
| `-g`  | animated GIF, every frame fully composited           | none         |
| `-sg` | animated GIF                                         | 960x544      |
| `-lg` | animated GIF                                         | 960x128      |
| `-i`  | one still image, appended to `boot_splash.img`       | none         |
| `-si` | one still image, appended to `boot_splash.img`       | 960x544      |

Resizing stretches the image to exactly the target size.

Options (any order, after the pattern):

- `-noloop`: clear the loop flag so the animation plays once
- `-nocompress`: store frames (or the splash image) without gzip compression
- `-nopreload`: set the no-preload flag in the header
- `-slowmode`: set the slow-mode flag in the header

`-nopreload` and `-slowmode` only set header flags; they are read by whatever
plays the animation.

`boot_animation.img` is overwritten on each run. `boot_splash.img` is
appended to, so remove it first if a fresh file is wanted.

The command exits with status 0 on success and 1 on a bad command line, a
missing input file or an I/O error.

Examples:

```
bootanim -p frame_%d.png -noloop
bootanim -sg anim.gif
bootanim -si logo.png -nocompress
```

The first adds `frame_0.png`, `frame_1.png`, … to the animation and sets it
to play once. The second stretches every frame of `anim.gif` to 960x544 and
builds a looping animation. The third appends the uncompressed RGBA pixels of
`logo.png`, stretched to 960x544, to `boot_splash.img`.

## Output format

`boot_animation.img` begins with an 8-byte header: the index of the last
frame as a little-endian 32-bit integer (0 when there are no frames), then
four flag bytes (loop, compressed, no preload, slow mode), each 0 or 1. Each
frame follows as a little-endian 32-bit length and then that many bytes:
raw RGBA pixels, gzip-compressed at level 9 when the compressed flag is set.

`boot_splash.img` holds the image's RGBA pixels, gzip-compressed unless
`-nocompress` is given, with no header.

## Python interface

`bootanim.container`:

- `AnimationFlags(loop=True, compressed=True, no_preload=False, slow_mode=False)`
  with `to_bytes()` and `AnimationFlags.from_bytes(data)` for the four flag bytes
- `write_animation(path, frames, flags)` writes raw RGBA frames, compressing
  them when `flags.compressed` is set, and returns the frame count
- `read_animation(path)` returns an `Animation` with `flags` and `frames`
  (payloads as stored, not decompressed); it raises `ValueError` on a
  truncated file or a header that disagrees with the frame count
- `write_splash(path, data, compress=True)` appends an image and returns the
  number of bytes written
- `gzip_frame(data)` compresses one frame at level 9

`bootanim.convert`:

- `Resize.NONE`, `Resize.FULL` (960x544), `Resize.LOGO` (960x128)
- `to_rgba(path, resize=Resize.NONE)` returns RGBA bytes of an image file or
  an open Pillow image
- `extract_gif_frames(path)` returns every frame of an animated image as RGBA
  Pillow images

`bootanim.cli`:

- `parse_args(argv)` returns `Options` or raises `UsageError`
- `iter_frame_paths(pattern)` yields existing numbered frame paths
- `main(argv=None)` runs the command

## Limitations

- There is no input type for frames that are already raw RGBA; every input
  goes through image decoding.
- There is no command for unpacking or previewing an animation file;
  `read_animation` only returns the stored payloads.
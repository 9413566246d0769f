"""Floating-point RGB images and their PNG and PPM encodings."""

from __future__ import annotations

import struct
import zlib
from enum import Enum
from pathlib import Path

from gentracer.interval import Interval
from gentracer.log import get_logger
from gentracer.ray import Vec3

_GAMMA = 2.2
_INTENSITY = Interval(0.0, 0.999)
_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class ImageType(Enum):
    """Output file formats."""

    PNG = "png"
    PPM = "ppm"


def _to_byte(component: float) -> int:
    corrected = _INTENSITY.clamp(component) ** (1.0 / _GAMMA)
    return int(corrected * 256.0)


class Image:
    """A grid of linear RGB colours stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self._pixels: list[Vec3] = [Vec3()] * (width * height)

    def _index(self, x: int, y: int) -> int:
        index = x + y * self.width
        if not 0 <= index < len(self._pixels):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return index

    def write(self, x: int, y: int, color: Vec3) -> None:
        """Store the colour of pixel ``(x, y)``."""
        self._pixels[self._index(x, y)] = color

    def read(self, x: int, y: int) -> Vec3:
        """Return the colour of pixel ``(x, y)``."""
        return self._pixels[self._index(x, y)]

    def data(self) -> bytes:
        """Gamma-corrected 8-bit RGB bytes, row by row."""
        return bytes(_to_byte(c) for pixel in self._pixels for c in pixel)

    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height


def _check_pixels(width: int, height: int, pixels: bytes) -> bytes:
    raw = bytes(pixels)
    if len(raw) != width * height * 3:
        raise ValueError(
            f"expected {width * height * 3} bytes for {width}x{height}, got {len(raw)}"
        )
    return raw


def _png_chunk(kind: bytes, body: bytes) -> bytes:
    crc = zlib.crc32(kind + body) & 0xFFFFFFFF
    return struct.pack(">I", len(body)) + kind + body + struct.pack(">I", crc)


def encode_png(width: int, height: int, pixels: bytes) -> bytes:
    """Encode 8-bit RGB bytes as a PNG file."""
    raw = _check_pixels(width, height, pixels)
    stride = width * 3
    scanlines = b"".join(
        b"\x00" + raw[row * stride : (row + 1) * stride] for row in range(height)
    )
    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (
        _PNG_SIGNATURE
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", zlib.compress(scanlines))
        + _png_chunk(b"IEND", b"")
    )


def encode_ppm(width: int, height: int, pixels: bytes) -> str:
    """Encode 8-bit RGB bytes as a plain-text PPM (P3) file."""
    raw = _check_pixels(width, height, pixels)
    header = f"P3\n{width} {height}\n255\n"
    body = "".join(
        f"{r} {g} {b}\n" for r, g, b in zip(raw[0::3], raw[1::3], raw[2::3])
    )
    return header + body


class ImageWriter:
    """Saves images to one file name."""

    def __init__(self, file_name: str | Path) -> None:
        self.file_name = Path(file_name)

    def write(self, image_type: ImageType, image: Image) -> None:
        """Encode ``image`` in the given format and write it to the file."""
        pixels = image.data()
        try:
            if image_type is ImageType.PNG:
                self.file_name.write_bytes(
                    encode_png(image.width, image.height, pixels)
                )
            elif image_type is ImageType.PPM:
                self.file_name.write_text(
                    encode_ppm(image.width, image.height, pixels), encoding="ascii"
                )
            else:
                raise ValueError(f"unsupported image type {image_type!r}")
        except OSError:
            get_logger().error("Failed to open file %s", self.file_name)
            raise
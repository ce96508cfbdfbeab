"""Readers for uncompressed 24-bit BMP images and DXT-compressed DDS textures."""

from __future__ import annotations

import enum
import logging
import os
import struct
from dataclasses import dataclass, field
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_BMP_HEADER_SIZE = 54
_DDS_MAGIC = b"DDS "
_DDS_HEADER_SIZE = 124
_U32 = 0xFFFFFFFF


class TextureFormatError(ValueError):
    """Raised when image data is not in a format these readers understand."""


@dataclass
class BmpImage:
    """Raw BMP pixel data, stored bottom-up with BGR byte order."""

    width: int
    height: int
    image_size: int
    data_offset: int
    data: bytes


class DdsFormat(enum.IntEnum):
    """Supported DDS compression formats, keyed by their FourCC code."""

    DXT1 = 0x31545844
    DXT3 = 0x33545844
    DXT5 = 0x35545844

    @property
    def block_size(self) -> int:
        """Bytes per 4x4 block."""
        return 8 if self is DdsFormat.DXT1 else 16

    @property
    def components(self) -> int:
        """Colour components of the decoded image."""
        return 3 if self is DdsFormat.DXT1 else 4


@dataclass
class MipLevel:
    """One mipmap level of a compressed texture."""

    level: int
    width: int
    height: int
    data: bytes


@dataclass
class DdsImage:
    """A DXT-compressed texture with its mipmap chain."""

    format: DdsFormat
    width: int
    height: int
    linear_size: int
    mip_map_count: int
    levels: list[MipLevel] = field(default_factory=list)


def _u32(buffer: bytes, offset: int) -> int:
    return struct.unpack_from("<I", buffer, offset)[0]


def _i32(buffer: bytes, offset: int) -> int:
    return struct.unpack_from("<i", buffer, offset)[0]


def parse_bmp(data: bytes) -> BmpImage:
    """Parse a 24 bits-per-pixel uncompressed BMP file held in memory."""
    if len(data) < _BMP_HEADER_SIZE:
        raise TextureFormatError("Not a correct BMP file: header too short")
    header = data[:_BMP_HEADER_SIZE]
    if header[:2] != b"BM":
        raise TextureFormatError("Not a correct BMP file: missing 'BM' signature")
    if _i32(header, 0x1E) != 0:
        raise TextureFormatError("Not a correct BMP file: compressed images are not supported")
    if _i32(header, 0x1C) != 24:
        raise TextureFormatError("Not a correct BMP file: only 24 bits per pixel is supported")

    data_offset = _u32(header, 0x0A)
    image_size = _u32(header, 0x22)
    width = _u32(header, 0x12)
    height = _u32(header, 0x16)

    # Some files leave these fields blank; guess them.
    if image_size == 0:
        image_size = (width * height * 3) & _U32
    if data_offset == 0:
        data_offset = _BMP_HEADER_SIZE

    pixels = bytes(data[_BMP_HEADER_SIZE:_BMP_HEADER_SIZE + image_size])
    return BmpImage(
        width=width,
        height=height,
        image_size=image_size,
        data_offset=data_offset,
        data=pixels,
    )


def load_bmp(path: PathLike) -> BmpImage:
    """Read and parse a BMP file."""
    logger.info("Reading image %s", path)
    with open(path, "rb") as handle:
        return parse_bmp(handle.read())


def parse_dds(data: bytes) -> DdsImage:
    """Parse a DXT1/DXT3/DXT5 DDS file held in memory."""
    if data[:4] != _DDS_MAGIC:
        raise TextureFormatError("Not a DDS file: missing 'DDS ' signature")
    header = data[4:4 + _DDS_HEADER_SIZE]
    if len(header) < _DDS_HEADER_SIZE:
        raise TextureFormatError("Not a DDS file: header too short")

    height = _u32(header, 8)
    width = _u32(header, 12)
    linear_size = _u32(header, 16)
    mip_map_count = _u32(header, 24)
    four_cc = _u32(header, 80)

    try:
        fmt = DdsFormat(four_cc)
    except ValueError:
        raise TextureFormatError(f"Unsupported DDS format 0x{four_cc:08X}") from None

    bufsize = linear_size * 2 if mip_map_count > 1 else linear_size
    start = 4 + _DDS_HEADER_SIZE
    buffer = bytes(data[start:start + bufsize])

    image = DdsImage(
        format=fmt,
        width=width,
        height=height,
        linear_size=linear_size,
        mip_map_count=mip_map_count,
    )
    offset = 0
    level_width, level_height = width, height
    level = 0
    while level < mip_map_count and (level_width or level_height):
        size = ((level_width + 3) // 4) * ((level_height + 3) // 4) * fmt.block_size
        image.levels.append(
            MipLevel(
                level=level,
                width=level_width,
                height=level_height,
                data=buffer[offset:offset + size],
            )
        )
        offset += size
        level_width = max(level_width // 2, 1)
        level_height = max(level_height // 2, 1)
        level += 1
    return image


def load_dds(path: PathLike) -> DdsImage:
    """Read and parse a DDS file."""
    logger.info("Reading image %s", path)
    with open(path, "rb") as handle:
        return parse_dds(handle.read())
"""
BlurHash encoding of raw 24-bit pixel buffers.

The buffer is read as rows of 8-bit RGB (or BGR) triples. Rows may be padded
(``abs(stride) >= width * 3``) and stored top-down or bottom-up; a negative
stride marks a bottom-up buffer.
"""

import logging
import math
from typing import Optional, Tuple

from . import base83
from .colors import SRGB_TO_LINEAR, linear_to_srgb, sign_pow
from .config import MAX_COMPONENTS, MIN_COMPONENTS, get_settings
from .errors import (
    BufferSizeMismatch,
    InvalidComponentCount,
    InvalidDimensions,
    InvalidHashLength,
    InvalidStride,
)

logger = logging.getLogger(__name__)

# size flag + max AC + DC + 2 * AC components at 9x9
MAXIMUM_HASH_SIZE = 1 + 1 + 4 + 2 * (9 * 9 - 1)


def _valid_component_count(value):
    return isinstance(value, int) and not isinstance(value, bool) and MIN_COMPONENTS <= value <= MAX_COMPONENTS


def _check_components(components_x, components_y):
    if not _valid_component_count(components_x):
        raise InvalidComponentCount("x", components_x)
    if not _valid_component_count(components_y):
        raise InvalidComponentCount("y", components_y)


def hash_length(components_x: int, components_y: int) -> int:
    """Number of characters in a hash with the given component counts."""
    _check_components(components_x, components_y)
    return 1 + 1 + 4 + 2 * (components_x * components_y - 1)


def components(blurhash: str) -> Tuple[int, int]:
    """
    Read the component counts from the size character of a hash.

    Returns:
        (components_x, components_y)
    """
    if len(blurhash) < 6:
        raise InvalidHashLength(6, len(blurhash))
    size_info = base83.decode(blurhash[0])
    size_y = size_info // 9 + 1
    size_x = size_info % 9 + 1
    expected = hash_length(size_x, size_y)
    if len(blurhash) != expected:
        raise InvalidHashLength(expected, len(blurhash))
    return size_x, size_y


def _linearize_rows(view, width, height, stride, top_down, bgr_order):
    """
    Split the buffer into per-row lists of linear R, G and B values, first
    list being the top row of the image.
    """
    row_pitch = abs(stride)
    row_bytes = width * 3
    red_index, blue_index = (2, 0) if bgr_order else (0, 2)

    rows = []
    for y in range(height):
        if top_down:
            offset = y * row_pitch
        else:
            offset = (height - 1 - y) * row_pitch
        row = bytes(view[offset : offset + row_bytes])
        rows.append(
            (
                [SRGB_TO_LINEAR[value] for value in row[red_index::3]],
                [SRGB_TO_LINEAR[value] for value in row[1::3]],
                [SRGB_TO_LINEAR[value] for value in row[blue_index::3]],
            )
        )
    return rows


def _basis_factors(rows, width, height, components_x, components_y):
    """
    Project the linear image onto each cosine basis function.

    Factors are returned in row-major order (y component outer, x component
    inner), the DC term first. Each factor is summed over pixels in row-major
    order so results do not depend on anything but the input.
    """
    cos_x = [
        [math.cos(math.pi * i * x / width) for x in range(width)]
        for i in range(components_x)
    ]
    cos_y = [
        [math.cos(math.pi * j * y / height) for y in range(height)]
        for j in range(components_y)
    ]

    factors = []
    for j in range(components_y):
        for i in range(components_x):
            row_cosines = cos_x[i]
            r = g = b = 0.0
            for cos_row, (line_r, line_g, line_b) in zip(cos_y[j], rows):
                for cos_column, lr, lg, lb in zip(row_cosines, line_r, line_g, line_b):
                    basis = cos_column * cos_row
                    r += basis * lr
                    g += basis * lg
                    b += basis * lb

            norm_factor = 1.0 if (i == 0 and j == 0) else 2.0
            scale = norm_factor / (width * height)
            factors.append((r * scale, g * scale, b * scale))
    return factors


def _encode_dc(value):
    r, g, b = value
    return (linear_to_srgb(r) << 16) + (linear_to_srgb(g) << 8) + linear_to_srgb(b)


def _quantize_ac_channel(value, maximum_value):
    quantized = math.floor(sign_pow(value / maximum_value, 0.5) * 9.0 + 9.5)
    return int(max(0, min(18, quantized)))


def _encode_ac(value, maximum_value):
    r, g, b = value
    return (
        _quantize_ac_channel(r, maximum_value) * 19 * 19
        + _quantize_ac_channel(g, maximum_value) * 19
        + _quantize_ac_channel(b, maximum_value)
    )


def encode(
    pixels,
    width: int,
    height: int,
    stride: int,
    top_down: Optional[bool] = None,
    bgr_order: bool = False,
    components_x: Optional[int] = None,
    components_y: Optional[int] = None,
) -> str:
    """
    Calculate the blurhash for a buffer of 24-bit pixels.

    Args:
        pixels: Object supporting the buffer protocol, ``abs(stride) * height``
            bytes long. It is only read.
        width: Image width in pixels.
        height: Image height in pixels.
        stride: Number of bytes in a row of the image. Usually ``width * 3``,
            more when rows are padded, negative for a bottom-up bitmap.
        top_down: Row order. ``None`` takes it from the sign of ``stride``.
        bgr_order: Treat pixels as BGR, with blue at the lowest address.
        components_x: Horizontal components (1-9), defaults from settings.
        components_y: Vertical components (1-9), defaults from settings.

    Returns:
        The hash, ``6 + 2 * (components_x * components_y - 1)`` characters.
    """
    if components_x is None or components_y is None:
        settings = get_settings()
        if components_x is None:
            components_x = settings.components_x
        if components_y is None:
            components_y = settings.components_y

    view = memoryview(pixels)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")

    try:
        _check_components(components_x, components_y)
        if width < 1 or height < 1:
            raise InvalidDimensions(width, height)
        if width * 3 > abs(stride):
            raise InvalidStride(width, stride)
        if abs(stride) * height != len(view):
            raise BufferSizeMismatch(abs(stride) * height, len(view))
    except ValueError as e:
        logger.debug("Rejected encode request: %s", e)
        raise

    if top_down is None:
        top_down = stride > 0

    logger.debug(
        "Encoding %dx%d image (stride %d, %s, %s) with %dx%d components",
        width,
        height,
        stride,
        "top-down" if top_down else "bottom-up",
        "BGR" if bgr_order else "RGB",
        components_x,
        components_y,
    )

    rows = _linearize_rows(view, width, height, stride, top_down, bgr_order)
    factors = _basis_factors(rows, width, height, components_x, components_y)
    dc = factors[0]
    ac = factors[1:]

    # The maximum AC component scales every AC value; it stands for (max + 1) / 166
    if ac:
        actual_maximum_value = max(abs(channel) for factor in ac for channel in factor)
        quantized_maximum_value = int(max(0, min(82, math.floor(actual_maximum_value * 166 - 0.5))))
        maximum_value = float(quantized_maximum_value + 1) / 166.0
    else:
        quantized_maximum_value = 0
        maximum_value = 1.0
    logger.debug("Quantized maximum AC value: %d", quantized_maximum_value)

    blurhash = base83.encode((components_x - 1) + (components_y - 1) * 9, 1)
    blurhash += base83.encode(quantized_maximum_value, 1)
    blurhash += base83.encode(_encode_dc(dc), 4)
    for factor in ac:
        blurhash += base83.encode(_encode_ac(factor, maximum_value), 2)
    return blurhash


def encode_rgb(
    pixels,
    width: int,
    height: int,
    components_x: Optional[int] = None,
    components_y: Optional[int] = None,
) -> str:
    """Calculate the blurhash for tightly packed, top-down RGB pixels."""
    return encode(
        pixels,
        width,
        height,
        width * 3,
        top_down=True,
        bgr_order=False,
        components_x=components_x,
        components_y=components_y,
    )

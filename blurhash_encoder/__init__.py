"""
BlurHash encoder for raw 24-bit pixel buffers.
"""

import logging

from . import base83
from .config import EncoderSettings, get_settings, reload_settings
from .encoder import MAXIMUM_HASH_SIZE, components, encode, encode_rgb, hash_length
from .errors import (
    BlurHashError,
    BufferSizeMismatch,
    InvalidComponentCount,
    InvalidDimensions,
    InvalidHashLength,
    InvalidStride,
    InvalidSymbol,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "MAXIMUM_HASH_SIZE",
    "BlurHashError",
    "BufferSizeMismatch",
    "EncoderSettings",
    "InvalidComponentCount",
    "InvalidDimensions",
    "InvalidHashLength",
    "InvalidStride",
    "InvalidSymbol",
    "base83",
    "components",
    "encode",
    "encode_rgb",
    "get_settings",
    "hash_length",
    "reload_settings",
]

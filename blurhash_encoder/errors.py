"""
Exceptions raised by the BlurHash encoder and the base-83 codec.

Every error is raised while validating input, before any pixel is read.
"""

from typing import Dict, Optional


class BlurHashError(ValueError):
    """Base exception for blurhash_encoder."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidComponentCount(BlurHashError):
    """Component count outside 1..9 on one axis."""

    def __init__(self, axis: str, value: int):
        self.axis = axis
        self.value = value
        super().__init__(
            message=f"Blur hash component {axis.upper()} must have a value between 1 and 9, got {value}",
            details={"axis": axis, "value": value},
        )


class InvalidDimensions(BlurHashError):
    def __init__(self, width: int, height: int):
        super().__init__(
            message=f"Image dimensions must be positive, got {width}x{height}",
            details={"width": width, "height": height},
        )


class InvalidStride(BlurHashError):
    """
    Row stride too short to hold ``width`` RGB pixels.

    Raised when ``width * 3 > abs(stride)``, which also covers every stride
    narrower than ``width`` bytes. A row that passes this check never reads
    past its own stride.
    """

    def __init__(self, width: int, stride: int):
        super().__init__(
            message=f"Width {width} does not fit in a row stride of {abs(stride)} bytes",
            details={"width": width, "stride": stride},
        )


class BufferSizeMismatch(BlurHashError):
    def __init__(self, expected: int, actual: int):
        super().__init__(
            message=f"Stride times height must be the length of the pixel buffer "
            f"(expected {expected} bytes, got {actual})",
            details={"expected": expected, "actual": actual},
        )


class InvalidSymbol(BlurHashError):
    """Character that is not part of the base-83 alphabet."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(
            message=f"Invalid base83 character {symbol!r} at position {position}",
            details={"symbol": symbol, "position": position},
        )


class InvalidHashLength(BlurHashError):
    def __init__(self, expected: int, actual: int):
        super().__init__(
            message=f"Invalid BlurHash length: expected {expected} characters, got {actual}",
            details={"expected": expected, "actual": actual},
        )

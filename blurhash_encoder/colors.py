"""
sRGB transfer functions.

Channel bytes are gamma-encoded sRGB; basis factors are accumulated in linear
light. See https://en.wikipedia.org/wiki/SRGB#Transformation for details.
"""

import math

# Breakpoints between the linear segment and the power curve
SRGB_KNEE = 0.04045
LINEAR_KNEE = 0.0031308

LINEAR_SLOPE = 12.92
GAMMA = 2.4
OFFSET = 0.055
SCALE = 1.055


def srgb_to_linear(value: int) -> float:
    """Decode a 0-255 channel byte to linear light in 0.0-1.0."""
    encoded = value / 255.0
    if encoded <= SRGB_KNEE:
        return encoded / LINEAR_SLOPE
    return ((encoded + OFFSET) / SCALE) ** GAMMA


def linear_to_srgb(value: float) -> int:
    """
    Encode linear light as a 0-255 channel byte, rounding half up.

    Inputs outside 0.0-1.0 (the DC term can overshoot slightly) are clamped.
    """
    linear = min(max(value, 0.0), 1.0)
    if linear <= LINEAR_KNEE:
        encoded = linear * LINEAR_SLOPE
    else:
        encoded = SCALE * linear ** (1 / GAMMA) - OFFSET
    return int(encoded * 255 + 0.5)


def sign_pow(value: float, exponent: float) -> float:
    """``abs(value) ** exponent`` carrying the sign of ``value``."""
    return math.copysign(abs(value) ** exponent, value)


# Linear value for every possible channel byte
SRGB_TO_LINEAR = tuple(srgb_to_linear(byte) for byte in range(256))

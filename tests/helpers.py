"""
Pixel buffer builders shared by the tests
"""


def make_gradient(width, height):
    """Tightly packed, top-down RGB gradient."""
    pixels = bytearray()
    for y in range(height):
        for x in range(width):
            pixels.extend((int(x / width * 255), int(y / height * 255), (x * 7 + y * 13) % 256))
    return bytes(pixels)


def to_bitmap(pixels, width, height, padding=0, bottom_up=False, bgr=False):
    """Re-layout packed RGB with row padding, optional row reversal and channel swap."""
    row_bytes = width * 3
    rows = []
    for y in range(height):
        row = bytearray(pixels[y * row_bytes : (y + 1) * row_bytes])
        if bgr:
            row[0::3], row[2::3] = row[2::3], row[0::3]
        rows.append(bytes(row) + b"\xaa" * padding)
    if bottom_up:
        rows.reverse()
    return b"".join(rows)

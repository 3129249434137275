#!/usr/bin/env python3
"""
Benchmark the blurhash_encoder package.

Generates synthetic gradient images and measures encode times at multiple
image sizes, component counts and buffer layouts.

Usage:
    python benchmarks/bench_encoder.py
"""

import logging
import time

from blurhash_encoder import base83, encode, encode_rgb, get_settings
from blurhash_encoder.colors import linear_to_srgb, srgb_to_linear

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def gradient_image(width: int, height: int) -> bytes:
    """Generate a gradient test image as tightly packed RGB bytes."""
    pixels = bytearray()
    for y in range(height):
        for x in range(width):
            r = int((x / width) * 255)
            g = int((y / height) * 255)
            b = 128
            pixels.extend((r, g, b))
    return bytes(pixels)


def padded_bottom_up_bgr(pixels: bytes, width: int, height: int, padding: int) -> bytes:
    """Re-layout packed RGB as a padded, bottom-up BGR bitmap."""
    row_bytes = width * 3
    rows = []
    for y in reversed(range(height)):
        row = bytearray(pixels[y * row_bytes : (y + 1) * row_bytes])
        row[0::3], row[2::3] = row[2::3], row[0::3]
        rows.append(bytes(row) + b"\x00" * padding)
    return b"".join(rows)


def benchmark(label: str, func, iterations: int) -> float:
    """Run func() for the given number of iterations and print timing."""
    # Warm-up
    func()

    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed = time.perf_counter() - start

    per_iter_us = (elapsed / iterations) * 1_000_000
    per_iter_ms = (elapsed / iterations) * 1_000
    if per_iter_ms >= 1.0:
        print(f"  {label:40s}  {per_iter_ms:10.3f} ms/iter  ({iterations} iters)")
    else:
        print(f"  {label:40s}  {per_iter_us:10.1f} us/iter  ({iterations} iters)")
    return elapsed / iterations


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------

def main():
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    print("=" * 72)
    print("blurhash_encoder benchmark")
    print("=" * 72)
    print()

    results = {}

    # ------------------------------------------------------------------
    # Encode benchmarks
    # ------------------------------------------------------------------
    print("--- Encode (4x3 components) ---")
    for size in [32, 128, 256]:
        img = gradient_image(size, size)
        iters = {32: 20, 128: 5, 256: 2}[size]
        label = f"encode {size}x{size}"
        t = benchmark(label, lambda img=img, s=size: encode_rgb(img, s, s, 4, 3), iters)
        results[label] = t
    print()

    # ------------------------------------------------------------------
    # Encode with different component counts (128x128)
    # ------------------------------------------------------------------
    print("--- Encode component counts (128x128) ---")
    img128 = gradient_image(128, 128)
    for cx, cy in [(1, 1), (4, 3), (4, 4), (9, 9)]:
        iters = 5 if (cx * cy) <= 16 else 2
        label = f"encode 128x128 {cx}x{cy}"
        t = benchmark(label, lambda cx=cx, cy=cy: encode_rgb(img128, 128, 128, cx, cy), iters)
        results[label] = t
    print()

    # ------------------------------------------------------------------
    # Buffer layouts (128x128, 4x3)
    # ------------------------------------------------------------------
    print("--- Buffer layouts (128x128, 4x3) ---")
    bitmap = padded_bottom_up_bgr(img128, 128, 128, padding=4)
    stride = -(128 * 3 + 4)
    label = "encode padded bottom-up BGR"
    results[label] = benchmark(
        label,
        lambda: encode(bitmap, 128, 128, stride, bgr_order=True, components_x=4, components_y=3),
        5,
    )
    print()

    # ------------------------------------------------------------------
    # Base83 benchmarks
    # ------------------------------------------------------------------
    print("--- Base83 ---")
    benchmark("base83 encode (4 chars)", lambda: base83.encode(123456, 4), 10000)
    benchmark("base83 decode (4 chars)", lambda: base83.decode("L~r:"), 10000)
    print()

    # ------------------------------------------------------------------
    # sRGB / linear conversion
    # ------------------------------------------------------------------
    print("--- sRGB <-> linear ---")
    benchmark(
        "srgb_to_linear (256 values)",
        lambda: [srgb_to_linear(i) for i in range(256)],
        1000,
    )
    benchmark(
        "linear_to_srgb (256 values)",
        lambda: [linear_to_srgb(i / 255.0) for i in range(256)],
        1000,
    )
    print()

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------
    print("=" * 72)
    print("Summary (selected, ms/iter):")
    for label, t in results.items():
        print(f"  {label:40s}  {t * 1000:10.3f} ms")
    print("=" * 72)


if __name__ == "__main__":
    main()

"""Numeric curiosities: fast inverse square root, the Mandelbrot set, tables."""

from __future__ import annotations

import struct

MAX_ITER = 1000
WIDTH = 800
HEIGHT = 600
MAGIC = 0x5F3759DF
THREE_HALFS = 1.5

Pixel = tuple[int, int, int]


def _f32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def q_rsqrt(number: float) -> float:
    """Approximate ``1 / sqrt(number)`` with one Newton step on a bit-level guess."""
    x2 = _f32(number * 0.5)
    bits = struct.unpack("<i", struct.pack("<f", number))[0]
    bits = (MAGIC - (bits >> 1)) & 0xFFFFFFFF
    y = struct.unpack("<f", struct.pack("<I", bits))[0]
    return _f32(y * _f32(THREE_HALFS - _f32(_f32(x2 * y) * y)))


def mandelbrot(x0: float, y0: float, max_iter: int = MAX_ITER) -> int:
    """Return how many iterations the point stays bounded, up to ``max_iter``."""
    x = y = 0.0
    iterations = 0
    while x * x + y * y <= 4.0 and iterations < max_iter:
        x, y = x * x - y * y + x0, 2 * x * y + y0
        iterations += 1
    return iterations


def map_range(
    value: float, start1: float, stop1: float, start2: float, stop2: float
) -> float:
    """Map ``value`` linearly from ``[start1, stop1]`` onto ``[start2, stop2]``."""
    return start2 + (stop2 - start2) * ((value - start1) / (stop1 - start1))


def render_mandelbrot(
    width: int = WIDTH, height: int = HEIGHT, max_iter: int = MAX_ITER
) -> list[list[Pixel]]:
    """Return rows of RGB pixels showing the Mandelbrot set."""
    min_re, max_re = -2.0, 1.0
    min_im = -1.2
    max_im = min_im + (max_re - min_re) * height / width

    rows: list[list[Pixel]] = []
    for py in range(height):
        b = map_range(py, 0, height, min_im, max_im)
        row: list[Pixel] = []
        for px in range(width):
            a = map_range(px, 0, width, min_re, max_re)
            color = int(map_range(mandelbrot(a, b, max_iter), 0, max_iter, 0, 255))
            row.append((color % 8 * 32, color % 16 * 16, color % 32 * 8))
        rows.append(row)
    return rows


def make_table(rows: int = 3, cols: int = 4) -> list[list[int]]:
    """Return a ``rows`` by ``cols`` table whose cell ``[i][j]`` holds ``i + 3 * j``."""
    return [[i + 3 * j for j in range(cols)] for i in range(rows)]
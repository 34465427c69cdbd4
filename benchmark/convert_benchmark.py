#!/usr/bin/env python3
"""Benchmark detector-input encoders on a camera-sized still.

Compares:
1. NV21, identity traversal (rotation described in metadata)
2. NV21, rotated traversal (rotation baked into the byte order)
3. BGRA8888 from RGBA
4. BGRA8888 from RGB (alpha expansion)
"""

import argparse
import time

import numpy as np

from framecodec.convert import Traversal, rgb_to_nv21, rgba_to_bgra


def make_still(size: int, channels: int, seed: int = 0) -> np.ndarray:
    """Random noise still of shape (size, size, channels)."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(size, size, channels), dtype=np.uint8)


def time_call(fn, runs: int) -> tuple[float, float]:
    """Return (mean_ms, min_ms) over a number of runs, after one warm-up call."""
    fn()
    times = []
    for _ in range(runs):
        start = time.perf_counter()
        fn()
        times.append((time.perf_counter() - start) * 1000)
    return sum(times) / len(times), min(times)


def main():
    parser = argparse.ArgumentParser(description="Benchmark NV21/BGRA8888 encoders")
    parser.add_argument("--size", type=int, default=720, help="Still width and height (default: 720)")
    parser.add_argument("--runs", type=int, default=20, help="Timed runs per encoder")
    args = parser.parse_args()

    rgb = make_still(args.size, 3)
    rgba = make_still(args.size, 4)

    cases = [
        ("nv21 identity", lambda: rgb_to_nv21(rgb)),
        ("nv21 rotated", lambda: rgb_to_nv21(rgb, Traversal.ROTATE_90_CCW)),
        ("bgra8888 rgba", lambda: rgba_to_bgra(rgba)),
        ("bgra8888 rgb", lambda: rgba_to_bgra(rgb, add_alpha=True)),
    ]

    print(f"Still: {args.size}x{args.size}, {args.runs} runs")
    print("-" * 44)
    print(f"{'encoder':<20} {'mean ms':>10} {'min ms':>10}")
    for name, fn in cases:
        mean_ms, min_ms = time_call(fn, args.runs)
        print(f"{name:<20} {mean_ms:>10.2f} {min_ms:>10.2f}")


if __name__ == "__main__":
    main()

# rangefold/utils.py
"""
Light-weight index helpers shared by all ranged structures.
"""

from __future__ import annotations
import math

# Global debug switch
VERBOSE: bool = False


def log(*args, **kwargs) -> None:            # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)

# --------------------------------------------------------------------------- #
#  Preconditions                                                              #
# --------------------------------------------------------------------------- #
def check_index(index: int, n: int) -> None:
    """Raise IndexError unless 0 <= index < n."""
    if not 0 <= index < n:
        raise IndexError(f"index {index} out of range for length {n}")


def check_range(start: int, end: int, n: int) -> None:
    """Validate the half-open range [start, end) against length n."""
    if start > end:
        raise ValueError(f"range start {start} exceeds end {end}")
    if start < 0 or end > n:
        raise IndexError(f"range [{start}, {end}) out of bounds for length {n}")

# --------------------------------------------------------------------------- #
#  Bit arithmetic                                                             #
# --------------------------------------------------------------------------- #
def lowest_set_bit(i: int) -> int:
    return i & -i


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def floor_log2(n: int) -> int:
    if n <= 0:
        raise ValueError("floor_log2 expects a positive integer")
    return n.bit_length() - 1


def ceil_sqrt(n: int) -> int:
    """Smallest b >= 1 with b * b >= n."""
    if n <= 1:
        return 1
    return math.isqrt(n - 1) + 1

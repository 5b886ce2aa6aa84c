"""
bitvec: fixed-capacity bit vector

Bounds-checked boolean flag array with per-bit set/clear, in-place left
shift, and longest-run queries. Capacity is fixed at 1 to 1023 positions.
"""

__version__ = "0.1.0"

from .kernel import (
    BitVector,
    BitVectorError,
    IndexOutOfBounds,
    InvalidLength,
    MAX_SIZE
)

__all__ = [
    "BitVector",
    "BitVectorError",
    "IndexOutOfBounds",
    "InvalidLength",
    "MAX_SIZE",
]

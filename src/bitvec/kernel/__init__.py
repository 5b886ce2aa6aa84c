"""
Kernel: the BitVector type.

Components:
  - vector: BitVector, MAX_SIZE, error kinds (InvalidLength, IndexOutOfBounds)
"""

from .vector import (
    BitVector,
    BitVectorError,
    IndexOutOfBounds,
    InvalidLength,
    MAX_SIZE,
    WORD_SIZE,
    EINDEX,
    ELENGTH
)

__all__ = [
    "BitVector",
    "BitVectorError",
    "IndexOutOfBounds",
    "InvalidLength",
    "MAX_SIZE",
    "WORD_SIZE",
    "EINDEX",
    "ELENGTH",
]

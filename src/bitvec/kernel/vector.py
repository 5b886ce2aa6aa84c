"""
Kernel Component: BitVector

Fixed-capacity, bounds-checked boolean flag array.

Representation:
  - One Python int holds every position
  - Bit i (0-indexed) corresponds to position i
  - No bit at or above length is ever set

Capacity: 0 < length < MAX_SIZE (1024), fixed at construction.
"""

from typing import Iterable

from ..core.hashing import fingerprint_bits
from ..core.log import get_logger
from ..core.registry import param_registry

logger = get_logger(__name__)

_REGISTRY = param_registry()

MAX_SIZE = _REGISTRY["max_size"]
WORD_SIZE = _REGISTRY["word_size"]
EINDEX = _REGISTRY["error_codes"]["EINDEX"]
ELENGTH = _REGISTRY["error_codes"]["ELENGTH"]


class BitVector:
    """
    Fixed-length sequence of boolean positions.

    Mutating ops (set, unset, shift_left) work in place. Indexed ops
    validate the index before touching storage, so a failed call never
    leaves a partial mutation behind.

    Instances compare by value and are copied with copy(); being mutable
    they are not hashable.
    """

    __slots__ = ("_length", "_bits")
    __hash__ = None

    def __init__(self, length: int):
        """
        Create a vector with every position cleared.

        Args:
            length: Number of positions, 0 < length < MAX_SIZE.

        Raises:
            InvalidLength: If length is not an int in (0, MAX_SIZE).
        """
        if not _is_int(length) or not 0 < length < MAX_SIZE:
            logger.debug("rejected length %r (valid: 1..%d)", length, MAX_SIZE - 1)
            raise InvalidLength(length)
        self._length = length
        self._bits = 0

    @classmethod
    def from_bools(cls, values: Iterable[bool]) -> "BitVector":
        """Build a vector with one position per value; truthy values are set."""
        values = list(values)
        vec = cls(len(values))
        for i, v in enumerate(values):
            if v:
                vec._bits |= 1 << i
        return vec

    # ------------------------------------------------------------------
    # Per-bit ops
    # ------------------------------------------------------------------

    def set(self, index: int) -> None:
        """
        Set position index to True.

        Raises:
            IndexOutOfBounds: If index is not in [0, length).
        """
        self._check_index(index)
        self._bits |= 1 << index

    def unset(self, index: int) -> None:
        """
        Set position index to False.

        Raises:
            IndexOutOfBounds: If index is not in [0, length).
        """
        self._check_index(index)
        self._bits &= ~(1 << index)

    def is_index_set(self, index: int) -> bool:
        """
        Return the value at position index.

        Raises:
            IndexOutOfBounds: If index is not in [0, length).
        """
        self._check_index(index)
        return bool((self._bits >> index) & 1)

    def length(self) -> int:
        return self._length

    # ------------------------------------------------------------------
    # Bulk ops
    # ------------------------------------------------------------------

    def shift_left(self, amount: int) -> None:
        """
        Move every value toward index 0 by amount positions, zero-filling
        the vacated high end.

        Position i receives the prior value of position i + amount when
        i + amount < length, otherwise False. amount >= length clears
        the vector.

        Args:
            amount: Non-negative shift distance; may exceed length.

        Raises:
            TypeError: If amount is not an int.
            ValueError: If amount is negative.
        """
        if not _is_int(amount):
            raise TypeError(f"Shift amount must be an int, got {type(amount).__name__}")
        if amount < 0:
            raise ValueError(f"Shift amount must be non-negative, got {amount}")

        if amount >= self._length:
            logger.debug("shift_left(%d) clears all %d positions", amount, self._length)
            self._bits = 0
            return

        # Position i maps to bit i, so toward index 0 is a right shift of the int.
        # High bits above length are always clear, which gives the zero-fill.
        self._bits >>= amount

    def longest_set_sequence_starting_at(self, start_index: int) -> int:
        """
        Count consecutive True positions from start_index upward.

        Stops at the first False position or the end of the vector; no
        wraparound. Returns 0 if start_index itself is False and
        length - start_index if every remaining position is True.

        Raises:
            IndexOutOfBounds: If start_index is not in [0, length).
        """
        self._check_index(start_index)

        count = 0
        pos = start_index
        while pos < self._length and (self._bits >> pos) & 1:
            count += 1
            pos += 1
        return count

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def count(self) -> int:
        """Number of set positions."""
        return self._bits.bit_count()

    def to_bools(self) -> list[bool]:
        return [bool((self._bits >> i) & 1) for i in range(self._length)]

    def fingerprint(self) -> str:
        """BLAKE3 hex digest of the canonical byte image (length + bits)."""
        return fingerprint_bits(self._bits, self._length)

    def copy(self) -> "BitVector":
        dup = BitVector(self._length)
        dup._bits = self._bits
        return dup

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "BitVector":
        return self.copy()

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._length == other._length and self._bits == other._bits

    def __repr__(self) -> str:
        rendered = "".join("1" if b else "0" for b in self.to_bools())
        return f"BitVector({self._length}, '{rendered}')"

    def _check_index(self, index: int) -> None:
        if not _is_int(index) or not 0 <= index < self._length:
            logger.debug("rejected index %r (length %d)", index, self._length)
            raise IndexOutOfBounds(index, self._length)


def _is_int(value: object) -> bool:
    # bool is an int subclass; True/False are not positions or lengths
    return isinstance(value, int) and not isinstance(value, bool)


class BitVectorError(Exception):
    """Base class for bit vector precondition failures. code is the numeric error kind."""

    code: int = 0


class InvalidLength(BitVectorError, ValueError):
    """Raised by the constructor when length is 0 or at/above MAX_SIZE."""

    code = ELENGTH

    def __init__(self, length: object):
        self.length = length
        super().__init__(
            f"Invalid bit vector length {length!r}: must satisfy 0 < length < {MAX_SIZE}"
        )


class IndexOutOfBounds(BitVectorError, IndexError):
    """Raised by an indexed op when the index is not strictly less than length."""

    code = EINDEX

    def __init__(self, index: object, length: int):
        self.index = index
        self.length = length
        super().__init__(
            f"Index {index!r} out of bounds for bit vector of length {length}"
        )

"""
Core Component: Byte Serialization (Big-Endian)

Stable byte image of a packed bit sequence, used as hash input.

Bit mapping (frozen):
  - Within each byte: bit 7 → position 0, bit 6 → position 1, ..., bit 0 → position 7
  - Big-endian for the multi-byte length field

No padding beyond ceil(length/8) payload bytes. Nothing decodes this image.
"""

from .registry import param_registry


def serialize_bits_be(bits: int, length: int) -> bytes:
    """
    Encode a packed bit sequence as a deterministic byte stream for hashing.

    Format (exact):
      - 4 ASCII bytes tag: b"BVC1"
      - 2 bytes length (uint16, big-endian)
      - Payload: ceil(length/8) bytes with bit mapping:
          bit 7 → position 0, bit 6 → position 1, ..., bit 0 → position 7
          next byte continues with position 8 at bit 7, etc.

    Args:
        bits: Python int, bit i set iff position i is set.
        length: Number of positions.

    Returns:
        bytes: Deterministic serialization.

    Raises:
        SerializationError: If length does not fit uint16, bits is negative,
            or any bit at or above length is set.
    """
    if not 0 <= length <= 0xFFFF:
        raise SerializationError(f"Length {length} does not fit uint16")
    if bits < 0:
        raise SerializationError(f"Bit mask must be non-negative, got {bits}")
    if bits >> length:
        raise SerializationError(
            f"Bits set outside [0..{length - 1}]: {bits:b}"
        )

    tag = param_registry()["byte_frame_tags"]["BITS"].encode("ascii")
    out = bytearray(tag)
    out.extend(length.to_bytes(2, "big"))

    n_bytes = (length + 7) // 8
    for byte_idx in range(n_bytes):
        byte_val = 0
        for bit_idx in range(8):
            pos = byte_idx * 8 + bit_idx
            if pos < length and (bits >> pos) & 1:
                byte_val |= 1 << (7 - bit_idx)
        out.append(byte_val)

    return bytes(out)


class SerializationError(Exception):
    """Raised when a bit sequence cannot be serialized (bad length or stray bits)."""
    pass

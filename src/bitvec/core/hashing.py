"""
Core Component: Bit Fingerprints

BLAKE3 digest over the canonical byte image of a packed bit sequence.
Equal (bits, length) pairs always give the same digest; the length is
part of the image, so a trailing clear position changes the fingerprint.
"""

import blake3

from .bytesio import serialize_bits_be


def fingerprint_bits(bits: int, length: int) -> str:
    """
    Return the lowercase hex BLAKE3-256 digest of serialize_bits_be(bits, length).

    Raises:
        SerializationError: If bits/length cannot be serialized.
    """
    return blake3.blake3(serialize_bits_be(bits, length)).hexdigest()

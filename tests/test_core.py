#!/usr/bin/env python3
"""
Core foundation tests:

1. param_registry() has all required keys and frozen values
2. serialize_bits_be() produces stable, exact bytes
3. fingerprint_bits() is BLAKE3 over the byte image
4. get_logger() honours BITVEC_LOG_LEVEL and does not double-print
"""

import logging
import sys
from pathlib import Path

import blake3
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bitvec.core import (
    param_registry,
    serialize_bits_be,
    SerializationError,
    fingerprint_bits,
    get_logger,
)


def test_param_registry():
    """Verify param_registry has all required keys and correct values."""
    registry = param_registry()

    assert set(registry.keys()) == {
        "max_size", "word_size", "error_codes", "byte_frame_tags"
    }, "Registry key mismatch"

    assert registry["max_size"] == 1024
    assert registry["word_size"] == 1
    assert registry["error_codes"] == {"EINDEX": 0x20000, "ELENGTH": 0x20001}
    assert registry["byte_frame_tags"]["BITS"] == "BVC1"


# ═══════════════════════════════════════════════════════════════════════
# Byte image
# ═══════════════════════════════════════════════════════════════════════

def test_bits_serialization_exact():
    """
    Positions 0, 1, 3 set in a length-10 vector:
      byte 0 = 0b11010000, byte 1 = 0b00000000
    """
    bits = 0b1011  # positions 0, 1, 3
    data = serialize_bits_be(bits, 10)

    assert data[:4] == b"BVC1"
    assert data[4:6] == (10).to_bytes(2, "big")
    assert data[6:] == bytes([0b11010000, 0b00000000])
    assert len(data) == 4 + 2 + 2


def test_bits_serialization_byte_boundaries():
    assert serialize_bits_be(0, 0) == b"BVC1\x00\x00"
    assert serialize_bits_be(0xFF, 8)[6:] == b"\xff"
    # Position 8 lands in bit 7 of the second byte
    assert serialize_bits_be(1 << 8, 9)[6:] == b"\x00\x80"


def test_bits_serialization_errors():
    with pytest.raises(SerializationError):
        serialize_bits_be(0b100, 2)  # bit above length
    with pytest.raises(SerializationError):
        serialize_bits_be(-1, 4)
    with pytest.raises(SerializationError):
        serialize_bits_be(0, 0x10000)


# ═══════════════════════════════════════════════════════════════════════
# Fingerprints
# ═══════════════════════════════════════════════════════════════════════

def test_fingerprint_is_blake3_of_image():
    digest = fingerprint_bits(0b1011, 10)

    assert digest == blake3.blake3(serialize_bits_be(0b1011, 10)).hexdigest()
    assert len(digest) == 64
    assert digest == digest.lower()


def test_fingerprint_depends_on_bits_and_length():
    base = fingerprint_bits(0b101, 3)

    assert fingerprint_bits(0b101, 3) == base
    assert fingerprint_bits(0b111, 3) != base
    assert fingerprint_bits(0b101, 4) != base


def test_fingerprint_rejects_stray_bits():
    with pytest.raises(SerializationError):
        fingerprint_bits(0b1000, 3)


# ═══════════════════════════════════════════════════════════════════════
# Logging
# ═══════════════════════════════════════════════════════════════════════

def test_get_logger_level_from_env(monkeypatch):
    monkeypatch.setenv("BITVEC_LOG_LEVEL", "debug")
    logger = get_logger("bitvec.tests.env_debug")
    assert logger.level == logging.DEBUG

    monkeypatch.setenv("BITVEC_LOG_LEVEL", "not-a-level")
    logger = get_logger("bitvec.tests.env_bogus")
    assert logger.level == logging.WARNING


def test_get_logger_reuses_handler():
    a = get_logger("bitvec.tests.reuse")
    b = get_logger("bitvec.tests.reuse")

    assert a is b
    assert len(a.handlers) == 1


def test_get_logger_does_not_propagate_to_root():
    """Records go out once through the logger's own handler, not again via root."""
    root = logging.getLogger()
    seen = []

    class _Collect(logging.Handler):
        def emit(self, record):
            seen.append(record)

    collector = _Collect()
    root.addHandler(collector)
    try:
        logger = get_logger("bitvec.tests.no_propagate")
        assert logger.propagate is False
        logger.warning("only once")
    finally:
        root.removeHandler(collector)

    assert seen == []

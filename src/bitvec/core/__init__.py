"""
Core foundation: frozen constants, byte image, fingerprints, logging.
"""

from .registry import param_registry, RegistryError
from .bytesio import serialize_bits_be, SerializationError
from .hashing import fingerprint_bits
from .log import get_logger

__all__ = [
    # Registry
    "param_registry",
    "RegistryError",

    # Serialization
    "serialize_bits_be",
    "SerializationError",

    # Fingerprints
    "fingerprint_bits",

    # Logging
    "get_logger",
]

"""
Core Component: Parameter Registry

Frozen constants for the bit vector: capacity ceiling, error codes,
byte framing.

No randomness, no environment leakage, no optionals.
"""


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by bitvec.

    Keys and values are JSON-serializable primitives or lists/dicts.

    Returns:
        dict: Frozen parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        # Capacity: valid lengths are 1..max_size-1
        "max_size": 1024,

        # One logical bit per position
        "word_size": 1,

        # Numeric codes carried by the two error kinds
        "error_codes": {
            "EINDEX": 0x20000,
            "ELENGTH": 0x20001
        },

        # Byte frame tags for serialization (ASCII 4-byte tags)
        "byte_frame_tags": {
            "BITS": "BVC1"
        }
    }

    required_keys = {
        "max_size", "word_size", "error_codes", "byte_frame_tags"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass

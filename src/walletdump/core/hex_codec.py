"""
Hex codec
"""

import binascii


def to_hex(data: bytes) -> str:
    """Render bytes as lowercase hex, two digits per byte, no separators"""
    return binascii.hexlify(bytes(data)).decode("ascii")


def from_hex(text: str) -> bytes:
    """Inverse of ``to_hex``

    Raises:
        ValueError: odd length or non-hex characters
    """
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, TypeError) as e:
        raise ValueError(f"Invalid hex string: {e}") from e

"""
Core marker scanning and key extraction
"""

from .byte_source import ByteSource
from .hex_codec import from_hex, to_hex
from .models import (
    CRYPTED_KEY_MARKER,
    MASTER_KEY_MARKER,
    CryptedKeyRecord,
    ExtractionReport,
    KeyRecord,
    MarkerToken,
    MasterKeyRecord,
    MatchPosition,
)
from .record_extractor import CRYPTED_KEY_LAYOUT, MASTER_KEY_LAYOUT, RecordExtractor, RecordLayout
from .scanner import MarkerScanner
from .wallet_extractor import (
    WalletKeyExtractor,
    WalletResult,
    extract_from_bytes,
    extract_many,
    extract_wallet_keys,
)

__all__ = [
    "ByteSource",
    "to_hex",
    "from_hex",
    "MarkerToken",
    "MatchPosition",
    "KeyRecord",
    "MasterKeyRecord",
    "CryptedKeyRecord",
    "ExtractionReport",
    "MASTER_KEY_MARKER",
    "CRYPTED_KEY_MARKER",
    "MarkerScanner",
    "RecordExtractor",
    "RecordLayout",
    "MASTER_KEY_LAYOUT",
    "CRYPTED_KEY_LAYOUT",
    "WalletKeyExtractor",
    "WalletResult",
    "extract_wallet_keys",
    "extract_from_bytes",
    "extract_many",
]

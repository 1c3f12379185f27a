"""
BerkeleyDB header probe
"""

from ..common.constants import BerkeleyDBConstants
from ..common.exceptions import OutOfRangeError, TruncatedError
from .byte_source import ByteSource


def looks_like_berkeleydb(source: ByteSource) -> bool:
    """Check for the btree magic at offset 12; the cursor is restored"""
    position = source.tell()
    try:
        magic = source.read_at(BerkeleyDBConstants.MAGIC_OFFSET, len(BerkeleyDBConstants.BTREE_MAGIC))
    except (OutOfRangeError, TruncatedError):
        return False
    finally:
        source.seek(position)
    return magic == BerkeleyDBConstants.BTREE_MAGIC

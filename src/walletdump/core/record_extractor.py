"""
Record extractor

Reads a fixed-length field at a constant negative displacement from a
marker. This is how key blobs are recovered without parsing BerkeleyDB
pages.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..common.constants import FormatConstants
from ..common.exceptions import OutOfRangeError
from .byte_source import ByteSource
from .models import MatchPosition


class RecordLayout(BaseModel):
    """Where a record's payload sits relative to its marker"""

    back_offset: int = Field(..., ge=0, description="Bytes between payload start and marker")
    read_length: int = Field(..., gt=0, description="Bytes read from the payload start")
    payload_length: int = Field(..., gt=0, description="Leading bytes kept from the read")

    model_config = {"frozen": True}


MASTER_KEY_LAYOUT = RecordLayout(
    back_offset=FormatConstants.MASTER_KEY_BACK_OFFSET,
    read_length=FormatConstants.MASTER_KEY_READ_LENGTH,
    payload_length=FormatConstants.KEY_PAYLOAD_LENGTH,
)

# The 75 bytes after the payload belong to the record but are not reported
CRYPTED_KEY_LAYOUT = RecordLayout(
    back_offset=FormatConstants.CRYPTED_KEY_BACK_OFFSET,
    read_length=FormatConstants.CRYPTED_KEY_READ_LENGTH,
    payload_length=FormatConstants.KEY_PAYLOAD_LENGTH,
)


class RecordExtractor:
    """Back-offset reads against a ByteSource"""

    def __init__(self, source: ByteSource):
        self.source = source

    def extract(self, match_offset: int, back_offset: int, length: int) -> bytes:
        """Read ``length`` bytes starting ``back_offset`` bytes before the match

        Raises:
            OutOfRangeError: the target offset is negative
            TruncatedError: fewer than ``length`` bytes remain at the target
        """
        target = match_offset - back_offset
        if target < 0:
            raise OutOfRangeError(
                f"Record start {target} lies before the beginning of the source",
                offset=target,
                length=self.source.length,
            )
        return self.source.read_at(target, length)

    def extract_payload(self, match: MatchPosition, layout: RecordLayout) -> bytes:
        """Extract using a layout and keep only the reported payload"""
        data = self.extract(match.offset, layout.back_offset, layout.read_length)
        return data[: layout.payload_length]

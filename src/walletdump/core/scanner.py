"""
Marker scanner

Slides a 4-byte window over the source one byte at a time and reports
every offset where the window equals a marker. Markers are not aligned
in real wallet files, so every overlapping window is inspected.
"""

from __future__ import annotations

from typing import Iterator, Optional

from ..common.exceptions import OutOfRangeError, TruncatedError
from ..infrastructure.logging import get_logger
from .byte_source import ByteSource
from .models import MarkerToken, MatchPosition

logger = get_logger(__name__)


class MarkerScanner:
    """Byte-granularity marker search over a ByteSource"""

    def __init__(self, source: ByteSource):
        self.source = source
        self.windows_inspected = 0

    def find(self, token: MarkerToken, start: int = 0) -> Optional[MatchPosition]:
        """Return the first match at or after ``start``, or None at end of data"""
        size = len(token.value)
        p = start
        while True:
            try:
                self.source.seek(p)
                window = self.source.read_exact(size)
            except (OutOfRangeError, TruncatedError):
                return None

            self.windows_inspected += 1
            if window == token.value:
                logger.debug(f"{token.kind.value} marker at offset {p}")
                return MatchPosition(offset=p, token=token)
            p += 1

    def scan(self, token: MarkerToken, start: int = 0) -> Iterator[MatchPosition]:
        """Lazily yield every match, resuming one byte past each hit"""
        p = start
        while True:
            match = self.find(token, p)
            if match is None:
                return
            yield match
            p = match.offset + 1

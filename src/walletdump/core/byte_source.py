"""
Byte source

Bounds-checked seek/read view over a wallet file or an in-memory buffer.
Out-of-range seeks and short reads are reported as typed errors.
"""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import BinaryIO, Optional, Union

from ..common.constants import ReportConstants
from ..common.exceptions import OutOfRangeError, SourceUnavailableError, TruncatedError
from ..infrastructure.logging import get_logger

logger = get_logger(__name__)


class ByteSource:
    """Seekable, read-only view over a finite byte sequence

    The source owns its stream; use it as a context manager or call
    ``close()`` when done.
    """

    def __init__(self, stream: BinaryIO, length: int, name: str = ReportConstants.MEMORY_SOURCE_NAME):
        self._stream = stream
        self._length = length
        self.name = name

    @classmethod
    def open(cls, path: Union[str, Path]) -> "ByteSource":
        """Open a wallet file read-only

        Raises:
            SourceUnavailableError: path missing, not a regular file, or unreadable
        """
        path = Path(path)
        if not path.exists():
            raise SourceUnavailableError(f"Wallet file does not exist: {path}", file_path=str(path))
        if not path.is_file():
            raise SourceUnavailableError(f"Wallet path is not a file: {path}", file_path=str(path))

        try:
            stream = open(path, "rb")
            length = os.fstat(stream.fileno()).st_size
        except OSError as e:
            raise SourceUnavailableError(f"Can't open file {path}: {e}", file_path=str(path)) from e

        logger.debug(f"Opened {path} ({length} bytes)")
        return cls(stream, length, name=str(path))

    @classmethod
    def from_bytes(cls, data: bytes, name: str = ReportConstants.MEMORY_SOURCE_NAME) -> "ByteSource":
        """Wrap an in-memory buffer"""
        data = bytes(data)
        return cls(io.BytesIO(data), len(data), name=name)

    @property
    def length(self) -> int:
        return self._length

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def tell(self) -> int:
        return self._stream.tell()

    def seek(self, offset: int) -> None:
        """Move the cursor to an absolute offset in ``[0, length]``"""
        if offset < 0 or offset > self._length:
            raise OutOfRangeError(
                f"Seek to {offset} outside source of {self._length} bytes",
                offset=offset,
                length=self._length,
            )
        self._io(self._stream.seek, offset)

    def read_exact(self, n: int) -> bytes:
        """Read exactly ``n`` bytes from the cursor

        The cursor advances by the number of bytes actually read, even when
        the read comes up short.

        Raises:
            TruncatedError: fewer than ``n`` bytes remain
        """
        offset = self._stream.tell()
        data = self._io(self._stream.read, n)
        if len(data) < n:
            raise TruncatedError(
                f"Read of {n} bytes at {offset} got only {len(data)}",
                offset=offset,
                requested=n,
                available=len(data),
            )
        return data

    def read_at(self, offset: int, n: int) -> bytes:
        """Seek to ``offset`` and read exactly ``n`` bytes"""
        self.seek(offset)
        return self.read_exact(n)

    def _io(self, func, *args):
        try:
            return func(*args)
        except OSError as e:
            raise SourceUnavailableError(f"I/O error on {self.name}: {e}", file_path=self.name) from e

    def close(self) -> None:
        if not self._stream.closed:
            self._stream.close()
            logger.debug(f"Closed {self.name}")

    def __enter__(self) -> "ByteSource":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> Optional[bool]:
        self.close()
        return None

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"ByteSource(name={self.name!r}, length={self._length})"

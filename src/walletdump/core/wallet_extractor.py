"""
Wallet key extractor

Runs two independent scans over the same source:

1. master key: first ``mkey`` marker whose back-offset read succeeds
2. crypted keys: every ``ckey`` marker whose back-offset read succeeds

Candidates whose read falls outside the file are dropped and scanning
continues. Only an unreadable source aborts a run.

Known limitation: after a crypted-key hit the scan resumes 4 bytes past
the marker. Whether that always avoids double counting adjacent records
in real wallets is unverified; the behaviour is kept as is.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..common.constants import FormatConstants, ReportConstants
from ..common.exceptions import OutOfRangeError, SourceUnavailableError, TruncatedError
from ..infrastructure.logging import get_logger, log_performance
from .byte_source import ByteSource
from .header_probe import looks_like_berkeleydb
from .models import (
    CRYPTED_KEY_MARKER,
    MASTER_KEY_MARKER,
    CryptedKeyRecord,
    ExtractionReport,
    MasterKeyRecord,
)
from .record_extractor import CRYPTED_KEY_LAYOUT, MASTER_KEY_LAYOUT, RecordExtractor
from .scanner import MarkerScanner

logger = get_logger(__name__)


class WalletKeyExtractor:
    """Recovers encrypted key blobs from one ByteSource"""

    def __init__(self, source: ByteSource, performance_logging: bool = False):
        self.source = source
        self.scanner = MarkerScanner(source)
        self.records = RecordExtractor(source)
        self.performance_logging = performance_logging
        self.candidates_rejected = 0

    def find_master_key(self) -> Optional[MasterKeyRecord]:
        """Phase A: stop at the first marker that yields a record"""
        for match in self.scanner.scan(MASTER_KEY_MARKER, 0):
            try:
                payload = self.records.extract_payload(match, MASTER_KEY_LAYOUT)
            except (OutOfRangeError, TruncatedError) as e:
                self._reject(match.offset, e)
                continue

            return MasterKeyRecord(
                offset=match.offset - MASTER_KEY_LAYOUT.back_offset,
                marker_offset=match.offset,
                raw_bytes=payload,
            )

        logger.debug(f"No master key in {self.source.name}")
        return None

    def find_crypted_keys(self) -> List[CryptedKeyRecord]:
        """Phase B: collect every marker that yields a record"""
        found: List[CryptedKeyRecord] = []
        p = 0
        while True:
            match = self.scanner.find(CRYPTED_KEY_MARKER, p)
            if match is None:
                break

            try:
                payload = self.records.extract_payload(match, CRYPTED_KEY_LAYOUT)
            except (OutOfRangeError, TruncatedError) as e:
                self._reject(match.offset, e)
                p = match.offset + 1
                continue

            found.append(
                CryptedKeyRecord(
                    offset=match.offset - CRYPTED_KEY_LAYOUT.back_offset,
                    marker_offset=match.offset,
                    raw_bytes=payload,
                )
            )
            p = match.offset + FormatConstants.CRYPTED_KEY_MATCH_SKIP

        return found

    def run(self) -> ExtractionReport:
        """Run both phases and build the report"""
        start_time = time.time()
        self.candidates_rejected = 0

        berkeleydb_header = looks_like_berkeleydb(self.source)
        if not berkeleydb_header:
            logger.warning(f"{self.source.name} has no BerkeleyDB btree header, scanning anyway")

        master_key = self.find_master_key()
        self.source.seek(0)
        crypted_keys = self.find_crypted_keys()

        duration = time.time() - start_time
        report = ExtractionReport(
            source_name=self.source.name,
            source_length=self.source.length,
            master_key=master_key,
            crypted_keys=crypted_keys,
            candidates_rejected=self.candidates_rejected,
            berkeleydb_header=berkeleydb_header,
            duration_ms=duration * 1000,
        )

        logger.info(
            f"{self.source.name}: master key {'found' if master_key else 'not found'}, "
            f"{len(crypted_keys)} crypted keys, {self.candidates_rejected} candidates rejected"
        )
        if self.performance_logging:
            log_performance(
                "extract_keys",
                duration,
                source=self.source.name,
                windows=self.scanner.windows_inspected,
            )
        return report

    def _reject(self, offset: int, error: Exception) -> None:
        self.candidates_rejected += 1
        logger.debug(f"Discarding marker at {offset}: {error}")


@dataclass
class WalletResult:
    """Outcome for one wallet in a batch"""

    path: str
    report: Optional[ExtractionReport] = None
    error: Optional[SourceUnavailableError] = None

    @property
    def success(self) -> bool:
        return self.error is None


def extract_wallet_keys(path: Union[str, Path], performance_logging: bool = False) -> ExtractionReport:
    """Open a wallet file, recover its keys and close it

    Raises:
        SourceUnavailableError: the file cannot be opened or read
    """
    with ByteSource.open(path) as source:
        return WalletKeyExtractor(source, performance_logging=performance_logging).run()


def extract_from_bytes(data: bytes, name: str = ReportConstants.MEMORY_SOURCE_NAME) -> ExtractionReport:
    """Recover keys from an in-memory wallet image"""
    with ByteSource.from_bytes(data, name=name) as source:
        return WalletKeyExtractor(source).run()


def extract_many(paths: Iterable[Union[str, Path]], performance_logging: bool = False) -> List[WalletResult]:
    """Process several wallets independently; one unreadable file does not stop the rest"""
    results = []
    for path in paths:
        try:
            report = extract_wallet_keys(path, performance_logging=performance_logging)
            results.append(WalletResult(path=str(path), report=report))
        except SourceUnavailableError as e:
            results.append(WalletResult(path=str(path), error=e))
    return results

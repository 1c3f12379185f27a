"""
Data model for marker scanning and key extraction

All models are frozen: a record is created once per match, rendered and
dropped.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..common.constants import FormatConstants, ReportConstants
from ..common.enums import MarkerKind
from .hex_codec import to_hex


class MarkerToken(BaseModel):
    """4-byte literal tagging a record type"""

    kind: MarkerKind = Field(..., description="Record type the marker announces")
    value: bytes = Field(..., description="Literal marker bytes")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def _check_size(cls, v: bytes) -> bytes:
        if len(v) != FormatConstants.MARKER_SIZE:
            raise ValueError(f"marker must be {FormatConstants.MARKER_SIZE} bytes, got {len(v)}")
        return v


MASTER_KEY_MARKER = MarkerToken(kind=MarkerKind.MASTER_KEY, value=FormatConstants.MASTER_KEY_MARKER)
CRYPTED_KEY_MARKER = MarkerToken(kind=MarkerKind.CRYPTED_KEY, value=FormatConstants.CRYPTED_KEY_MARKER)


class MatchPosition(BaseModel):
    """Absolute offset where a 4-byte window equals a marker"""

    offset: int = Field(..., ge=0)
    token: MarkerToken

    model_config = {"frozen": True}


class KeyRecord(BaseModel):
    """One successfully extracted 48-byte encrypted key blob"""

    kind: MarkerKind
    offset: int = Field(..., ge=0, description="File offset the payload was read from")
    marker_offset: int = Field(..., ge=0, description="File offset of the marker")
    raw_bytes: bytes

    model_config = {"frozen": True}

    @field_validator("raw_bytes")
    @classmethod
    def _check_length(cls, v: bytes) -> bytes:
        if len(v) != FormatConstants.KEY_PAYLOAD_LENGTH:
            raise ValueError(
                f"key payload must be {FormatConstants.KEY_PAYLOAD_LENGTH} bytes, got {len(v)}"
            )
        return v

    @property
    def hex(self) -> str:
        return to_hex(self.raw_bytes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "offset": self.offset,
            "marker_offset": self.marker_offset,
            "hex": self.hex,
        }


class MasterKeyRecord(KeyRecord):
    kind: MarkerKind = MarkerKind.MASTER_KEY


class CryptedKeyRecord(KeyRecord):
    kind: MarkerKind = MarkerKind.CRYPTED_KEY


class ExtractionReport(BaseModel):
    """Everything recovered from one wallet, in discovery order"""

    source_name: str = Field(ReportConstants.MEMORY_SOURCE_NAME)
    source_length: int = Field(0, ge=0)
    master_key: Optional[MasterKeyRecord] = None
    crypted_keys: List[CryptedKeyRecord] = Field(default_factory=list)
    candidates_rejected: int = Field(0, ge=0, description="Marker hits that yielded no record")
    berkeleydb_header: bool = Field(False, description="File starts with a BerkeleyDB btree header")
    duration_ms: float = Field(0.0, ge=0.0)

    model_config = {"frozen": True}

    @property
    def has_master_key(self) -> bool:
        return self.master_key is not None

    def same_keys_as(self, other: "ExtractionReport") -> bool:
        """Compare recovered content, ignoring timing"""
        return self.model_dump(exclude={"duration_ms"}) == other.model_dump(exclude={"duration_ms"})

    def lines(self, show_offsets: bool = False) -> List[str]:
        """Text rendering, one key per line"""

        def _fmt(label: str, record: KeyRecord) -> str:
            line = f"{label}{record.hex}"
            if show_offsets:
                line += f" @{record.marker_offset}"
            return line

        result = []
        if self.master_key is not None:
            result.append(_fmt(ReportConstants.MASTER_KEY_LABEL, self.master_key))
            result.append("")
        else:
            result.append(ReportConstants.NO_MASTER_KEY)
        for record in self.crypted_keys:
            result.append(_fmt(ReportConstants.CRYPTED_KEY_LABEL, record))
        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source_name,
            "source_length": self.source_length,
            "berkeleydb_header": self.berkeleydb_header,
            "master_key": self.master_key.to_dict() if self.master_key else None,
            "crypted_keys": [record.to_dict() for record in self.crypted_keys],
            "candidates_rejected": self.candidates_rejected,
            "duration_ms": round(self.duration_ms, 3),
        }

"""
Pytest configuration and fixtures for walletdump tests
"""

import pytest

from walletdump.common.constants import BerkeleyDBConstants, FormatConstants


def master_key_entry(payload: bytes) -> bytes:
    """48-byte payload followed by filler so that the marker sits 72 bytes after it"""
    assert len(payload) == FormatConstants.MASTER_KEY_READ_LENGTH
    gap = FormatConstants.MASTER_KEY_BACK_OFFSET - len(payload)
    return payload + b"\x00" * gap + FormatConstants.MASTER_KEY_MARKER


def crypted_key_entry(payload: bytes) -> bytes:
    """123-byte record whose marker sits 52 bytes after the start"""
    assert len(payload) == FormatConstants.KEY_PAYLOAD_LENGTH
    gap = FormatConstants.CRYPTED_KEY_BACK_OFFSET - len(payload)
    tail = FormatConstants.CRYPTED_KEY_READ_LENGTH - FormatConstants.CRYPTED_KEY_BACK_OFFSET - 4
    return payload + b"\x00" * gap + FormatConstants.CRYPTED_KEY_MARKER + b"\x00" * tail


def berkeleydb_header(size: int = 32) -> bytes:
    header = bytearray(size)
    start = BerkeleyDBConstants.MAGIC_OFFSET
    header[start:start + 4] = BerkeleyDBConstants.BTREE_MAGIC
    return bytes(header)


@pytest.fixture
def master_payload():
    return bytes(range(0x10, 0x10 + 48))


@pytest.fixture
def crypted_payloads():
    return [bytes([0xC0 + i]) * 48 for i in range(3)]


@pytest.fixture
def sample_wallet_data(master_payload, crypted_payloads):
    """BerkeleyDB header, one master key and three crypted keys"""
    data = berkeleydb_header()
    data += master_key_entry(master_payload)
    data += b"\x00" * 16
    for payload in crypted_payloads:
        data += crypted_key_entry(payload) + b"\x00" * 7
    return data


@pytest.fixture
def wallet_file(tmp_path, sample_wallet_data):
    path = tmp_path / "wallet.dat"
    path.write_bytes(sample_wallet_data)
    return path


@pytest.fixture(autouse=True)
def reset_app_config():
    """Drop the cached global configuration between tests"""
    yield
    from walletdump.config import settings

    settings._app_config = None


@pytest.fixture
def make_master_entry():
    return master_key_entry


@pytest.fixture
def make_crypted_entry():
    return crypted_key_entry


@pytest.fixture
def make_bdb_header():
    return berkeleydb_header

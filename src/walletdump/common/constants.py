#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
walletdump constant definitions
Byte layout of the legacy wallet records plus file and report constants
"""


class FormatConstants:
    """Legacy wallet record layout

    These values describe the bytes that precede each record-type marker
    in a BerkeleyDB wallet file. They are format constants, not settings.
    """

    # Record-type markers
    MASTER_KEY_MARKER = b"mkey"
    CRYPTED_KEY_MARKER = b"ckey"
    MARKER_SIZE = 4

    # Master key: 48 bytes located 72 bytes before the marker
    MASTER_KEY_BACK_OFFSET = 72
    MASTER_KEY_READ_LENGTH = 48

    # Crypted key: 123 bytes located 52 bytes before the marker
    CRYPTED_KEY_BACK_OFFSET = 52
    CRYPTED_KEY_READ_LENGTH = 123

    # Reported payload size for both record types
    KEY_PAYLOAD_LENGTH = 48

    # Resume distance after a successful crypted-key extraction
    CRYPTED_KEY_MATCH_SKIP = 4


class BerkeleyDBConstants:
    """BerkeleyDB file header"""

    MAGIC_OFFSET = 12
    BTREE_MAGIC = b"\x62\x31\x05\x00"


class FileConstants:
    """File and path related constants"""

    # Configuration files
    CONFIG_DIR_NAME = ".walletdump"
    DEFAULT_CONFIG_FILE = "config.yaml"

    # Log files
    LOG_FILE_NAME = "walletdump.log"
    LOG_MAX_SIZE = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT = 5


class ReportConstants:
    """Text report labels"""

    MASTER_KEY_LABEL = "Mkey_encrypted: "
    CRYPTED_KEY_LABEL = "encrypted ckey: "
    NO_MASTER_KEY = "There is no Master Key in the file"
    SOURCE_HEADER = "== {name}"
    MEMORY_SOURCE_NAME = "<memory>"

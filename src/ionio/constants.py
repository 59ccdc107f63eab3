"""
Centralized constants for ionio artifact handling.

Environment variable overrides:
- IONIO_LOG_LEVEL: Default log level for the `ionio-artifact` CLI
"""

from __future__ import annotations

import os

# Prefix marking a constructor placeholder inside an asm sequence
PLACEHOLDER_PREFIX = "$"

# Indentation used when writing artifact JSON
ARTIFACT_JSON_INDENT = 2

DEFAULT_LOG_LEVEL = os.environ.get("IONIO_LOG_LEVEL", "WARNING").upper()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Script numbers are bounded to signed 64-bit values
SCRIPT_NUM_MAX = 2**63 - 1
SCRIPT_NUM_MIN = -(2**63 - 1)

# Byte lengths of fixed-size primitive types
ASSET_ID_BYTES = 32
VALUE_BYTES = 8
PUBKEY_BYTES = 33
XONLY_PUBKEY_BYTES = 32
SCHNORR_SIG_BYTES = (64, 65)
DATASIG_BYTES = 64


def placeholder(name: str) -> str:
    """Return the asm token standing in for constructor input `name`."""
    return PLACEHOLDER_PREFIX + name

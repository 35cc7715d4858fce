"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from isocodec import FieldSpecRegistry

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"

# MTI 0200, fields 3, 4, 7, 11, 41, 49
SCENARIO_A = "02003220000000808000000010000000001500120604120000000112340001840"

# TPDU 6000180000, MTI 0800, fields 3, 11, 24, 41, 62
SCENARIO_B = bytes.fromhex(
    "60001800000800202001000080000492000000029900183737303030303333"
    "003748544c45303331303031303031373730303030333330303030303030378ca64de98ca64de9"
)

ASCII_SPEC = {
    0: {"length_type": "fixed", "max_length": 4},
    1: {"length_type": "fixed", "max_length": 16},
    2: {"length_type": "llvar", "max_length": 19},
    3: {"length_type": "fixed", "max_length": 6},
    4: {"length_type": "fixed", "max_length": 12},
    7: {"length_type": "fixed", "max_length": 10},
    11: {"length_type": "fixed", "max_length": 6},
    32: {"length_type": "llvar", "max_length": 11},
    41: {"length_type": "fixed", "max_length": 8},
    48: {"length_type": "lllvar", "max_length": 999, "content": "string"},
    49: {"length_type": "fixed", "max_length": 3},
    70: {"length_type": "fixed", "max_length": 3},
    102: {"length_type": "llvar", "max_length": 28},
}

POS_SPEC = {
    0: {"LenType": "fixed", "MaxLen": 4, "HeaderHex": True},
    1: {"LenType": "fixed", "MaxLen": 16, "HeaderHex": True},
    2: {"LenType": "llvar", "MaxLen": 19, "HeaderHex": True},
    3: {"LenType": "fixed", "MaxLen": 6, "HeaderHex": True},
    4: {"LenType": "fixed", "MaxLen": 12, "HeaderHex": True},
    11: {"LenType": "fixed", "MaxLen": 6, "HeaderHex": True},
    24: {"LenType": "fixed", "MaxLen": 3, "HeaderHex": True},
    35: {"LenType": "llvar", "MaxLen": 37, "HeaderHex": True},
    41: {"LenType": "fixed", "MaxLen": 8, "Contain": "string"},
    55: {"LenType": "lllvar", "MaxLen": 999, "HeaderHex": True, "Contain": "chip-tag"},
    56: {"LenType": "fixed", "MaxLen": 4, "HeaderHex": True, "Contain": "chip-tag"},
    62: {"LenType": "lllvar", "MaxLen": 999, "HeaderHex": True, "Contain": "string"},
    63: {"LenType": "llllvar", "MaxLen": 9999, "HeaderHex": True},
    70: {"LenType": "fixed", "MaxLen": 4, "HeaderHex": True},
}


@pytest.fixture(scope="session")
def ascii_registry() -> FieldSpecRegistry:
    """Registry with ASCII MTI, bitmap and fields."""
    return FieldSpecRegistry.from_mapping(ASCII_SPEC)


@pytest.fixture(scope="session")
def pos_registry() -> FieldSpecRegistry:
    """Registry with packed MTI, bitmap and numeric fields."""
    return FieldSpecRegistry.from_mapping(POS_SPEC)


@pytest.fixture
def scenario_a() -> str:
    """ASCII 0200 message without transport header."""
    return SCENARIO_A


@pytest.fixture
def scenario_b() -> bytes:
    """Packed 0800 message behind a transport header."""
    return SCENARIO_B

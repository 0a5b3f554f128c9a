# File: utils/hue_utils.py
"""Colour hint utilities for Otetsudai.

Pure Python functions with ZERO Home Assistant dependencies.

The dashboard colours each registrant's bar with a hue derived from their
name, so the same person keeps the same colour across reloads and devices.
Some names have a fixed hue chosen by the family; those live in an override
table that always wins.
"""

from __future__ import annotations

from collections.abc import Mapping

HUE_RANGE = 360


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def name_hash(name: str) -> int:
    """Return the `hash * 31 + code_unit` string hash of a name.

    Iterates UTF-16 code units (so characters outside the BMP contribute two
    units) and performs the shift in signed 32-bit arithmetic, matching the
    hash browsers compute for the same name.
    """
    encoded = name.encode("utf-16-le")
    value = 0
    for idx in range(0, len(encoded), 2):
        code_unit = int.from_bytes(encoded[idx : idx + 2], "little")
        value = code_unit + (_to_int32(_to_int32(value) << 5) - value)
    return value


def string_to_hue(name: str, overrides: Mapping[str, int] | None = None) -> int:
    """Return a hue in [0, 360) for a registrant name.

    Args:
        name: Registrant display name
        overrides: Fixed hues for specific names; a zero entry is ignored

    Returns:
        Hue in degrees. A negative hash lands on the equivalent positive
        angle (-40 → 320), which is the same colour on the hue wheel.
    """
    if overrides and overrides.get(name):
        return overrides[name] % HUE_RANGE
    return name_hash(name) % HUE_RANGE

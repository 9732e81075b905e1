"""CRC-64 checksum (ISO polynomial) for password columns.

Reflected ISO 3309 polynomial with all-ones initial value and final xor
(the CRC-64/GO-ISO parameter set).  An empty input yields 0, which renders
as "no password".
"""

from __future__ import annotations

from functools import cache

# x^64 + x^4 + x^3 + x + 1, bit-reversed
_ISO_POLY = 0xD800000000000000
_MASK = 0xFFFFFFFFFFFFFFFF


@cache
def _table() -> tuple[int, ...]:
    entries = []
    for i in range(256):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ _ISO_POLY
            else:
                crc >>= 1
        entries.append(crc)
    return tuple(entries)


def crc64_iso(data: bytes) -> int:
    """Return the CRC-64/ISO checksum of *data* as an unsigned 64-bit int."""
    table = _table()
    crc = _MASK
    for byte in data:
        crc = table[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ _MASK

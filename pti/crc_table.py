"""
Voice Code Lookup Table

Builds the 256-entry table behind the PTI voice code hash. The table is a
reflected CRC-16 table: each entry is a single byte pushed through eight
shift-and-XOR steps against the polynomial.

The voice code uses polynomial 0xA001 (40961), the reflected form of the
CRC-16/ARC polynomial 0x8005. That reproduces the table used by the
producetraceability.org voice pick code calculator (entry[1] == 0xC0C1).
"""

from typing import Tuple

VOICE_CODE_POLYNOMIAL = 0xA001

TABLE_SIZE = 256


def create_crc_lut(polynomial: int) -> Tuple[int, ...]:
    """
    Generate a reflected CRC-16 lookup table for a polynomial.

    Args:
        polynomial: 16-bit reflected polynomial (higher bits are ignored)

    Returns:
        Tuple of 256 unsigned 16-bit integers indexed by byte value

    Example:
        >>> table = create_crc_lut(0xA001)
        >>> hex(table[1]), hex(table[128])
        ('0xc0c1', '0xa001')
    """
    polynomial &= 0xFFFF
    table = []
    for index in range(TABLE_SIZE):
        value = index
        for _ in range(8):
            if value & 1:
                value = (value >> 1) ^ polynomial
            else:
                value >>= 1
        table.append(value)
    return tuple(table)


# Built once at import; read-only afterwards so threads can share it
VOICE_CODE_TABLE = create_crc_lut(VOICE_CODE_POLYNOMIAL)

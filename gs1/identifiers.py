"""
GS1 Identifier Shape Rules for PTI Labels

This module checks the shape of the three fields printed on a Produce
Traceability Initiative (PTI) case label:
- GTIN (Global Trade Item Number): Identifies the product
- LOT: Free-text batch/lot code identifying the production run
- Pack date parts: Two-digit YY, MM and DD components

Only the shape is checked. GTIN check digits are not verified and date parts
are not checked against the calendar ("99" is an acceptable month).
"""

import re

# GTIN-8, GTIN-12 (UPC-A), GTIN-13 (EAN-13) and GTIN-14
GTIN_LENGTHS = frozenset({8, 12, 13, 14})

# PTI case labels always carry a GTIN-14
STRICT_GTIN_LENGTHS = frozenset({14})

MAX_LOT_LENGTH = 20

# GS1 free-text lot characters. Parentheses are allowed even though GS1
# uses "(xx)" to mark application identifiers in human readable text.
LOT_PATTERN = re.compile(r"""^[!"%&'()*+,\-./0-9:;<=>?A-Z_a-z]{1,20}$""")

_ASCII_DIGITS = frozenset("0123456789")


def _is_ascii_digits(text: str) -> bool:
    # str.isdigit() also accepts superscripts and other Unicode digits
    return bool(text) and all(ch in _ASCII_DIGITS for ch in text)


def validate_gtin(gtin: str, strict: bool = False) -> bool:
    """
    Check that a GTIN has a valid GS1 shape.

    Args:
        gtin: GTIN as printed on the label (no separators)
        strict: Only accept 14-digit GTINs (PTI case label format)

    Returns:
        True if the GTIN is all ASCII digits with an accepted length

    Example:
        >>> validate_gtin("12345678901244")
        True
        >>> validate_gtin("0614141")
        False
        >>> validate_gtin("061414123456", strict=True)
        False
    """
    if not isinstance(gtin, str):
        return False

    allowed = STRICT_GTIN_LENGTHS if strict else GTIN_LENGTHS
    return len(gtin) in allowed and _is_ascii_digits(gtin)


def validate_lot(lot: str) -> bool:
    """
    Check that a LOT code uses GS1 free-text characters.

    Accepts 1-20 characters drawn from ASCII letters, digits, underscore and
    the punctuation ! " % & ' ( ) * + , - . / : ; < = > ?

    Case is significant downstream, so "32abcd" and "32ABCD" are both valid
    and are different lots.

    Example:
        >>> validate_lot("55ABFC")
        True
        >>> validate_lot("LOT#1")
        False
    """
    if not isinstance(lot, str):
        return False
    # fullmatch so a trailing newline cannot slip past "$"
    return LOT_PATTERN.fullmatch(lot) is not None


def validate_date_component(part: str) -> bool:
    """Check that a pack date part (YY, MM or DD) is 1 or 2 ASCII digits."""
    if not isinstance(part, str):
        return False
    return 1 <= len(part) <= 2 and _is_ascii_digits(part)


def pad_date_component(part: str) -> str:
    """
    Left-pad a pack date part with zeros to two characters.

    Example:
        >>> pad_date_component("1")
        '01'
    """
    return part.zfill(2)

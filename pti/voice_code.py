"""
PTI Voice Pick Code

Computes the 4-digit voice code printed on Produce Traceability Initiative
case labels. Warehouse pickers read the code aloud to confirm they picked
the right GTIN, lot and pack date without reading the whole label.

Process:
1. Validate the GTIN, LOT and pack date parts
2. Build the canonical text: GTIN + LOT + YY + MM + DD (date parts zero-padded)
3. Fold the text through the voice code table into a 16-bit digest
4. Keep the last four decimal digits of the digest

Reference: https://producetraceability.org/voice-pick-code-calculator/

The hash is case sensitive. Lots "32abcd" and "32ABCD" give different codes,
so take care when a lot code may be typed in mixed case.
"""

import logging
from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, Field

from gs1.identifiers import (
    validate_gtin,
    validate_lot,
    validate_date_component,
    pad_date_component,
)
from pti import config
from pti.crc_table import VOICE_CODE_TABLE

logger = logging.getLogger(__name__)


class VoiceCodeValidationError(ValueError):
    """Raised when a voice code input field has the wrong shape."""

    def __init__(self, field: str, value, message: str):
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidYear(VoiceCodeValidationError):
    """Pack date YY is not 1 or 2 digits."""


class InvalidMonth(VoiceCodeValidationError):
    """Pack date MM is not 1 or 2 digits."""


class InvalidDay(VoiceCodeValidationError):
    """Pack date DD is not 1 or 2 digits."""


class InvalidLot(VoiceCodeValidationError):
    """LOT is empty, longer than 20 characters or has a disallowed character."""


class InvalidGtin(VoiceCodeValidationError):
    """GTIN has a non-digit character or an unsupported length."""


class VoiceCodeRecord(BaseModel):
    """
    Result of a voice code computation.

    The major half is the first two digits and the minor half the last two,
    matching the label where the large digits are printed first:

        >>> record = compute_voice_code("12345678901244", "LOT123", "03", "01", "02")
        >>> record.voice_code, record.voice_code_major, record.voice_code_minor
        ('6991', '69', '91')

    Records are frozen; compute a new one instead of editing fields.
    """
    canonical_text: str = Field(..., min_length=1, repr=False, description="Exact text that was hashed")
    gtin: str = Field(..., description="GTIN as supplied")
    lot: str = Field(..., description="LOT as supplied, case preserved")
    pack_date: str = Field(..., pattern=r"^\d{6}$", description="YYMMDD, zero-padded")
    voice_code: str = Field(..., pattern=r"^\d{4}$", description="4-digit voice code")
    voice_code_major: str = Field(..., pattern=r"^\d{2}$", repr=False)
    voice_code_minor: str = Field(..., pattern=r"^\d{2}$", repr=False)

    class Config:
        frozen = True


def build_canonical_text(gtin: str, lot: str, yy: str, mm: str, dd: str) -> str:
    """
    Join the label fields into the text that gets hashed.

    No validation happens here. Date parts are left-padded with zeros to
    two characters so "1" and "01" hash the same.

    Example:
        >>> build_canonical_text("a", "b", "yy", "m", "dd")
        'abyy0mdd'
    """
    return f"{gtin}{lot}{pad_date_component(yy)}{pad_date_component(mm)}{pad_date_component(dd)}"


def hash_fold(text: Union[str, bytes]) -> int:
    """
    Fold text through the voice code table into a 16-bit digest.

    Each character is XORed into the low byte of the accumulator, which
    selects the table entry to XOR with the accumulator shifted right by
    one byte.

    Args:
        text: Canonical text (str) or raw bytes

    Returns:
        Digest in the range 0-65535
    """
    codes = text if isinstance(text, (bytes, bytearray)) else (ord(ch) for ch in text)

    digest = 0
    for code in codes:
        digest = (digest >> 8) ^ VOICE_CODE_TABLE[(digest ^ code) & 0xFF]
    return digest


def format_voice_code(digest: int) -> str:
    """
    Reduce a digest to a zero-padded 4-digit voice code.

    Example:
        >>> format_voice_code(91)
        '0091'
        >>> format_voice_code(56991)
        '6991'
    """
    return f"{digest % 10000:04d}"


def generate_voice_code_hash(text: Union[str, bytes]) -> str:
    """
    Compute the voice code for text that is already canonical.

    Example:
        >>> generate_voice_code_hash("12345678901244LOT123030102")
        '6991'
    """
    return format_voice_code(hash_fold(text))


def _reject(error_class, field: str, value, message: str):
    logger.debug(f"Voice code input rejected: {field}={value!r}")
    raise error_class(field, value, message)


def compute_voice_code(
    gtin: str,
    lot: str,
    yy: str,
    mm: str,
    dd: str,
    *,
    strict_gtin: Optional[bool] = None
) -> VoiceCodeRecord:
    """
    Validate the label fields and compute their voice code.

    Fields are checked in order YY, MM, DD, LOT, GTIN and the first failure
    is raised. Date parts are not checked against the calendar, so month
    "99" is accepted and hashed like any other value.

    Args:
        gtin: GTIN-8, -12, -13 or -14 (digits only)
        lot: Lot code, 1-20 GS1 free-text characters
        yy: Pack date year, 1 or 2 digits
        mm: Pack date month, 1 or 2 digits
        dd: Pack date day, 1 or 2 digits
        strict_gtin: Only accept GTIN-14. None uses PTI_STRICT_GTIN.

    Returns:
        VoiceCodeRecord

    Raises:
        InvalidYear, InvalidMonth, InvalidDay, InvalidLot, InvalidGtin

    Example:
        >>> compute_voice_code("61414100734933", "32ABCD", "01", "01", "01").voice_code
        '1085'
    """
    if not validate_date_component(yy):
        _reject(InvalidYear, "yy", yy, f"Date component YY must be numeric and 1 or 2 digits, got {yy!r}")
    if not validate_date_component(mm):
        _reject(InvalidMonth, "mm", mm, f"Date component MM must be numeric and 1 or 2 digits, got {mm!r}")
    if not validate_date_component(dd):
        _reject(InvalidDay, "dd", dd, f"Date component DD must be numeric and 1 or 2 digits, got {dd!r}")

    if not validate_lot(lot):
        _reject(
            InvalidLot, "lot", lot,
            "LOT must be 1-20 characters of letters, digits and "
            "! \" % & ' ( ) * + , - . / : ; < = > ? _"
        )

    if strict_gtin is None:
        strict_gtin = config.strict_gtin_enabled()
    if not validate_gtin(gtin, strict=strict_gtin):
        lengths = "14" if strict_gtin else "8, 12, 13 or 14"
        _reject(InvalidGtin, "gtin", gtin, f"GTIN must be numeric with {lengths} digits, got {gtin!r}")

    canonical_text = build_canonical_text(gtin, lot, yy, mm, dd)
    voice_code = generate_voice_code_hash(canonical_text)

    return VoiceCodeRecord(
        canonical_text=canonical_text,
        gtin=gtin,
        lot=lot,
        pack_date=pad_date_component(yy) + pad_date_component(mm) + pad_date_component(dd),
        voice_code=voice_code,
        voice_code_major=voice_code[:2],
        voice_code_minor=voice_code[2:],
    )


def compute_voice_code_for_date(
    gtin: str,
    lot: str,
    pack_date: date,
    *,
    strict_gtin: Optional[bool] = None
) -> VoiceCodeRecord:
    """
    Compute a voice code from a calendar pack date.

    Example:
        >>> from datetime import date
        >>> compute_voice_code_for_date("12345678901244", "LOT123", date(2003, 1, 2)).voice_code
        '6991'
    """
    return compute_voice_code(
        gtin,
        lot,
        pack_date.strftime("%y"),
        pack_date.strftime("%m"),
        pack_date.strftime("%d"),
        strict_gtin=strict_gtin,
    )

"""PTI Voice Pick Code Package"""

from .crc_table import create_crc_lut, VOICE_CODE_POLYNOMIAL, VOICE_CODE_TABLE
from .voice_code import (
    VoiceCodeRecord,
    VoiceCodeValidationError,
    InvalidYear,
    InvalidMonth,
    InvalidDay,
    InvalidLot,
    InvalidGtin,
    build_canonical_text,
    hash_fold,
    format_voice_code,
    generate_voice_code_hash,
    compute_voice_code,
    compute_voice_code_for_date,
)
from gs1.identifiers import validate_gtin, validate_lot, validate_date_component

__all__ = [
    'create_crc_lut',
    'VOICE_CODE_POLYNOMIAL',
    'VOICE_CODE_TABLE',
    'VoiceCodeRecord',
    'VoiceCodeValidationError',
    'InvalidYear',
    'InvalidMonth',
    'InvalidDay',
    'InvalidLot',
    'InvalidGtin',
    'build_canonical_text',
    'hash_fold',
    'format_voice_code',
    'generate_voice_code_hash',
    'compute_voice_code',
    'compute_voice_code_for_date',
    'validate_gtin',
    'validate_lot',
    'validate_date_component',
]

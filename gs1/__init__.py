"""GS1 Identifier Package"""

from .identifiers import (
    validate_gtin,
    validate_lot,
    validate_date_component,
    pad_date_component,
    GTIN_LENGTHS,
    STRICT_GTIN_LENGTHS,
)

__all__ = [
    'validate_gtin',
    'validate_lot',
    'validate_date_component',
    'pad_date_component',
    'GTIN_LENGTHS',
    'STRICT_GTIN_LENGTHS',
]

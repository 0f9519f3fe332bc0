"""
GS1 Identifier Shape Tests

Tests GTIN, LOT and pack date part validation with valid and invalid cases.
"""

import pytest

from gs1.identifiers import (
    validate_gtin,
    validate_lot,
    validate_date_component,
    pad_date_component,
)


class TestValidateGtin:
    """Test suite for GTIN shape checks"""

    @pytest.mark.parametrize("gtin", [
        "12345670",          # GTIN-8
        "614141007349",      # GTIN-12
        "0614141007349",     # GTIN-13
        "61414100734933",    # GTIN-14
    ])
    def test_accepted_lengths(self, gtin):
        assert validate_gtin(gtin)

    @pytest.mark.parametrize("gtin", [
        "",
        "1234567",
        "123456789",
        "12345678901",
        "123456789012345",
    ])
    def test_rejected_lengths(self, gtin):
        assert not validate_gtin(gtin)

    @pytest.mark.parametrize("gtin", [
        "6141410073493A",
        "61414100 73493",
        "-1414100734933",
        "6141410073493\n",
        "614141007349３",    # fullwidth digit
        "6141410073493²",    # superscript two
    ])
    def test_non_digits_rejected(self, gtin):
        assert not validate_gtin(gtin)

    def test_check_digit_not_verified(self):
        """Only the shape is checked, a wrong check digit still passes"""
        assert validate_gtin("61414100734930")

    def test_strict_accepts_only_gtin_14(self):
        assert validate_gtin("61414100734933", strict=True)
        assert not validate_gtin("0614141007349", strict=True)
        assert not validate_gtin("12345670", strict=True)

    def test_non_string_rejected(self):
        assert not validate_gtin(61414100734933)
        assert not validate_gtin(None)


class TestValidateLot:
    """Test suite for LOT character set checks"""

    @pytest.mark.parametrize("lot", [
        "LOT123",
        "32abcd",
        "32ABCD",
        "A",
        "a" * 20,
        "lot_2024-01/B.7",
        "!\"%&'()*+,-./:;<=>?_",
    ])
    def test_valid_lots(self, lot):
        assert validate_lot(lot)

    @pytest.mark.parametrize("lot", [
        "",
        "a" * 21,
        "LOT#1",
        "LOT@1",
        "LOT 1",
        "LOT~1",
        "LOT$1",
        "LOT[1]",
        "LOTé",
        "LOT1\n",
    ])
    def test_invalid_lots(self, lot):
        assert not validate_lot(lot)

    def test_non_string_rejected(self):
        assert not validate_lot(123)


class TestDateComponents:
    """Test suite for YY/MM/DD part checks"""

    @pytest.mark.parametrize("part", ["0", "1", "01", "12", "99"])
    def test_valid_parts(self, part):
        assert validate_date_component(part)

    @pytest.mark.parametrize("part", ["", "001", "ab", "1a", " 1", "-1", "１"])
    def test_invalid_parts(self, part):
        assert not validate_date_component(part)

    def test_no_calendar_check(self):
        """Month 99 is not a real month but has the right shape"""
        assert validate_date_component("99")

    def test_padding(self):
        assert pad_date_component("1") == "01"
        assert pad_date_component("01") == "01"
        assert pad_date_component("0") == "00"

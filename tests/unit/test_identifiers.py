"""Tests for identifier checksums and validators."""

import pytest

from cwrcodec.validators import (
    generate_ean13_checksum,
    generate_ipi_base_checksum,
    generate_ipi_checksum,
    generate_iswc_checksum,
    validate_ean13,
    validate_ipi,
    validate_ipi_base,
    validate_isrc,
    validate_iswc,
    validate_share,
    validate_shares_total,
    validate_society_code,
)

# ---------------------------------------------------------------------------
# Empty input
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    "validator",
    [
        validate_ipi,
        validate_ipi_base,
        validate_iswc,
        validate_isrc,
        validate_ean13,
        validate_society_code,
    ],
)
@pytest.mark.parametrize("value", [None, "", "   "])
def test_empty_input_is_valid(validator, value) -> None:
    """Test absent optional identifiers are always valid."""
    result = validator(value)

    assert result.is_valid
    assert result.normalized is None
    assert result.errors == ()


# ---------------------------------------------------------------------------
# IPI Name Number
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_validate_ipi_accepts_correct_check_digits() -> None:
    """Test 123456789 mod 101 = 45 gives check digits 56."""
    result = validate_ipi("123456789 56")

    assert result.is_valid
    assert result.normalized == "12345678956"


@pytest.mark.unit
def test_validate_ipi_zero_remainder_gives_00() -> None:
    """Test a base divisible by 101 takes check digits 00."""
    assert validate_ipi("00000010100").is_valid


@pytest.mark.unit
def test_validate_ipi_reports_expected_and_actual() -> None:
    """Test checksum mismatch carries both check values."""
    result = validate_ipi("12345678957")

    assert not result.is_valid
    assert result.expected == "56"
    assert result.actual == "57"
    assert "Expected 56, got 57" in result.error


@pytest.mark.unit
@pytest.mark.parametrize("value", ["1234567895", "123456789567", "12345678A56"])
def test_validate_ipi_rejects_bad_shape(value: str) -> None:
    """Test IPI must be exactly 11 digits."""
    result = validate_ipi(value)

    assert not result.is_valid
    assert "11 digits" in result.error


@pytest.mark.unit
@pytest.mark.parametrize("base", ["123456789", "000000202", "987654321", "250000000"])
def test_generated_ipi_validates_and_mutations_fail(base: str) -> None:
    """Test generated IPIs validate and any check digit change is rejected."""
    ipi = generate_ipi_checksum(base)

    assert validate_ipi(ipi).is_valid

    for position in (9, 10):
        for digit in "0123456789":
            if digit == ipi[position]:
                continue
            mutated = ipi[:position] + digit + ipi[position + 1 :]
            assert not validate_ipi(mutated).is_valid


@pytest.mark.unit
def test_generate_ipi_checksum_rejects_check_of_100() -> None:
    """Test a base with remainder 1 cannot be given two check digits."""
    with pytest.raises(ValueError, match="two-digit"):
        generate_ipi_checksum("000000102")


@pytest.mark.unit
def test_generate_ipi_checksum_requires_nine_digits() -> None:
    """Test malformed bases raise."""
    with pytest.raises(ValueError):
        generate_ipi_checksum("12345")


# ---------------------------------------------------------------------------
# IPI Base Number
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize("value", ["I-123456789-5", "I1234567895", "1234567895", "i-123456789-5"])
def test_validate_ipi_base_accepts_formats(value: str) -> None:
    """Test every accepted spelling normalizes to I-NNNNNNNNN-C."""
    result = validate_ipi_base(value)

    assert result.is_valid
    assert result.normalized == "I-123456789-5"


@pytest.mark.unit
def test_validate_ipi_base_rejects_wrong_check_digit() -> None:
    """Test weighted checksum mismatch."""
    result = validate_ipi_base("I-123456789-4")

    assert not result.is_valid
    assert result.expected == "5"
    assert result.actual == "4"


@pytest.mark.unit
def test_generate_ipi_base_checksum() -> None:
    """Test generated base numbers validate."""
    base = generate_ipi_base_checksum("555555555")

    assert validate_ipi_base(base).normalized == base


# ---------------------------------------------------------------------------
# ISWC
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    "value", ["T-123.456.789-2", "T1234567892", "t-123456789-2", "T 123456789 2"]
)
def test_validate_iswc_normalizes(value: str) -> None:
    """Test separator variants normalize to T-NNNNNNNNN-C."""
    result = validate_iswc(value)

    assert result.is_valid
    assert result.normalized == "T-123456789-2"


@pytest.mark.unit
def test_validate_iswc_rejects_wrong_check_digit() -> None:
    """Test ISWC checksum mismatch."""
    result = validate_iswc("T-123456789-3")

    assert not result.is_valid
    assert result.expected == "2"


@pytest.mark.unit
def test_validate_iswc_rejects_missing_prefix() -> None:
    """Test ISWC must start with T."""
    assert not validate_iswc("1234567892").is_valid


@pytest.mark.unit
@pytest.mark.parametrize("digits", ["000000000", "123456789", "999999999", "101010101"])
def test_generated_iswc_validates(digits: str) -> None:
    """Test generated ISWCs validate to themselves."""
    iswc = generate_iswc_checksum(digits)

    result = validate_iswc(iswc)
    assert result.is_valid
    assert result.normalized == iswc


# ---------------------------------------------------------------------------
# ISRC
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_validate_isrc_hyphenates() -> None:
    """Test ISRC is rendered as CC-XXX-YY-NNNNN."""
    result = validate_isrc("gbaye6500001")

    assert result.is_valid
    assert result.normalized == "GB-AYE-65-00001"


@pytest.mark.unit
@pytest.mark.parametrize("value", ["GBAYE650000", "12AYE6500001", "GBAYEAB00001"])
def test_validate_isrc_rejects_bad_structure(value: str) -> None:
    """Test length and structure checks."""
    assert not validate_isrc(value).is_valid


# ---------------------------------------------------------------------------
# EAN-13
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_validate_ean13() -> None:
    """Test a known barcode and a mutated check digit."""
    assert validate_ean13("4006381333931").is_valid

    result = validate_ean13("4006381333932")
    assert not result.is_valid
    assert result.expected == "1"


@pytest.mark.unit
def test_generate_ean13_checksum() -> None:
    """Test check digit generation."""
    assert generate_ean13_checksum("400638133393") == "4006381333931"


# ---------------------------------------------------------------------------
# Societies and shares
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(("value", "expected"), [("52", "052"), ("PRS", "052"), ("ascap", "010")])
def test_validate_society_code(value: str, expected: str) -> None:
    """Test numeric codes and acronyms normalize to 3 digits."""
    result = validate_society_code(value)

    assert result.is_valid
    assert result.normalized == expected
    assert result.warnings == ()


@pytest.mark.unit
def test_validate_society_code_unknown_numeric_warns() -> None:
    """Test unknown numeric codes pass with a warning."""
    result = validate_society_code("999")

    assert result.is_valid
    assert result.warnings


@pytest.mark.unit
def test_validate_society_code_unknown_acronym_invalid() -> None:
    """Test unknown acronyms are rejected."""
    assert not validate_society_code("NOPE").is_valid


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "valid"),
    [(50, True), (33.33, True), (101, False), (-1, False), (33.333, False)],
)
def test_validate_share(value: float, valid: bool) -> None:
    """Test share range and precision."""
    assert validate_share(value).is_valid is valid


@pytest.mark.unit
def test_validate_shares_total() -> None:
    """Test totals within 0.01 of 100 are accepted."""
    assert validate_shares_total([33.33, 33.33, 33.34]).is_valid

    result = validate_shares_total([50, 51])
    assert not result.is_valid
    assert result.actual == "101.00"

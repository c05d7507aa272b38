import pytest

NATURAL_THIRD_DIGIT = "Third digit must be between 0 and 5 for cedula and natural person RUC"
PROVINCE = "Province code (first two digits) must be between 01-24 or 30"


def test_empty_ruc_fails(validator):
    assert not validator.validate_natural_person_ruc("")
    assert validator.get_error() == "Value cannot be empty"

    assert not validator.validate_natural_person_ruc()
    assert validator.get_error() == "Value cannot be empty"


def test_integer_ruc_fails_due_to_leading_zero_loss(validator):
    assert not validator.validate_natural_person_ruc(int("0926687856001"))
    assert validator.get_error() == "Value must have 13 characters"


def test_letters_fail(validator):
    assert not validator.validate_natural_person_ruc("abcdsa")
    assert validator.get_error() == "Value can only contain digits"


def test_more_than_thirteen_digits_fails(validator):
    assert not validator.validate_natural_person_ruc("0926687864777009")
    assert validator.get_error() == "Value must have 13 characters"


def test_invalid_province_code_fails(validator):
    assert not validator.validate_natural_person_ruc("2526687856001")
    assert validator.get_error() == PROVINCE


def test_invalid_third_digit_fails(validator):
    assert not validator.validate_natural_person_ruc("0186687856001")
    assert validator.get_error() == NATURAL_THIRD_DIGIT


def test_establishment_code_zero_fails(validator):
    assert not validator.validate_natural_person_ruc("0926687856000")
    assert validator.get_error() == "Establishment code cannot be 0"


def test_invalid_check_digit_fails(validator):
    assert not validator.validate_natural_person_ruc("0926687858001")
    assert validator.get_error() == "Check digit validation failed"


@pytest.mark.parametrize("number", ["0602910945001", "0602910945002", "0602910945999", "0926687856001"])
def test_valid_natural_person_ruc(validator, number):
    assert validator.validate_natural_person_ruc(number)
    assert validator.get_error() == ""
    assert validator.get_document_type() == "ruc_natural"


def test_third_digit_boundary_values(validator):
    validator.validate_natural_person_ruc("0152345678001")
    assert validator.get_error() != NATURAL_THIRD_DIGIT

    assert not validator.validate_natural_person_ruc("0162345678001")
    assert validator.get_error() == NATURAL_THIRD_DIGIT


def test_province_code_30_is_accepted(validator):
    assert validator.validate_natural_person_ruc("3012345678001")


def test_province_code_30_skips_third_digit_validation(validator):
    validator.validate_natural_person_ruc("3062345678001")
    assert validator.get_error() != NATURAL_THIRD_DIGIT


def test_issue_3_ruc_is_not_a_natural_person_ruc(validator):
    assert not validator.validate_natural_person_ruc("0962893970001")
    assert validator.get_error() == NATURAL_THIRD_DIGIT

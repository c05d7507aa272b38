import pytest

PUBLIC_THIRD_DIGIT = "Third digit must be 6 for public companies"


def test_empty_ruc_fails(validator):
    assert not validator.validate_public_company_ruc("")
    assert validator.get_error() == "Value cannot be empty"

    assert not validator.validate_public_company_ruc()
    assert validator.get_error() == "Value cannot be empty"


def test_invalid_check_digit_fails(validator):
    assert not validator.validate_public_company_ruc("0960001550001")
    assert validator.get_error() == "Check digit validation failed"


def test_letters_fail(validator):
    assert not validator.validate_public_company_ruc("asdaddadad")
    assert validator.get_error() == "Value can only contain digits"


def test_more_than_thirteen_digits_fails(validator):
    assert not validator.validate_public_company_ruc("1760001550001990999")
    assert validator.get_error() == "Value must have 13 characters"


def test_invalid_province_code_fails(validator):
    assert not validator.validate_public_company_ruc("2760001550001")
    assert validator.get_error() == "Province code (first two digits) must be between 01-24 or 30"


@pytest.mark.parametrize("number", ["1790001550001", "0992893970001", "0902893970001"])
def test_third_digit_must_be_six(validator, number):
    assert not validator.validate_public_company_ruc(number)
    assert validator.get_error() == PUBLIC_THIRD_DIGIT


def test_establishment_code_zero_fails(validator):
    assert not validator.validate_public_company_ruc("1760001550000")
    assert validator.get_error() == "Establishment code cannot be 0"


def test_establishment_uses_four_digits(validator):
    # Public company establishment code is characters 9-12 ("0001", "1000")
    assert validator.validate_public_company_ruc("1760001550001")
    assert validator.validate_public_company_ruc("1760001551000")


def test_modulo_11_algorithm_validation(validator):
    assert not validator.validate_public_company_ruc("1760001520001")
    assert validator.get_error() == "Check digit validation failed"


@pytest.mark.parametrize("number", ["1760001550001", "1760001550002", "1760001559999"])
def test_valid_public_company_ruc(validator, number):
    assert validator.validate_public_company_ruc(number)
    assert validator.get_document_type() == "ruc_public"


def test_issue_3_ruc_is_mathematically_invalid(validator):
    # 0*3 + 9*2 + 6*7 + 2*6 + 8*5 + 9*4 + 3*3 + 9*2 = 175, 175 % 11 = 10 -> 1, not 7
    assert not validator.validate_public_company_ruc("0962893970001")
    assert validator.get_error() == "Check digit validation failed"

import pytest

from validador_ec import IdentifierValidator


@pytest.mark.parametrize(
    "number, expected",
    [
        ("0926687856", True),
        ("0926687858", False),
        ("0602910945001", True),
        ("0992397535001", True),
        ("1760001550001", True),
        ("", False),
    ],
)
def test_static_is_valid(number, expected):
    assert IdentifierValidator.is_valid(number) is expected


def test_static_is_valid_cedula():
    assert IdentifierValidator.is_valid_cedula("0926687856")
    assert not IdentifierValidator.is_valid_cedula("0926687858")


def test_static_is_valid_natural_person_ruc():
    assert IdentifierValidator.is_valid_natural_person_ruc("0602910945001")
    assert not IdentifierValidator.is_valid_natural_person_ruc("0602910945000")


def test_static_is_valid_private_company_ruc():
    assert IdentifierValidator.is_valid_private_company_ruc("0992397535001")
    assert not IdentifierValidator.is_valid_private_company_ruc("0992397535000")


def test_static_is_valid_public_company_ruc():
    assert IdentifierValidator.is_valid_public_company_ruc("1760001550001")
    assert not IdentifierValidator.is_valid_public_company_ruc("1760001550000")


@pytest.mark.parametrize("ruc", ["0926687856001", "0926687856002", " 0926687856001 "])
def test_extract_cedula_from_natural_person_ruc(validator, ruc):
    assert validator.extract_cedula_from_ruc(ruc) == "0926687856"


@pytest.mark.parametrize(
    "ruc",
    [
        "0992397535001",  # private company
        "1760001550001",  # public company
        "0926687856",  # cedula length
        "092668785600100",
        "092668785600a",
        "0926687858001",  # wrong check digit
        "0926687856000",  # establishment 000
        "",
    ],
)
def test_extract_cedula_returns_none(validator, ruc):
    assert validator.extract_cedula_from_ruc(ruc) is None


def test_extract_cedula_does_not_touch_last_outcome(validator):
    validator.validate("0926687858")
    validator.extract_cedula_from_ruc("0926687856001")
    assert validator.get_error() == "Check digit validation failed"
    assert validator.get_document_type() == "cedula"

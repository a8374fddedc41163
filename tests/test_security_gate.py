# -*- coding: utf-8 -*-
import pytest

from johnsons_gambit import SECRET_MESSAGE, GateValidationError, check_clearance, is_five_digit_zip


@pytest.mark.parametrize("zip_code", ["12345", "00000", "90210"])
def test_valid_zips(zip_code):
    assert is_five_digit_zip(zip_code)


@pytest.mark.parametrize("zip_code", ["1234", "123456", "1234a", " 12345", "12 34", "", None, "１２３４５", "١٢٣٤٥"])
def test_invalid_zips(zip_code):
    assert not is_five_digit_zip(zip_code)


def test_clearance_granted():
    c = check_clearance("  Jo ", "Smith ", " 12345 ")
    assert c.full_name == "Jo Smith"
    assert c.zip_code == "12345"
    assert c.greeting == "Clearance granted, Jo Smith. ZIP code 12345 verified for Security Gate SG1."
    assert c.secret == SECRET_MESSAGE


@pytest.mark.parametrize("first,last", [("", "Smith"), ("Jo", ""), ("   ", "  "), (None, "Smith")])
def test_both_names_required(first, last):
    with pytest.raises(GateValidationError) as ei:
        check_clearance(first, last, "12345")
    assert "first and last names" in ei.value.message


def test_full_name_too_long_reports_length():
    with pytest.raises(GateValidationError) as ei:
        check_clearance("Alexandria", "Montgomery-Smythe", "12345")
    assert "28 characters long" in ei.value.message
    assert "20 character limit" in ei.value.message


def test_full_name_exactly_at_limit_passes():
    # 9 + 1 + 10 = 20
    c = check_clearance("Abcdefghi", "Jklmnopqrs", "12345")
    assert len(c.full_name) == 20


def test_name_checked_before_zip():
    with pytest.raises(GateValidationError) as ei:
        check_clearance("", "Smith", "bad")
    assert "names" in ei.value.message


def test_bad_zip():
    with pytest.raises(GateValidationError) as ei:
        check_clearance("Jo", "Smith", "1234a")
    assert "exactly 5 digits" in ei.value.message


def test_custom_name_limit():
    with pytest.raises(GateValidationError):
        check_clearance("Jo", "Smith", "12345", name_limit=5)

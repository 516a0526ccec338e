"""Unit tests for donor registration rules: required fields, email, BD phone, 17-digit NID."""
import pytest

from roktokona.core.exceptions import DonorValidationError
from roktokona.schemas.donor import DonorCreate
from roktokona.services.donor_service import (
    INVALID_BLOOD_TYPE_MESSAGE,
    INVALID_EMAIL_MESSAGE,
    INVALID_NID_MESSAGE,
    INVALID_PHONE_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    is_valid_email,
    is_valid_nid,
    is_valid_phone,
    validate_registration,
)


@pytest.mark.parametrize("email", ["k@example.com", "a.b@c.d", "user+tag@mail.example.org"])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["plain", "no-at.example.com", "a@b", "a b@c.d", "@c.d", "a@.", "a@@b.c"])
def test_invalid_emails(email):
    assert not is_valid_email(email)


@pytest.mark.parametrize("phone", [
    "+8801711112222",
    "8801911112222",
    "+8801311112222",
    "+880 1711 112222",
    " +8801811112222 ",
    "+881711112222",
])
def test_valid_phones(phone):
    assert is_valid_phone(phone)


@pytest.mark.parametrize("phone", [
    "12345",
    "+8801211112222",
    "+88017111122223",
    "+880171111222",
    "+8801711-112222",
    "+8801711112222২",
    "",
])
def test_invalid_phones(phone):
    assert not is_valid_phone(phone)


def test_nid_must_be_seventeen_ascii_digits():
    assert is_valid_nid("1" * 17)
    assert not is_valid_nid("1" * 16)
    assert not is_valid_nid("1" * 18)
    assert not is_valid_nid("1" * 16 + "a")
    assert not is_valid_nid("১" * 17)


def _payload(**overrides):
    data = {
        "first_name": "Karim",
        "last_name": "Uddin",
        "email": "k@example.com",
        "phone": "+8801711112222",
        "blood_type": "O+",
        "gender": "Male",
        "city": "Dhaka",
    }
    data.update(overrides)
    return DonorCreate(**data)


def test_valid_payload_passes():
    validate_registration(_payload())
    validate_registration(_payload(nid_number="1" * 17))


@pytest.mark.parametrize("field", ["first_name", "last_name", "email", "phone", "blood_type", "gender", "city"])
def test_missing_required_field(field):
    with pytest.raises(DonorValidationError) as exc:
        validate_registration(_payload(**{field: None}))
    assert exc.value.message == MISSING_FIELDS_MESSAGE


def test_empty_string_required_field():
    with pytest.raises(DonorValidationError) as exc:
        validate_registration(_payload(city=""))
    assert exc.value.message == MISSING_FIELDS_MESSAGE


def test_whitespace_only_required_field_counts_as_present():
    validate_registration(_payload(city="   "))


def test_first_failing_rule_wins():
    with pytest.raises(DonorValidationError) as exc:
        validate_registration(_payload(email="broken", phone="12345", nid_number="1"))
    assert exc.value.message == INVALID_EMAIL_MESSAGE

    with pytest.raises(DonorValidationError) as exc:
        validate_registration(_payload(phone="12345", nid_number="1"))
    assert exc.value.message == INVALID_PHONE_MESSAGE

    with pytest.raises(DonorValidationError) as exc:
        validate_registration(_payload(nid_number="1", blood_type="C+"))
    assert exc.value.message == INVALID_NID_MESSAGE


def test_empty_nid_is_treated_as_absent():
    validate_registration(_payload(nid_number=""))


def test_unknown_blood_type():
    with pytest.raises(DonorValidationError) as exc:
        validate_registration(_payload(blood_type="C+"))
    assert exc.value.message == INVALID_BLOOD_TYPE_MESSAGE

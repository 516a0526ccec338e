"""
Donor registration and lookup.

Registration validates the payload in a fixed order (first failing rule
wins) and then writes the donor row and the matching inventory increment in
one transaction.
"""
import logging
import re
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from roktokona.core.exceptions import DonorValidationError, StoreError
from roktokona.models.blood_inventory import BLOOD_TYPES
from roktokona.models.donor import Donor
from roktokona.schemas.donor import DonorCreate
from roktokona.services.inventory_service import increment_units, InventoryRowMissing

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "blood_type",
    "gender",
    "city",
)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Optional "+", the "88" country code with an optional trunk "0", then 1[3-9] and eight digits
PHONE_PATTERN = re.compile(r"\+?880?1[3-9][0-9]{8}")
NID_PATTERN = re.compile(r"[0-9]{17}")
WHITESPACE = re.compile(r"\s")

MISSING_FIELDS_MESSAGE = "দয়া করে সকল আবশ্যক তথ্য প্রদান করুন"
INVALID_EMAIL_MESSAGE = "সঠিক ইমেইল ঠিকানা দিন"
INVALID_PHONE_MESSAGE = "সঠিক মোবাইল নম্বর দিন (বাংলাদেশি ফরম্যাট)"
INVALID_NID_MESSAGE = "সঠিক ১৭ ডিজিটের NID নম্বর দিন"
INVALID_BLOOD_TYPE_MESSAGE = "সঠিক রক্তের গ্রুপ নির্বাচন করুন"

REGISTRATION_SUCCESS_MESSAGE = "রক্তদাতা সফলভাবে নিবন্ধিত হয়েছে"
REGISTRATION_FAILED_MESSAGE = "নিবন্ধন প্রক্রিয়ায় সমস্যা হয়েছে"
DONORS_LOAD_FAILED_MESSAGE = "ডেটা লোড করতে সমস্যা হয়েছে"

NID_STATUS_PENDING = "pending"
NID_STATUS_NONE = "none"

DEFAULT_REGISTERED_BY = "user"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value == ""


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def normalize_phone(phone: str) -> str:
    return WHITESPACE.sub("", phone)


def is_valid_phone(phone: str) -> bool:
    return PHONE_PATTERN.fullmatch(normalize_phone(phone)) is not None


def is_valid_nid(nid_number: str) -> bool:
    return NID_PATTERN.fullmatch(nid_number) is not None


def validate_registration(payload: DonorCreate) -> None:
    """Raise DonorValidationError for the first rule the payload breaks."""
    if any(_is_blank(getattr(payload, field)) for field in REQUIRED_FIELDS):
        raise DonorValidationError(MISSING_FIELDS_MESSAGE)

    if not is_valid_email(payload.email):
        raise DonorValidationError(INVALID_EMAIL_MESSAGE)

    if not is_valid_phone(payload.phone):
        raise DonorValidationError(INVALID_PHONE_MESSAGE)

    if payload.nid_number and not is_valid_nid(payload.nid_number):
        raise DonorValidationError(INVALID_NID_MESSAGE)

    if payload.blood_type not in BLOOD_TYPES:
        raise DonorValidationError(INVALID_BLOOD_TYPE_MESSAGE)


def register_donor(db: Session, payload: DonorCreate) -> Donor:
    """
    Validate and persist a donor, counting one unit for their blood type.

    The donor insert and the inventory increment commit together or not at
    all. The NID verification flag and payload always start out unverified,
    whether or not a national ID was supplied.
    """
    validate_registration(payload)

    donor = Donor(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        phone=payload.phone,
        dob=payload.dob,
        blood_type=payload.blood_type,
        gender=payload.gender,
        address=payload.address,
        city=payload.city,
        zip_code=payload.zip_code,
        nid_number=payload.nid_number or None,
        nid_verified=False,
        nid_data=None,
        registered_by=payload.registered_by or DEFAULT_REGISTERED_BY,
    )

    try:
        db.add(donor)
        db.flush()
        increment_units(db, donor.blood_type)
        db.commit()
    except (SQLAlchemyError, InventoryRowMissing) as e:
        db.rollback()
        logger.error(f"Donor registration failed, transaction rolled back: {e}")
        raise StoreError(REGISTRATION_FAILED_MESSAGE) from e

    logger.info(f"Donor registered: id={donor.id} blood_type={donor.blood_type} by: {donor.registered_by}")
    return donor


def nid_status_for(donor: Donor) -> str:
    return NID_STATUS_PENDING if donor.nid_number else NID_STATUS_NONE


def list_donors(db: Session) -> List[Donor]:
    """All donors, most recent registration first."""
    try:
        return list(
            db.scalars(
                select(Donor).order_by(Donor.registration_date.desc(), Donor.id.desc())
            )
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to load donors: {e}")
        raise StoreError(DONORS_LOAD_FAILED_MESSAGE) from e


def get_donor(db: Session, donor_id: int) -> Optional[Donor]:
    try:
        return db.get(Donor, donor_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to load donor {donor_id}: {e}")
        raise StoreError(DONORS_LOAD_FAILED_MESSAGE) from e

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime
from roktokona.utils.formatting import format_display_date


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class NidData(CamelModel):
    """Result of a national-ID lookup. Nothing writes it yet."""

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    name_bn: Optional[str] = None
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    present_address: Optional[str] = None
    verified_at: Optional[datetime] = None


class DonorCreate(CamelModel):
    # Everything is optional here so that missing fields reach the ordered
    # registration rules instead of failing schema validation.
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    dob: Optional[str] = None
    blood_type: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    zip_code: Optional[str] = None
    nid_number: Optional[str] = None
    registered_by: Optional[str] = None


class DonorResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    dob: Optional[str] = None
    blood_type: str
    gender: str
    address: Optional[str] = None
    city: str
    zip_code: Optional[str] = None
    nid_number: Optional[str] = None
    nid_verified: bool = False
    nid_data: Optional[NidData] = None
    registration_date: str
    status: str
    registered_by: str

    @field_validator("registration_date", mode="before")
    @classmethod
    def format_registration_date(cls, value):
        if isinstance(value, datetime):
            return format_display_date(value)
        return value


class DonorListResponse(CamelModel):
    success: bool = True
    donors: List[DonorResponse]
    count: int


class DonorDetailResponse(CamelModel):
    success: bool = True
    donor: DonorResponse


class DonorRegistrationResponse(CamelModel):
    success: bool = True
    message: str
    donor_id: int
    nid_status: str

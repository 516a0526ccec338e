from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging
from roktokona.database.database import get_db
from roktokona.schemas.donor import (
    DonorCreate,
    DonorDetailResponse,
    DonorListResponse,
    DonorRegistrationResponse,
    DonorResponse,
)
from roktokona.services import donor_service

logger = logging.getLogger(__name__)
router = APIRouter()

DONOR_NOT_FOUND_MESSAGE = "রক্তদাতা পাওয়া যায়নি"


@router.get("", response_model=DonorListResponse)
@router.get("/", response_model=DonorListResponse, include_in_schema=False)
async def get_donors(db: Session = Depends(get_db)):
    """Get all donors, newest registration first."""
    donors = donor_service.list_donors(db)
    return DonorListResponse(
        donors=[DonorResponse.model_validate(donor) for donor in donors],
        count=len(donors),
    )


@router.post("", response_model=DonorRegistrationResponse)
@router.post("/", response_model=DonorRegistrationResponse, include_in_schema=False)
async def create_donor(donor: DonorCreate, db: Session = Depends(get_db)):
    """Register a new donor and count the unit in the blood inventory."""
    db_donor = donor_service.register_donor(db, donor)
    return DonorRegistrationResponse(
        message=donor_service.REGISTRATION_SUCCESS_MESSAGE,
        donor_id=db_donor.id,
        nid_status=donor_service.nid_status_for(db_donor),
    )


@router.get("/{donor_id}", response_model=DonorDetailResponse)
async def get_donor(donor_id: int, db: Session = Depends(get_db)):
    """Get a specific donor by ID."""
    donor = donor_service.get_donor(db, donor_id)
    if not donor:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=DONOR_NOT_FOUND_MESSAGE
        )
    return DonorDetailResponse(donor=DonorResponse.model_validate(donor))

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from roktokona.database.database import get_db
from roktokona.schemas.inventory import BloodInventoryResponse, InventoryListResponse
from roktokona.services.inventory_service import list_inventory

router = APIRouter()


@router.get("", response_model=InventoryListResponse)
@router.get("/", response_model=InventoryListResponse, include_in_schema=False)
async def get_inventory(db: Session = Depends(get_db)):
    """Current unit count per blood type."""
    rows = list_inventory(db)
    return InventoryListResponse(
        inventory=[BloodInventoryResponse.model_validate(row) for row in rows],
        count=len(rows),
        total_units=sum(row.units for row in rows),
    )

from typing import List
from datetime import datetime
from roktokona.schemas.donor import CamelModel


class BloodInventoryResponse(CamelModel):
    blood_type: str
    units: int
    last_updated: datetime


class InventoryListResponse(CamelModel):
    success: bool = True
    inventory: List[BloodInventoryResponse]
    count: int
    total_units: int

from fastapi import APIRouter
from roktokona.api.endpoints import health, donors, inventory

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
# Collection routes also answer with a trailing slash, otherwise the
# front-end mount at "/" would claim those paths
api_router.include_router(donors.router, prefix="/donors", tags=["donors"])
api_router.include_router(inventory.router, prefix="/inventory", tags=["inventory"])

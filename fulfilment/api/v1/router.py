from fastapi import APIRouter

from fulfilment.api.routers import warehouses

api_router = APIRouter()

api_router.include_router(warehouses.router)

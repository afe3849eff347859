from fastapi import APIRouter

from storefront.api.v1 import catalog, products

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(products.router)
api_router.include_router(catalog.router)

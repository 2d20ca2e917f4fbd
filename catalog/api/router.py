from fastapi import APIRouter

from catalog.api.routes import camping, electrical, furniture, products, schema

api_router = APIRouter()
api_router.include_router(products.router)
api_router.include_router(electrical.router)
api_router.include_router(camping.router)
api_router.include_router(furniture.router)
api_router.include_router(schema.router)

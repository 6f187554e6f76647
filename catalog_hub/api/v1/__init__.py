from fastapi import APIRouter

from catalog_hub.api.v1.endpoints.media import router as media_router
from catalog_hub.api.v1.endpoints.posts import router as posts_router
from catalog_hub.api.v1.endpoints.processes import router as processes_router
from catalog_hub.api.v1.endpoints.products import router as products_router
from catalog_hub.api.v1.endpoints.sync import router as sync_router
from catalog_hub.api.v1.endpoints.taxonomy import brands_router, categories_router
from catalog_hub.api.v1.endpoints.woocommerce import router as woocommerce_router

api_router = APIRouter()
api_router.include_router(products_router)
api_router.include_router(woocommerce_router)
api_router.include_router(sync_router)
api_router.include_router(posts_router)
api_router.include_router(categories_router)
api_router.include_router(brands_router)
api_router.include_router(processes_router)
api_router.include_router(media_router)

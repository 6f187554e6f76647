"""
FastAPI dependency providers.

The WooCommerce client is built once from ``settings`` and cached; it opens
no long-lived session. Clients that hold a ``requests.Session`` are built
per request so a session never crosses request boundaries. Tests replace
them through ``app.dependency_overrides``.
"""
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from catalog_hub.core.config import settings
from catalog_hub.db.session import get_db
from catalog_hub.factories import (
    build_automation_client,
    build_blog_client,
    build_commerce_client,
    build_image_client,
    build_watermark_client,
)
from catalog_hub.repositories import (
    BrandRepository,
    CategoryRepository,
    PostRepository,
    ProcessRepository,
    ProductRepository,
)


@lru_cache()
def get_commerce_client():
    return build_commerce_client(settings)


def get_blog_client():
    return build_blog_client(settings)


def get_image_client():
    return build_image_client(settings)


def get_watermark_client():
    return build_watermark_client(settings)


def get_automation_client():
    return build_automation_client(settings)


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)


def get_post_repository(db: Session = Depends(get_db)) -> PostRepository:
    return PostRepository(db)


def get_category_repository(db: Session = Depends(get_db)) -> CategoryRepository:
    return CategoryRepository(db)


def get_brand_repository(db: Session = Depends(get_db)) -> BrandRepository:
    return BrandRepository(db)


def get_process_repository(db: Session = Depends(get_db)) -> ProcessRepository:
    return ProcessRepository(db)

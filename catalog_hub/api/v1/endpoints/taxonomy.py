"""Read endpoints for the synced categories and brands."""
from typing import List

from fastapi import APIRouter, Depends

from catalog_hub.api.deps import get_brand_repository, get_category_repository
from catalog_hub.repositories import BrandRepository, CategoryRepository
from catalog_hub.schemas.taxonomy import BrandRead, CategoryRead, TaxonomyStats

categories_router = APIRouter(prefix="/categories", tags=["categories"])
brands_router = APIRouter(prefix="/brands", tags=["brands"])


@categories_router.get("", response_model=List[CategoryRead])
def list_categories(repository: CategoryRepository = Depends(get_category_repository)):
    return repository.find_all()


@categories_router.get("/stats", response_model=TaxonomyStats)
def category_stats(repository: CategoryRepository = Depends(get_category_repository)):
    return repository.get_stats()


@brands_router.get("", response_model=List[BrandRead])
def list_brands(repository: BrandRepository = Depends(get_brand_repository)):
    return repository.find_all()


@brands_router.get("/stats", response_model=TaxonomyStats)
def brand_stats(repository: BrandRepository = Depends(get_brand_repository)):
    return repository.get_stats()

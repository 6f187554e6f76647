"""
Repository layer for database operations.

- ProductRepository: Product publishing state
- PostRepository: WordPress posts keyed by wordpress_id
- CategoryRepository / BrandRepository: WooCommerce taxonomies
- ProcessRepository: Automation workflow executions

All repositories inherit from BaseCatalogRepository for the shared upsert
and read helpers.
"""
from catalog_hub.repositories.base_repository import BaseCatalogRepository
from catalog_hub.repositories.post_repository import PostRepository
from catalog_hub.repositories.process_repository import ProcessRepository
from catalog_hub.repositories.product_repository import ProductRepository
from catalog_hub.repositories.taxonomy_repository import (
    BrandRepository,
    CategoryRepository,
    TaxonomyRepository,
)

__all__ = [
    "BaseCatalogRepository",
    "BrandRepository",
    "CategoryRepository",
    "PostRepository",
    "ProcessRepository",
    "ProductRepository",
    "TaxonomyRepository",
]

"""Category and brand synchronization from WooCommerce."""
import logging
from datetime import datetime, timezone

from catalog_hub.repositories.taxonomy_repository import BrandRepository, CategoryRepository
from catalog_hub.schemas.taxonomy import TaxonomySyncResult
from catalog_hub.services.woocommerce import WooCommerceClient

_logger = logging.getLogger(__name__)

TAXONOMY_PAGE_SIZE = 100


def sync_categories(commerce_client: WooCommerceClient, repository: CategoryRepository) -> TaxonomySyncResult:
    """
    Replace local categories with the WooCommerce ones.

    Raises:
        RemoteApiError: WooCommerce fetch failed
        PersistenceError: Upsert failed
    """
    categories = commerce_client.list_categories(
        fields=["id", "name", "slug"], per_page=TAXONOMY_PAGE_SIZE
    )
    now = datetime.now(timezone.utc)
    rows = [
        {"id": str(category.id), "name": category.name, "slug": category.slug, "updated_at": now}
        for category in categories
    ]
    count = repository.upsert_many(rows)
    _logger.info(f"Synced {count} categories from WooCommerce")
    return TaxonomySyncResult(synced=True, count=count, updated_at=now)


def sync_brands(commerce_client: WooCommerceClient, repository: BrandRepository) -> TaxonomySyncResult:
    """
    Replace local brands with the terms of the WooCommerce brand attribute.

    Raises:
        RemoteApiError: WooCommerce fetch failed
        PersistenceError: Upsert failed
    """
    brands = commerce_client.list_brands(per_page=TAXONOMY_PAGE_SIZE)
    now = datetime.now(timezone.utc)
    rows = [
        {"id": str(brand.id), "name": brand.name, "slug": brand.slug, "updated_at": now}
        for brand in brands
    ]
    count = repository.upsert_many(rows)
    _logger.info(f"Synced {count} brands from WooCommerce")
    return TaxonomySyncResult(synced=True, count=count, updated_at=now)

"""
Category and brand repositories.

Both tables are replaced wholesale on every sync pass via ``upsert_many``.
"""
from typing import Dict, List, Optional

from sqlalchemy import func

from catalog_hub.models.taxonomy_models import Brand, Category
from catalog_hub.repositories.base_repository import BaseCatalogRepository


class TaxonomyRepository(BaseCatalogRepository):
    conflict_key = "id"

    def _order_by(self):
        return self.model_class.name.asc()

    def find_all(self) -> List:
        return self.db.query(self.model_class).order_by(self.model_class.name).all()

    def get_stats(self) -> Dict[str, Optional[object]]:
        """
        Get row count and last update timestamp.

        Returns:
            {"count": int, "last_updated": datetime or None}
        """
        count, last_updated = self.db.query(
            func.count(self.model_class.id),
            func.max(self.model_class.updated_at),
        ).one()
        return {"count": count or 0, "last_updated": last_updated}


class CategoryRepository(TaxonomyRepository):
    """Repository for WooCommerce categories."""
    model_class = Category


class BrandRepository(TaxonomyRepository):
    """Repository for WooCommerce brands."""
    model_class = Brand

"""
Post repository.

Stores WordPress posts keyed by ``wordpress_id``.
"""
from typing import List

from catalog_hub.models.post_models import SyncedPost
from catalog_hub.repositories.base_repository import BaseCatalogRepository


class PostRepository(BaseCatalogRepository[SyncedPost]):
    """Repository for synced post operations."""

    model_class = SyncedPost
    conflict_key = "wordpress_id"

    def _base_query(self):
        return self.db.query(SyncedPost).filter(SyncedPost.status == "publish")

    def _order_by(self):
        return SyncedPost.wordpress_date.desc()

    def find_paginated(self, page: int = 0, page_size: int = 20) -> List[SyncedPost]:
        """Published posts, newest WordPress date first."""
        return super().find_paginated(page=page, page_size=page_size)

    def count_published(self) -> int:
        return self.count()

    def find_by_wordpress_id(self, wordpress_id: int):
        return self.db.query(SyncedPost).filter(
            SyncedPost.wordpress_id == wordpress_id
        ).first()

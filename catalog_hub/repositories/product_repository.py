"""
Product repository.

Handles product reads and the status writes of the publishing workflow.
"""
from datetime import datetime, timezone
from typing import List, Optional

from catalog_hub.core.exceptions import ValidationError
from catalog_hub.models.product_models import Product, ProductStatus
from catalog_hub.repositories.base_repository import BaseCatalogRepository


class ProductRepository(BaseCatalogRepository[Product]):
    """Repository for product operations."""

    model_class = Product

    def find_all(self, status: Optional[str] = None) -> List[Product]:
        query = self.db.query(Product)
        if status:
            query = query.filter(Product.status == status)
        return query.order_by(Product.created_at.desc()).all()

    def update(self, record_id: str, **fields) -> Product:
        fields["updated_at"] = datetime.now(timezone.utc)
        return super().update(record_id, **fields)

    def update_status(
        self,
        product_id: str,
        status: str,
        error_message: Optional[str] = None
    ) -> Product:
        """
        Move a product to a new lifecycle status.

        ``process_at`` is stamped when entering processing and ``finished_at``
        only when the upload succeeded; a failed upload keeps the previous
        ``finished_at``.

        Args:
            product_id: Product ID
            status: One of draft, processing, success, failed
            error_message: Failure reason (cleared for other statuses)

        Returns:
            Updated Product record
        """
        if status not in ProductStatus.ALL:
            raise ValidationError(f"Invalid product status: {status}")

        now = datetime.now(timezone.utc)
        fields = {"status": status, "error_message": error_message}
        if status == ProductStatus.PROCESSING:
            fields["process_at"] = now
        elif status == ProductStatus.SUCCESS:
            fields["finished_at"] = now
        return self.update(product_id, **fields)

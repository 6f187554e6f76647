from catalog_hub.models.product_models import Product, ProductStatus
from catalog_hub.models.post_models import SyncedPost
from catalog_hub.models.taxonomy_models import Brand, Category
from catalog_hub.models.process_models import ProcessRecord, ProcessStatus

__all__ = [
    "Product",
    "ProductStatus",
    "SyncedPost",
    "Category",
    "Brand",
    "ProcessRecord",
    "ProcessStatus",
]

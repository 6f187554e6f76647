"""Product listing and the confirm-and-publish endpoint."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from catalog_hub.api.deps import get_commerce_client, get_product_repository
from catalog_hub.core.exceptions import NotFoundError, ValidationError
from catalog_hub.models.product_models import ProductStatus
from catalog_hub.repositories import ProductRepository
from catalog_hub.schemas.products import ProductRead, ProductUploadRequest, PublishResult
from catalog_hub.services.publishing import ProductPublisher

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductRead])
def list_products(
    status: Optional[str] = Query(None, description="draft, processing, success or failed"),
    repository: ProductRepository = Depends(get_product_repository)
):
    if status and status not in ProductStatus.ALL:
        raise ValidationError(f"Invalid product status: {status}")
    return repository.find_all(status=status)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: str, repository: ProductRepository = Depends(get_product_repository)):
    product = repository.find_by_id(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


@router.post("/upload", response_model=PublishResult)
def upload_product(
    body: ProductUploadRequest,
    repository: ProductRepository = Depends(get_product_repository),
    commerce_client=Depends(get_commerce_client)
):
    """
    Confirm the product content and publish it to WooCommerce.

    The product is stored as processing before the upload, then marked
    success or failed depending on the WooCommerce response.
    """
    publisher = ProductPublisher(repository, commerce_client)
    return publisher.confirm_and_publish(body.productId, body)

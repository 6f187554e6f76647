"""
Product publishing workflow.

    draft | failed --confirm--> processing --upload ok--> success
                                           --upload error--> failed

A confirmation validates the content, persists it together with the
processing status, and only then calls WooCommerce, exactly once. A failed
product is re-entered by confirming again; nothing is retried here.
"""
import logging
from datetime import datetime, timezone

from catalog_hub.core.exceptions import NotFoundError, ValidationError
from catalog_hub.models.product_models import ProductStatus
from catalog_hub.repositories.product_repository import ProductRepository
from catalog_hub.schemas.products import ProductConfirmation, ProductRead, PublishResult
from catalog_hub.services.woocommerce import WooCommerceClient, ensure_single_attribute

logger = logging.getLogger(__name__)

REQUIRED_CONTENT_FIELDS = ("seo_title", "meta_description", "short_description", "html_content")
DEFAULT_FAILURE_MESSAGE = "Failed to upload product"


def validate_confirmation(confirmation: ProductConfirmation) -> None:
    """
    Check the confirmed content before any side effect.

    Raises:
        ValidationError: A required content field is missing or blank, or
            more than one variant attribute was supplied
    """
    missing = [
        field for field in REQUIRED_CONTENT_FIELDS
        if not (getattr(confirmation, field) or "").strip()
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")
    ensure_single_attribute(confirmation.variants)


class ProductPublisher:
    """Drives one product through confirmation and upload."""

    def __init__(self, product_repository: ProductRepository, commerce_client: WooCommerceClient):
        self.products = product_repository
        self.commerce = commerce_client

    def confirm_and_publish(self, product_id: str, confirmation: ProductConfirmation) -> PublishResult:
        """
        Confirm the product content and upload it to WooCommerce.

        Args:
            product_id: Local product ID
            confirmation: Final SEO/content/price/category/variant payload

        Returns:
            PublishResult with the WooCommerce ID and preview URL

        Raises:
            ValidationError: Content incomplete (no state change)
            NotFoundError: Unknown product (no state change)
            RemoteApiError: Upload failed; the product is marked failed
        """
        validate_confirmation(confirmation)
        if self.products.find_by_id(product_id) is None:
            raise NotFoundError("Product not found")

        product = self.products.update(
            product_id,
            seo_title=confirmation.seo_title,
            meta_description=confirmation.meta_description,
            short_description=confirmation.short_description,
            html_content=confirmation.html_content,
            keywords=confirmation.keywords,
            images=confirmation.images,
            price=confirmation.price,
            raw_categories=[category.model_dump() for category in confirmation.categories],
            status=ProductStatus.PROCESSING,
            process_at=datetime.now(timezone.utc),
            error_message=None,
            finished_at=None,
            has_confirmed=True,
        )
        logger.info(f"Product {product_id} confirmed, uploading to WooCommerce")

        try:
            uploaded = self.commerce.upload_product(
                product, confirmation.categories, confirmation.variants
            )
            product = self.products.update(
                product_id,
                status=ProductStatus.SUCCESS,
                woo_id=uploaded.woocommerce_id,
                preview_url=uploaded.preview_url,
                error_message=None,
                finished_at=datetime.now(timezone.utc),
            )
        except Exception as e:
            self._mark_failed(product_id, e)
            raise

        logger.info(f"Product {product_id} published as WooCommerce product {uploaded.woocommerce_id}")
        return PublishResult(
            success=True,
            product=ProductRead.model_validate(product),
            wooCommerceId=uploaded.woocommerce_id,
            previewUrl=uploaded.preview_url,
        )

    def _mark_failed(self, product_id: str, error: Exception) -> None:
        message = str(error) or DEFAULT_FAILURE_MESSAGE
        logger.error(f"Upload of product {product_id} failed: {message}")
        try:
            self.products.update_status(product_id, ProductStatus.FAILED, message)
        except Exception as update_error:
            logger.error(f"Failed to update product status: {update_error}")

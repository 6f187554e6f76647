"""
Publishing workflow tests.

Checks that:
1. Content is persisted as processing before the upload call
2. Upload success and failure leave consistent product states
3. Validation errors leave no trace
4. A failing status write never hides the upload error
"""
from unittest.mock import MagicMock

import pytest
from sqlalchemy.orm import Session

from catalog_hub.core.exceptions import (
    NotFoundError,
    PersistenceError,
    RemoteApiError,
    ValidationError,
)
from catalog_hub.models.product_models import Product, ProductStatus
from catalog_hub.repositories import ProductRepository
from catalog_hub.schemas.products import ProductConfirmation
from catalog_hub.schemas.woocommerce import CategoryRef, UploadResult, VariantAttribute
from catalog_hub.services.publishing import ProductPublisher


def make_confirmation(**overrides) -> ProductConfirmation:
    data = {
        "seo_title": "Giày chạy bộ Nike Air",
        "meta_description": "Giày chạy bộ nhẹ, êm",
        "short_description": "Nhẹ và êm",
        "html_content": "<p>Chi tiết sản phẩm</p>",
        "keywords": ["giày chạy bộ", "nike"],
        "images": ["https://img.example.com/1.jpg", "https://img.example.com/2.jpg"],
        "price": 1500000,
        "categories": [{"id": "15", "name": "Giày", "slug": "giay"}],
    }
    data.update(overrides)
    return ProductConfirmation(**data)


def add_product(db: Session, product_id: str = "prod-1", **fields) -> Product:
    fields.setdefault("status", ProductStatus.DRAFT)
    product = Product(id=product_id, **fields)
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


class RecordingRepository:
    """Product repository stub that records the order of calls."""

    def __init__(self, calls, fail_status_update=False):
        self.calls = calls
        self.fail_status_update = fail_status_update
        self.product = Product(
            id="prod-1", seo_title="", meta_description="", short_description="",
            html_content="", keywords=[], images=[], raw_categories=[],
            status=ProductStatus.DRAFT, has_confirmed=False,
        )

    def find_by_id(self, product_id):
        self.calls.append(("find_by_id", product_id))
        return self.product

    def update(self, product_id, **fields):
        self.calls.append(("update", fields.get("status")))
        for key, value in fields.items():
            setattr(self.product, key, value)
        return self.product

    def update_status(self, product_id, status, error_message=None):
        self.calls.append(("update_status", status))
        if self.fail_status_update:
            raise PersistenceError("database is locked")
        self.product.status = status
        self.product.error_message = error_message
        return self.product


class RecordingCommerceClient:
    def __init__(self, calls, error=None):
        self.calls = calls
        self.error = error

    def upload_product(self, product, categories=None, variants=None):
        self.calls.append(("upload_product", product.status))
        if self.error:
            raise self.error
        return UploadResult(woocommerce_id=321, preview_url="https://shop.example.com/p/321")


def test_content_persisted_as_processing_before_upload():
    """Test: The processing write happens before the upload call"""
    calls = []
    publisher = ProductPublisher(RecordingRepository(calls), RecordingCommerceClient(calls))

    publisher.confirm_and_publish("prod-1", make_confirmation())

    assert calls == [
        ("find_by_id", "prod-1"),
        ("update", ProductStatus.PROCESSING),
        ("upload_product", ProductStatus.PROCESSING),
        ("update", ProductStatus.SUCCESS),
    ]


def test_upload_called_once_per_confirmation():
    calls = []
    publisher = ProductPublisher(
        RecordingRepository(calls),
        RecordingCommerceClient(calls, error=RemoteApiError("WooCommerce API error (500): boom", 500)),
    )

    with pytest.raises(RemoteApiError):
        publisher.confirm_and_publish("prod-1", make_confirmation())

    assert [name for name, _ in calls].count("upload_product") == 1


def test_publish_success(db: Session):
    """Test: A successful upload stores the WooCommerce id and preview URL"""
    add_product(db, error_message="previous failure", status=ProductStatus.FAILED)
    commerce = MagicMock()
    commerce.upload_product.return_value = UploadResult(
        woocommerce_id=321, preview_url="https://shop.example.com/p/321"
    )

    result = ProductPublisher(ProductRepository(db), commerce).confirm_and_publish(
        "prod-1", make_confirmation()
    )

    assert result.success is True
    assert result.wooCommerceId == 321
    assert result.previewUrl == "https://shop.example.com/p/321"

    product = db.get(Product, "prod-1")
    assert product.status == ProductStatus.SUCCESS
    assert product.woo_id == 321
    assert product.preview_url == "https://shop.example.com/p/321"
    assert product.error_message is None
    assert product.has_confirmed is True
    assert product.process_at is not None
    assert product.finished_at is not None
    assert product.seo_title == "Giày chạy bộ Nike Air"
    assert product.raw_categories == [{"id": "15", "name": "Giày", "slug": "giay"}]


def test_publish_failure_marks_product_failed(db: Session):
    """Test: An upload error is persisted and re-raised"""
    add_product(db)
    commerce = MagicMock()
    commerce.upload_product.side_effect = RemoteApiError("WooCommerce API error (400): Invalid SKU", 400)

    with pytest.raises(RemoteApiError):
        ProductPublisher(ProductRepository(db), commerce).confirm_and_publish(
            "prod-1", make_confirmation()
        )

    product = db.get(Product, "prod-1")
    db.refresh(product)
    assert product.status == ProductStatus.FAILED
    assert product.error_message == "WooCommerce API error (400): Invalid SKU"
    assert product.woo_id is None
    assert product.finished_at is None


def test_publish_failure_without_message_uses_fallback(db: Session):
    add_product(db)
    commerce = MagicMock()
    commerce.upload_product.side_effect = RuntimeError()

    with pytest.raises(RuntimeError):
        ProductPublisher(ProductRepository(db), commerce).confirm_and_publish(
            "prod-1", make_confirmation()
        )

    product = db.get(Product, "prod-1")
    db.refresh(product)
    assert product.status == ProductStatus.FAILED
    assert product.error_message == "Failed to upload product"


def test_failed_product_can_be_confirmed_again(db: Session):
    """Test: failed is not terminal, a new confirmation re-enters processing"""
    add_product(db)
    commerce = MagicMock()
    commerce.upload_product.side_effect = [
        RemoteApiError("WooCommerce API error (503): unavailable", 503),
        UploadResult(woocommerce_id=77, preview_url="https://shop.example.com/p/77"),
    ]
    publisher = ProductPublisher(ProductRepository(db), commerce)

    with pytest.raises(RemoteApiError):
        publisher.confirm_and_publish("prod-1", make_confirmation())
    result = publisher.confirm_and_publish("prod-1", make_confirmation())

    assert result.wooCommerceId == 77
    product = db.get(Product, "prod-1")
    assert product.status == ProductStatus.SUCCESS
    assert product.error_message is None


def test_status_write_failure_keeps_original_error():
    """Test: If marking failed also fails, the upload error still surfaces"""
    calls = []
    upload_error = RemoteApiError("WooCommerce API error (500): boom", 500)
    publisher = ProductPublisher(
        RecordingRepository(calls, fail_status_update=True),
        RecordingCommerceClient(calls, error=upload_error),
    )

    with pytest.raises(RemoteApiError) as exc_info:
        publisher.confirm_and_publish("prod-1", make_confirmation())

    assert exc_info.value is upload_error
    assert ("update_status", ProductStatus.FAILED) in calls


@pytest.mark.parametrize("field", ["seo_title", "meta_description", "short_description", "html_content"])
def test_missing_required_field_has_no_side_effects(field):
    repository = MagicMock()
    commerce = MagicMock()

    with pytest.raises(ValidationError) as exc_info:
        ProductPublisher(repository, commerce).confirm_and_publish(
            "prod-1", make_confirmation(**{field: "   "})
        )

    assert field in exc_info.value.message
    assert repository.mock_calls == []
    assert commerce.mock_calls == []


def test_multi_attribute_variants_rejected_before_any_write():
    repository = MagicMock()
    commerce = MagicMock()
    variants = [
        VariantAttribute(id=1, name="Màu", options=["Đỏ", "Xanh"]),
        VariantAttribute(id=2, name="Size", options=["S", "M"]),
    ]

    with pytest.raises(ValidationError):
        ProductPublisher(repository, commerce).confirm_and_publish(
            "prod-1", make_confirmation(variants=variants)
        )

    assert repository.mock_calls == []
    assert commerce.mock_calls == []


def test_unknown_product_is_not_found(db: Session):
    commerce = MagicMock()

    with pytest.raises(NotFoundError):
        ProductPublisher(ProductRepository(db), commerce).confirm_and_publish(
            "missing", make_confirmation()
        )

    commerce.upload_product.assert_not_called()


def test_categories_and_variants_forwarded_to_upload(db: Session):
    add_product(db)
    commerce = MagicMock()
    commerce.upload_product.return_value = UploadResult(woocommerce_id=5, preview_url="https://shop/p/5")
    variants = [VariantAttribute(id=3, name="Size", options=["S", "M"], prices={"S": 100, "M": 120})]

    ProductPublisher(ProductRepository(db), commerce).confirm_and_publish(
        "prod-1", make_confirmation(variants=variants)
    )

    _, categories, forwarded_variants = commerce.upload_product.call_args.args
    assert categories == [CategoryRef(id="15", name="Giày", slug="giay")]
    assert forwarded_variants == variants

"""Schemas for product content confirmation and publishing."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from catalog_hub.schemas.woocommerce import CategoryRef, VariantAttribute


class PriceReference(BaseModel):
    """Price reference snapshot collected from external sources."""
    min_price_vnd: Optional[str] = None
    max_price_vnd: Optional[str] = None
    avg_price_vnd: Optional[str] = None
    updated_date: Optional[str] = None
    sources: List[str] = Field(default_factory=list)


class ProductConfirmation(BaseModel):
    """
    Final content confirmed by a user before upload to WooCommerce.

    Required text fields are checked by the publisher, not here, so that a
    missing field is reported as a ValidationError before any side effect.
    """
    seo_title: Optional[str] = None
    meta_description: Optional[str] = None
    short_description: Optional[str] = None
    html_content: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    price: Optional[int] = Field(None, ge=0)
    categories: List[CategoryRef] = Field(default_factory=list)
    variants: List[VariantAttribute] = Field(default_factory=list)


class ProductUploadRequest(ProductConfirmation):
    productId: str


class ProductRead(BaseModel):
    id: str
    seo_title: str
    meta_description: str
    keywords: List[str] = Field(default_factory=list)
    short_description: str
    html_content: str
    images: List[str] = Field(default_factory=list)
    price: Optional[int] = None
    price_reference: Optional[PriceReference] = None
    raw_categories: List[CategoryRef] = Field(default_factory=list)
    woo_id: Optional[int] = None
    preview_url: Optional[str] = None
    status: str
    error_message: Optional[str] = None
    made_by_process_id: Optional[str] = None
    process_id: Optional[str] = None
    workflow_id: Optional[str] = None
    has_confirmed: bool = False
    process_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PublishResult(BaseModel):
    success: bool
    product: ProductRead
    wooCommerceId: int
    previewUrl: str
    message: str = "Product uploaded successfully"

"""Schemas for WooCommerce REST API payloads consumed by the catalog."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class WooCommerceCategory(BaseModel):
    id: int
    name: str
    slug: str
    parent: Optional[int] = None
    count: Optional[int] = None

    class Config:
        extra = "ignore"


class WooCommerceTerm(BaseModel):
    """Attribute term; brands are the terms of the brand attribute."""
    id: int
    name: str
    slug: str
    count: int = 0

    class Config:
        extra = "ignore"


class WooCommerceAttribute(BaseModel):
    id: int
    name: str
    slug: str
    type: str = "select"
    order_by: str = "menu_order"
    has_archives: bool = False
    terms: List[WooCommerceTerm] = Field(default_factory=list)

    class Config:
        extra = "ignore"


class WooCommerceProductSummary(BaseModel):
    id: int
    name: str
    type: str = "simple"  # simple, grouped, external, variable
    date_created: Optional[str] = None

    class Config:
        extra = "ignore"


class VariationAttribute(BaseModel):
    id: int = 0
    name: str
    option: str = ""


class WooCommerceVariation(BaseModel):
    id: int
    price: str = ""
    regular_price: str = ""
    sale_price: str = ""
    stock_quantity: Optional[int] = None
    in_stock: bool = True
    attributes: List[VariationAttribute] = Field(default_factory=list)

    class Config:
        extra = "ignore"


class CategoryRef(BaseModel):
    """Category reference as stored on a product (not a foreign key)."""
    id: str
    name: str = ""
    slug: str = ""


class VariantAttribute(BaseModel):
    """
    Variant attribute selected for a variable product upload.

    Only single-attribute variant sets are supported: one variation is
    created per option, priced from ``prices`` or the product price.
    """
    id: int
    name: str
    options: List[str] = Field(default_factory=list)
    prices: Dict[str, int] = Field(default_factory=dict)


class UploadResult(BaseModel):
    woocommerce_id: int
    preview_url: str
    variation_ids: List[int] = Field(default_factory=list)


class AggregatedVariant(BaseModel):
    name: str
    price: float = 0


class SuggestedVariantsRequest(BaseModel):
    categoryIds: List[Any] = Field(default_factory=list)


class SuggestedVariantsResponse(BaseModel):
    variants: List[AggregatedVariant]


class VariantAttributesRequest(BaseModel):
    category_ids: List[Any] = Field(default_factory=list)


class VariantAttributesResponse(BaseModel):
    attributes: Dict[str, List[str]]

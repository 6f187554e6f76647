"""WooCommerce commerce client used by the catalog pipeline."""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence

from woocommerce import API

from catalog_hub.core.exceptions import RemoteApiError, ValidationError
from catalog_hub.models.product_models import Product
from catalog_hub.schemas.woocommerce import (
    CategoryRef,
    UploadResult,
    VariantAttribute,
    WooCommerceAttribute,
    WooCommerceCategory,
    WooCommerceProductSummary,
    WooCommerceTerm,
    WooCommerceVariation,
)
from catalog_hub.services.woocommerce.client import wc_request

__logger__ = logging.getLogger(__name__)


def ensure_single_attribute(variants: Optional[Sequence[VariantAttribute]]) -> None:
    """Variation generation supports a single variant attribute only."""
    if variants and len(variants) > 1:
        raise ValidationError(
            "Only single-attribute variant sets are supported "
            f"(got {len(variants)} attributes)"
        )


class WooCommerceClient:
    """
    Stateless wrapper around the WooCommerce REST API.

    Each operation is a single authenticated call. Single-entity lookups
    return None on failure; every other operation raises RemoteApiError.
    """

    def __init__(self, wcapi: API, brand_attribute_id: int = 1):
        self.wcapi = wcapi
        self.brand_attribute_id = brand_attribute_id

    def _request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return wc_request(method, path, params=params, wcapi=self.wcapi)

    # ==================== Categories & brands ====================

    def list_categories(
        self,
        fields: Optional[List[str]] = None,
        hide_empty: Optional[bool] = None,
        parent: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> List[WooCommerceCategory]:
        params: Dict[str, Any] = {}
        if fields:
            params["_fields"] = ",".join(fields)
        if hide_empty is not None:
            params["hide_empty"] = str(hide_empty).lower()
        if parent is not None:
            params["parent"] = parent
        if per_page:
            params["per_page"] = per_page

        data = self._request("GET", "products/categories", params=params)
        return [WooCommerceCategory(**item) for item in data or []]

    def get_category(self, category_id: int) -> Optional[WooCommerceCategory]:
        try:
            return WooCommerceCategory(**self._request("GET", f"products/categories/{category_id}"))
        except Exception as e:
            __logger__.warning(f"Category {category_id} lookup failed: {e}")
            return None

    def list_brands(self, per_page: Optional[int] = None, page: Optional[int] = None) -> List[WooCommerceTerm]:
        """Brands are the terms of the configured brand attribute."""
        params: Dict[str, Any] = {}
        if per_page:
            params["per_page"] = per_page
        if page:
            params["page"] = page
        data = self._request(
            "GET", f"products/attributes/{self.brand_attribute_id}/terms", params=params
        )
        return [WooCommerceTerm(**item) for item in data or []]

    # ==================== Products & variations ====================

    def list_products(
        self,
        category: Optional[int] = None,
        product_type: Optional[str] = None,
        order_by: Optional[str] = None,
        order: Optional[str] = None,
        per_page: Optional[int] = None,
        page: Optional[int] = None
    ) -> List[WooCommerceProductSummary]:
        params: Dict[str, Any] = {}
        if category is not None:
            params["category"] = category
        if product_type:
            params["type"] = product_type
        if order_by:
            params["orderby"] = order_by
        if order:
            params["order"] = order
        if per_page:
            params["per_page"] = per_page
        if page:
            params["page"] = page

        data = self._request("GET", "products", params=params)
        return [WooCommerceProductSummary(**item) for item in data or []]

    def list_product_variations(
        self,
        product_id: int,
        per_page: Optional[int] = None,
        page: Optional[int] = None
    ) -> List[WooCommerceVariation]:
        params: Dict[str, Any] = {}
        if per_page:
            params["per_page"] = per_page
        if page:
            params["page"] = page
        data = self._request("GET", f"products/{product_id}/variations", params=params)
        return [WooCommerceVariation(**item) for item in data or []]

    def get_product_variation(self, product_id: int, variation_id: int) -> Optional[WooCommerceVariation]:
        try:
            return WooCommerceVariation(
                **self._request("GET", f"products/{product_id}/variations/{variation_id}")
            )
        except Exception as e:
            __logger__.warning(f"Variation {variation_id} of product {product_id} lookup failed: {e}")
            return None

    # ==================== Attributes ====================

    def _attribute_terms(self, attribute_id: int) -> List[WooCommerceTerm]:
        try:
            terms = self._request("GET", f"products/attributes/{attribute_id}/terms")
        except RemoteApiError as e:
            __logger__.warning(f"Failed to fetch terms for attribute {attribute_id}: {e}")
            return []
        return [WooCommerceTerm(**term) for term in terms or []]

    async def list_attributes_with_terms(self) -> List[WooCommerceAttribute]:
        """
        Get all global product attributes with their terms nested.

        Terms are fetched concurrently, one call per attribute; an attribute
        whose terms cannot be fetched is returned with an empty term list.
        """
        attributes = await asyncio.to_thread(self._request, "GET", "products/attributes")
        if not attributes:
            return []

        term_lists = await asyncio.gather(*[
            asyncio.to_thread(self._attribute_terms, attr["id"]) for attr in attributes
        ])
        return [
            WooCommerceAttribute(**{**attr, "terms": terms})
            for attr, terms in zip(attributes, term_lists)
        ]

    # ==================== Upload ====================

    @staticmethod
    def generate_image_alt(product_title: str) -> str:
        return product_title

    def build_product_payload(
        self,
        product: Product,
        categories: Optional[Sequence[CategoryRef]] = None,
        variants: Optional[Sequence[VariantAttribute]] = None
    ) -> Dict[str, Any]:
        has_variants = bool(variants)
        payload: Dict[str, Any] = {
            "name": product.seo_title,
            "type": "variable" if has_variants else "simple",
            "status": "publish",
            "description": product.html_content,
            "short_description": product.short_description,
            "regular_price": "" if has_variants or product.price is None else str(product.price),
            "images": [
                {"src": src, "alt": self.generate_image_alt(product.seo_title), "position": index}
                for index, src in enumerate(product.images or [])
            ],
            "categories": [{"id": int(cat.id)} for cat in categories or []],
            "meta_data": [
                {"key": "_yoast_wpseo_metadesc", "value": product.meta_description},
                {"key": "_yoast_wpseo_focuskw", "value": ", ".join(product.keywords or [])},
            ],
        }
        if has_variants:
            payload["attributes"] = [
                {
                    "id": attr.id,
                    "name": attr.name,
                    "variation": True,
                    "visible": True,
                    "options": attr.options,
                }
                for attr in variants
            ]
        return payload

    @staticmethod
    def build_variations_payload(product: Product, attribute: VariantAttribute) -> Dict[str, Any]:
        create = []
        for option in attribute.options:
            price = attribute.prices.get(option, product.price)
            create.append({
                "regular_price": "" if price is None else str(price),
                "attributes": [{"id": attribute.id, "option": option}],
            })
        return {"create": create}

    def upload_product(
        self,
        product: Product,
        categories: Optional[Sequence[CategoryRef]] = None,
        variants: Optional[Sequence[VariantAttribute]] = None
    ) -> UploadResult:
        """
        Create a product in WooCommerce.

        With variant data the parent product is created first, then its
        variations in one batch call. If the batch fails the parent already
        exists remotely and the error is still raised.

        Args:
            product: Local product with confirmed content
            categories: Categories to assign
            variants: Single variant attribute for a variable product

        Returns:
            UploadResult with the WooCommerce ID and permalink
        """
        ensure_single_attribute(variants)
        payload = self.build_product_payload(product, categories, variants)

        created = self._request("POST", "products", params=payload)
        woocommerce_id = created["id"]
        __logger__.info(f"WooCommerce product created: {woocommerce_id} ({product.seo_title})")

        variation_ids: List[int] = []
        if variants:
            try:
                batch = self._request(
                    "POST",
                    f"products/{woocommerce_id}/variations/batch",
                    params=self.build_variations_payload(product, variants[0]),
                )
            except RemoteApiError:
                __logger__.error(
                    f"Variation batch failed; parent product {woocommerce_id} remains in WooCommerce"
                )
                raise
            variation_ids = [item["id"] for item in (batch or {}).get("create", []) if "id" in item]

        return UploadResult(
            woocommerce_id=woocommerce_id,
            preview_url=created.get("permalink") or "",
            variation_ids=variation_ids,
        )

"""
Variant aggregation across WooCommerce categories.

For each category the latest variable products are fetched, then all of
their variations. Two views are built from the attribute options found:

1. Grouped: option values bucketed by attribute name (narrows the choices
   offered when picking variant attributes)
2. Suggested: flat (name, price) pairs deduplicated by name and sorted,
   used as upload suggestions

Categories are fetched concurrently. A failing category is logged and left
out; merging follows the order of the requested category ids, never the
order in which fetches complete.
"""
import asyncio
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Sequence, Tuple

from catalog_hub.core.exceptions import ValidationError
from catalog_hub.schemas.woocommerce import AggregatedVariant, WooCommerceVariation
from catalog_hub.services.woocommerce import WooCommerceClient

_logger = logging.getLogger(__name__)

MAX_CATEGORIES = 10
GROUPED_PRODUCTS_PER_CATEGORY = 2
SUGGESTED_PRODUCTS_PER_CATEGORY = 3
VARIATIONS_PER_PRODUCT = 100


def validate_category_ids(category_ids: Any) -> List[int]:
    """
    Validate the requested category ids before any remote call.

    Raises:
        ValidationError: Not a list, empty, more than 10 ids, or a
            non-numeric id
    """
    if not isinstance(category_ids, (list, tuple)):
        raise ValidationError("categoryIds is required and must be an array")
    if len(category_ids) == 0:
        raise ValidationError("At least one category is required")
    if len(category_ids) > MAX_CATEGORIES:
        raise ValidationError(f"Maximum {MAX_CATEGORIES} categories allowed")

    valid_ids = []
    for category_id in category_ids:
        if isinstance(category_id, bool):
            raise ValidationError(f"Invalid category ID: {category_id}")
        try:
            valid_ids.append(int(category_id))
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid category ID: {category_id}")
    return valid_ids


def parse_price(value: Optional[str]) -> float:
    if not value:
        return 0
    try:
        return float(Decimal(str(value)))
    except (InvalidOperation, ValueError):
        return 0


def variation_options(variation: WooCommerceVariation) -> List[Tuple[str, str]]:
    """Non-empty (attribute name, option) pairs of a variation."""
    return [
        (attr.name, attr.option)
        for attr in variation.attributes
        if attr.option != ""
    ]


class VariantAggregator:
    """Fan-out/fan-in aggregation of variation data per category."""

    def __init__(self, commerce_client: WooCommerceClient):
        self.client = commerce_client

    def _latest_variable_product_ids(self, category_id: int, limit: int) -> List[int]:
        products = self.client.list_products(
            category=category_id,
            product_type="variable",
            order_by="date",
            order="desc",
            per_page=limit,
        )
        return [product.id for product in products]

    async def _category_variations(self, category_id: int, limit: int) -> List[WooCommerceVariation]:
        """
        All variations of the latest variable products of one category.

        Raises whatever the commerce client raises; a failure of any product
        fails the whole category.
        """
        product_ids = await asyncio.to_thread(
            self._latest_variable_product_ids, category_id, limit
        )
        if not product_ids:
            return []

        per_product = await asyncio.gather(*[
            asyncio.to_thread(
                self.client.list_product_variations, product_id, VARIATIONS_PER_PRODUCT
            )
            for product_id in product_ids
        ])
        return [variation for variations in per_product for variation in variations]

    async def _safe_category_variations(
        self, category_id: int, limit: int
    ) -> Optional[List[WooCommerceVariation]]:
        try:
            return await self._category_variations(category_id, limit)
        except Exception as e:
            _logger.error(f"Failed to fetch variants for category {category_id}: {e}")
            return None

    async def _collect(self, category_ids: Sequence[int], limit: int) -> List[List[WooCommerceVariation]]:
        """Per-category variation lists in request order, failed categories dropped."""
        results = await asyncio.gather(*[
            self._safe_category_variations(category_id, limit)
            for category_id in category_ids
        ])
        return [variations for variations in results if variations is not None]

    async def get_variants_by_category(
        self,
        category_id: int,
        limit: int = GROUPED_PRODUCTS_PER_CATEGORY
    ) -> Dict[str, List[str]]:
        """
        Option values grouped by attribute name for one category.

        Raises:
            RemoteApiError: The category could not be fetched
        """
        variations = await self._category_variations(category_id, limit)
        return self._group(variations)

    @staticmethod
    def _group(variations: Sequence[WooCommerceVariation], into: Optional[Dict[str, List[str]]] = None):
        grouped = into if into is not None else {}
        for variation in variations:
            for name, option in variation_options(variation):
                bucket = grouped.setdefault(name, [])
                if option not in bucket:
                    bucket.append(option)
        return grouped

    async def get_merged_attributes(self, category_ids: Sequence[Any]) -> Dict[str, List[str]]:
        """
        Option values grouped by attribute name across categories.

        Args:
            category_ids: 1 to 10 WooCommerce category ids

        Returns:
            {attribute name: [unique option values in first-seen order]}
        """
        valid_ids = validate_category_ids(category_ids)
        merged: Dict[str, List[str]] = {}
        for variations in await self._collect(valid_ids, GROUPED_PRODUCTS_PER_CATEGORY):
            self._group(variations, into=merged)
        return merged

    async def get_suggested_variants(self, category_ids: Sequence[Any]) -> List[AggregatedVariant]:
        """
        Suggested variants across categories.

        Variants are deduplicated by name keeping the first occurrence (and
        its price), then sorted by name.

        Args:
            category_ids: 1 to 10 WooCommerce category ids

        Returns:
            List of AggregatedVariant sorted by name
        """
        valid_ids = validate_category_ids(category_ids)
        seen: Dict[str, AggregatedVariant] = {}
        for variations in await self._collect(valid_ids, SUGGESTED_PRODUCTS_PER_CATEGORY):
            for variation in variations:
                options = [option for _, option in variation_options(variation)]
                if not options:
                    continue
                name = " - ".join(options)
                if name not in seen:
                    seen[name] = AggregatedVariant(name=name, price=parse_price(variation.price))
        return sorted(seen.values(), key=lambda variant: variant.name)

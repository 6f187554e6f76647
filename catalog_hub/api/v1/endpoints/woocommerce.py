"""WooCommerce attribute and variant lookups."""
import logging
from typing import Dict, List

from fastapi import APIRouter, Depends

from catalog_hub.api.deps import get_commerce_client
from catalog_hub.schemas.woocommerce import (
    SuggestedVariantsRequest,
    SuggestedVariantsResponse,
    VariantAttributesRequest,
    VariantAttributesResponse,
    WooCommerceAttribute,
)
from catalog_hub.services.variant_aggregator import VariantAggregator

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/woocommerce", tags=["woocommerce"])


@router.get("/product-attributes", response_model=List[WooCommerceAttribute])
async def list_product_attributes(commerce_client=Depends(get_commerce_client)):
    return await commerce_client.list_attributes_with_terms()


@router.post("/suggested-variants", response_model=SuggestedVariantsResponse)
async def suggested_variants(body: SuggestedVariantsRequest, commerce_client=Depends(get_commerce_client)):
    variants = await VariantAggregator(commerce_client).get_suggested_variants(body.categoryIds)
    return SuggestedVariantsResponse(variants=variants)


@router.post("/variant-attributes", response_model=VariantAttributesResponse)
async def variant_attributes(body: VariantAttributesRequest, commerce_client=Depends(get_commerce_client)):
    attributes = await VariantAggregator(commerce_client).get_merged_attributes(body.category_ids)
    return VariantAttributesResponse(attributes=attributes)


@router.get("/categories/{category_id}/variants", response_model=Dict[str, List[str]])
async def category_variants(category_id: int, commerce_client=Depends(get_commerce_client)):
    return await VariantAggregator(commerce_client).get_variants_by_category(category_id)

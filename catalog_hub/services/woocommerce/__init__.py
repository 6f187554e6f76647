"""WooCommerce services package."""

from catalog_hub.services.woocommerce.client import (
    wc_request,
    wc_get,
    wc_post,
    wc_put,
)

from catalog_hub.services.woocommerce.commerce_client import (
    WooCommerceClient,
    ensure_single_attribute,
)

__all__ = [
    # Client
    'wc_request',
    'wc_get',
    'wc_post',
    'wc_put',
    # Commerce client
    'WooCommerceClient',
    'ensure_single_attribute',
]

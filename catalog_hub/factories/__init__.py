"""
Builders for the external service clients.

Each client is constructed once from the resolved settings and injected
into the components that need it.
"""
from catalog_hub.core.config import Settings
from catalog_hub.factories.woocommerce_factory import WooCommerceClientFactory


def build_commerce_client(settings: Settings):
    from catalog_hub.services.woocommerce import WooCommerceClient
    return WooCommerceClient(
        WooCommerceClientFactory.from_settings(settings),
        brand_attribute_id=settings.wc_brand_attribute_id,
    )


def build_blog_client(settings: Settings):
    from catalog_hub.services.wordpress_blog import WordPressBlogClient
    username, password = settings.wordpress_credentials
    return WordPressBlogClient(
        base_url=settings.wordpress_url,
        username=username,
        password=password,
        timeout=settings.wc_request_timeout,
        verify_ssl=settings.wc_verify_ssl,
    )


def build_image_client(settings: Settings):
    from catalog_hub.services.imgbb import ImageUploadClient
    return ImageUploadClient(
        api_key=settings.imgbb_api_key,
        upload_url=settings.imgbb_upload_url,
        timeout=settings.media_request_timeout,
    )


def build_watermark_client(settings: Settings):
    from catalog_hub.services.watermark import WatermarkClient
    return WatermarkClient(
        base_url=settings.watermark_base_url,
        api_key=settings.watermark_api_key,
        timeout=settings.media_request_timeout,
    )


def build_automation_client(settings: Settings):
    from catalog_hub.services.process_trigger import AutomationWebhookClient
    return AutomationWebhookClient(
        base_url=settings.n8n_web_hook_url,
        api_key=settings.n8n_api_key,
        timeout=settings.media_request_timeout,
    )


__all__ = [
    "WooCommerceClientFactory",
    "build_commerce_client",
    "build_blog_client",
    "build_image_client",
    "build_watermark_client",
    "build_automation_client",
]

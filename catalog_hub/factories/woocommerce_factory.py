"""Factories for creating WooCommerce API clients."""

from woocommerce import API

from catalog_hub.core.config import Settings


class WooCommerceClientFactory:
    """Factory class for creating WooCommerce API clients."""

    @staticmethod
    def from_credentials(
        url: str,
        consumer_key: str,
        consumer_secret: str,
        version: str = "wc/v3",
        timeout: int = 60,
        verify_ssl: bool = True
    ) -> API:
        """
        Create a WooCommerce API client from individual credentials.

        Args:
            url: WooCommerce store URL
            consumer_key: WooCommerce consumer key
            consumer_secret: WooCommerce consumer secret

        Returns:
            API: Configured WooCommerce API client
        """
        return API(
            url=url,
            consumer_key=consumer_key,
            consumer_secret=consumer_secret,
            wp_api=True,
            version=version,
            timeout=timeout,
            verify_ssl=verify_ssl
        )

    @staticmethod
    def from_settings(settings: Settings) -> API:
        """
        Create a WooCommerce API client from the application settings.

        Args:
            settings: Resolved application settings

        Returns:
            API: Configured WooCommerce API client
        """
        return WooCommerceClientFactory.from_credentials(
            url=settings.wc_base_url,
            consumer_key=settings.wc_consumer_key,
            consumer_secret=settings.wc_consumer_secret,
            version=settings.wc_api_version,
            timeout=settings.wc_request_timeout,
            verify_ssl=settings.wc_verify_ssl
        )

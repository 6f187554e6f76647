from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./catalog.db"
    log_level: str = "INFO"

    # WooCommerce REST API
    wc_base_url: str = "https://shop.example.com"
    wc_consumer_key: str = ""
    wc_consumer_secret: str = ""
    wc_api_version: str = "wc/v3"
    wc_request_timeout: int = 60
    wc_verify_ssl: bool = True
    wc_brand_attribute_id: int = 1

    # WordPress blog (defaults to the WooCommerce site and keys)
    wp_base_url: Optional[str] = None
    wp_username: Optional[str] = None
    wp_password: Optional[str] = None
    sync_page_size: int = 20

    # Media services
    imgbb_api_key: str = ""
    imgbb_upload_url: str = "https://api.imgbb.com/1/upload"
    watermark_base_url: str = "http://localhost:8005"
    watermark_api_key: str = ""
    media_request_timeout: int = 30

    # Automation engine (n8n)
    n8n_web_hook_url: str = "http://localhost:5678/webhook"
    n8n_api_key: str = ""
    n8n_generate_product_path: str = "generate/product"

    # Celery
    celery_broker_url: str = "redis://localhost:6379/0"
    celery_result_backend: str = "redis://localhost:6379/1"
    celery_task_serializer: str = "json"
    celery_result_serializer: str = "json"
    celery_accept_content: List[str] = ["json"]
    celery_timezone: str = "UTC"
    celery_enable_utc: bool = True

    class Config:
        env_file = ".env"

    @property
    def wordpress_url(self) -> str:
        return self.wp_base_url or self.wc_base_url

    @property
    def wordpress_credentials(self):
        """Basic auth pair for the WordPress REST API."""
        return (
            self.wp_username or self.wc_consumer_key,
            self.wp_password or self.wc_consumer_secret,
        )


settings = Settings()

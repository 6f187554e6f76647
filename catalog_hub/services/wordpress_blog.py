"""WordPress REST API client for blog posts."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests
from requests.auth import HTTPBasicAuth

from catalog_hub.core.exceptions import RemoteApiError, ValidationError
from catalog_hub.schemas.posts import WpPost

__logger__ = logging.getLogger(__name__)

POST_FIELDS = (
    "id,title,content,excerpt,slug,link,status,date,modified,author,"
    "featured_media,categories,tags,yoast_meta"
)


class WordPressBlogClient:
    """Reads published posts from ``wp-json/wp/v2/posts`` with Basic auth."""

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        timeout: int = 60,
        verify_ssl: bool = True,
        session: Optional[requests.Session] = None
    ):
        if not base_url or not username or not password:
            raise ValidationError("WordPress/WooCommerce credentials not configured")
        self.base_url = base_url.rstrip("/")
        self.auth = HTTPBasicAuth(username, password)
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.session = session or requests.Session()

    @property
    def posts_url(self) -> str:
        return f"{self.base_url}/wp-json/wp/v2/posts"

    def _get(self, params: Dict[str, Any]) -> requests.Response:
        try:
            response = self.session.get(
                self.posts_url,
                params=params,
                auth=self.auth,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.RequestException as e:
            __logger__.error(f"WordPress request failed: {e}")
            raise RemoteApiError(f"WordPress API request failed: {e}") from e
        if not response.ok:
            __logger__.error(f"WordPress API error: {response.status_code} - {response.text}")
            raise RemoteApiError(
                f"WordPress API error: {response.status_code} {response.reason}",
                response.status_code,
            )
        return response

    def list_posts(self, page: int = 1, per_page: int = 20, status: str = "publish") -> List[WpPost]:
        response = self._get({
            "page": page,
            "per_page": per_page,
            "status": status,
            "_fields": POST_FIELDS,
        })
        data = response.json()
        if not isinstance(data, list):
            return []
        return [WpPost(**item) for item in data]

    def get_total_posts(self, status: str = "publish") -> int:
        """Total number of posts, read from the ``X-WP-Total`` header."""
        response = self._get({"per_page": 1, "status": status})
        total = response.headers.get("X-WP-Total")
        return int(total) if total else 0

    @staticmethod
    def transform_post(wp_post: WpPost, synced_at: datetime) -> Dict[str, Any]:
        """Map a WordPress post onto a ``posts`` row."""
        yoast = wp_post.yoast_meta or {}
        focus_keyword = yoast.get("yoast_focuskw") or None
        return {
            "wordpress_id": wp_post.id,
            "title": wp_post.title.rendered,
            "slug": wp_post.slug,
            "content": wp_post.content.rendered,
            "excerpt": wp_post.excerpt.rendered if wp_post.excerpt and wp_post.excerpt.rendered else None,
            "featured_image_url": None,
            "featured_image_alt": None,
            "status": wp_post.status,
            "wordpress_url": wp_post.link or None,
            "wordpress_date": wp_post.date,
            "wordpress_modified": wp_post.modified,
            "author_id": wp_post.author,
            "seo_title": yoast.get("yoast_title") or None,
            "seo_description": yoast.get("yoast_description") or None,
            "seo_focus_keyword": focus_keyword,
            "main_keyword": focus_keyword,
            "categories": [{"id": term_id, "name": "", "slug": ""} for term_id in wp_post.categories],
            "tags": [{"id": term_id, "name": "", "slug": ""} for term_id in wp_post.tags],
            "last_synced_at": synced_at,
        }

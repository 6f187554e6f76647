"""ImgBB image hosting client (https://api.imgbb.com/)."""
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests

from catalog_hub.core.exceptions import CatalogError
from catalog_hub.schemas.media import ImgBBImage
from catalog_hub.schemas.results import Err, Ok, Result

_logger = logging.getLogger(__name__)

MIN_EXPIRATION = 60
MAX_EXPIRATION = 15_552_000


def is_valid_url(value: str) -> bool:
    parsed = urlparse(value or "")
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def strip_data_uri(data: str) -> str:
    """Drop a ``data:image/...;base64,`` prefix if present."""
    return data.split(",", 1)[1] if "," in data else data


class ImageUploadClient:
    """Uploads images by base64 data or source URL. Failures come back as Err."""

    def __init__(self, api_key: str, upload_url: str = "https://api.imgbb.com/1/upload",
                 timeout: int = 30, session: Optional[requests.Session] = None):
        if not api_key:
            raise CatalogError("ImgBB API key is not configured")
        self.api_key = api_key
        self.upload_url = upload_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def upload_base64(self, base64_data: str, name: Optional[str] = None,
                      expiration: Optional[int] = None) -> Result:
        return self._upload(strip_data_uri(base64_data), name, expiration)

    def upload_from_url(self, image_url: str, name: Optional[str] = None,
                        expiration: Optional[int] = None) -> Result:
        if not is_valid_url(image_url):
            return Err(error=f"Invalid image URL: {image_url}", status=400)
        return self._upload(image_url, name, expiration)

    def upload(self, image: str, name: Optional[str] = None, expiration: Optional[int] = None) -> Result:
        """Dispatch on the image format: data URI, http(s) URL, or bare base64."""
        if image.startswith("data:image") or ";base64," in image:
            return self.upload_base64(image, name, expiration)
        if image.startswith("http://") or image.startswith("https://"):
            return self.upload_from_url(image, name, expiration)
        return self.upload_base64(image, name, expiration)

    def _upload(self, image: str, name: Optional[str], expiration: Optional[int]) -> Result:
        form: Dict[str, Any] = {"key": self.api_key, "image": image}
        if name:
            form["name"] = name
        if expiration:
            if expiration < MIN_EXPIRATION or expiration > MAX_EXPIRATION:
                return Err(error=f"Expiration must be between {MIN_EXPIRATION} and {MAX_EXPIRATION} seconds", status=400)
            form["expiration"] = str(expiration)

        try:
            # multipart/form-data, as the API expects
            response = self.session.post(
                self.upload_url,
                files={key: (None, value) for key, value in form.items()},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            _logger.error(f"ImgBB upload failed: {e}")
            return Err(error=str(e))

        if not response.ok:
            return Err(error=f"HTTP {response.status_code}: {response.reason}", status=response.status_code)

        try:
            body = response.json()
        except ValueError:
            return Err(error="Invalid response from ImgBB", status=response.status_code)
        if not body.get("success"):
            message = ((body.get("data") or {}).get("error") or {}).get("message") or "Upload failed"
            return Err(error=message, status=body.get("status"))

        return Ok(data=ImgBBImage(**body["data"]))

"""Client for the watermark microservice."""
import logging
from typing import Any, Dict, Optional

import requests

from catalog_hub.core.exceptions import CatalogError
from catalog_hub.schemas.media import WatermarkResponse
from catalog_hub.schemas.results import Err, Ok, Result
from catalog_hub.services.imgbb import is_valid_url

_logger = logging.getLogger(__name__)


class WatermarkClient:
    endpoint = "/water-mark"

    def __init__(self, base_url: str, api_key: str, timeout: int = 30,
                 session: Optional[requests.Session] = None):
        if not api_key:
            raise CatalogError("Watermark API key is not configured")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def apply_watermark(self, image_url: str, position: Optional[str] = None,
                        opacity: Optional[int] = None) -> Result:
        """
        Watermark a public image.

        Args:
            image_url: Public URL of the image
            position: Optional position, e.g. ``bottom-right``
            opacity: Optional opacity, 0-100

        Returns:
            Ok(WatermarkResponse) or Err(error, status)
        """
        if not is_valid_url(image_url):
            return Err(error="image_url must be a valid URL", status=400)

        body: Dict[str, Any] = {"image_url": image_url}
        if position:
            body["position"] = position
        if opacity is not None:
            body["opacity"] = opacity

        try:
            response = self.session.post(
                f"{self.base_url}{self.endpoint}",
                json=body,
                headers={"x-api-key": self.api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            _logger.error(f"Watermark request failed: {e}")
            return Err(error=str(e))

        if not response.ok:
            message = f"HTTP {response.status_code}: {response.reason}"
            try:
                error = response.json().get("error")
                if error:
                    message = error
            except (ValueError, AttributeError):
                pass
            return Err(error=message, status=response.status_code)

        try:
            return Ok(data=WatermarkResponse(**response.json()))
        except Exception as e:
            return Err(error=f"Invalid response from watermark service: {e}", status=response.status_code)

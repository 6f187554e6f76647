"""WooCommerce API request helpers."""

import logging
from typing import Any, Dict, Optional

import requests
from woocommerce import API

from catalog_hub.core.exceptions import RemoteApiError

__logger__ = logging.getLogger(__name__)


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return f"WooCommerce API error ({response.status_code}): {body['message']}"
    return f"WooCommerce API error ({response.status_code}): {response.text}"


def _check(method: str, path: str, r: requests.Response) -> Any:
    if not r.ok:
        __logger__.error(f"WooCommerce {method} error on {path}: {r.status_code} - {r.text}")
        raise RemoteApiError(_error_message(r), r.status_code)
    return r.json()


def wc_get(path: str, params: Optional[Dict[str, Any]] = None, wcapi: API = None) -> Any:
    """Execute GET request to WooCommerce API."""
    r = wcapi.get(path, params=params) if params else wcapi.get(path)
    return _check("GET", path, r)


def wc_post(path: str, data: Optional[Dict[str, Any]] = None, wcapi: API = None) -> Any:
    """Execute POST request to WooCommerce API."""
    r = wcapi.post(path, data or {})
    return _check("POST", path, r)


def wc_put(path: str, data: Optional[Dict[str, Any]] = None, wcapi: API = None) -> Any:
    """Execute PUT request to WooCommerce API."""
    r = wcapi.put(path, data or {})
    return _check("PUT", path, r)


def wc_request(
    method: str,
    path: str,
    params: Optional[Dict[str, Any]] = None,
    wcapi: API = None
) -> Any:
    """
    Generic WooCommerce API request handler.

    Every call is one-shot: no retries happen here.

    Args:
        method: HTTP method (GET, POST, PUT)
        path: API endpoint path
        params: Query parameters for GET, request body otherwise
        wcapi: WooCommerce API client

    Returns:
        JSON response from WooCommerce

    Raises:
        RemoteApiError: Non-2xx response or transport failure
    """
    if wcapi is None:
        raise ValueError("A WooCommerce API client is required")

    __logger__.debug(f"WC Request: {method} {path} with params: {params}")
    try:
        if method == "GET":
            return wc_get(path, params, wcapi)
        if method == "POST":
            return wc_post(path, params, wcapi)
        if method == "PUT":
            return wc_put(path, params, wcapi)
    except requests.RequestException as e:
        __logger__.error(f"WC Request failed: {method} {path} - Error: {e}")
        raise RemoteApiError(f"WooCommerce request failed: {e}") from e
    raise ValueError(f"Unsupported method: {method}")

"""
WooCommerce client tests with a fake ``woocommerce.API``.
"""
import asyncio
from unittest.mock import MagicMock

import pytest
import requests

from catalog_hub.core.exceptions import RemoteApiError, ValidationError
from catalog_hub.models.product_models import Product
from catalog_hub.schemas.woocommerce import CategoryRef, VariantAttribute
from catalog_hub.services.woocommerce import WooCommerceClient, wc_request


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text or str(body)

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._body is None:
            raise ValueError("No JSON")
        return self._body


def make_product(**overrides) -> Product:
    fields = {
        "id": "prod-1",
        "seo_title": "Áo thun cotton",
        "meta_description": "Áo thun cotton thoáng mát",
        "short_description": "Thoáng mát",
        "html_content": "<p>Chi tiết</p>",
        "keywords": ["áo thun", "cotton"],
        "images": ["https://img.example.com/a.jpg", "https://img.example.com/b.jpg"],
        "price": 250000,
    }
    fields.update(overrides)
    return Product(**fields)


def test_list_categories_shapes_query():
    wcapi = MagicMock()
    wcapi.get.return_value = FakeResponse(body=[{"id": 15, "name": "Áo", "slug": "ao", "count": 3}])

    categories = WooCommerceClient(wcapi).list_categories(
        fields=["id", "name", "slug"], hide_empty=True, per_page=100
    )

    assert categories[0].id == 15
    wcapi.get.assert_called_once_with(
        "products/categories",
        params={"_fields": "id,name,slug", "hide_empty": "true", "per_page": 100},
    )


def test_list_brands_reads_brand_attribute_terms():
    wcapi = MagicMock()
    wcapi.get.return_value = FakeResponse(body=[{"id": 4, "name": "Nike", "slug": "nike"}])

    brands = WooCommerceClient(wcapi, brand_attribute_id=7).list_brands(per_page=100)

    assert [brand.name for brand in brands] == ["Nike"]
    assert wcapi.get.call_args.args[0] == "products/attributes/7/terms"


def test_non_2xx_raises_remote_error_with_status():
    wcapi = MagicMock()
    wcapi.get.return_value = FakeResponse(
        status_code=401, body={"code": "woocommerce_rest_cannot_view", "message": "Sorry, you cannot list resources."}
    )

    with pytest.raises(RemoteApiError) as exc_info:
        WooCommerceClient(wcapi).list_products(category=3)

    assert exc_info.value.http_status == 401
    assert "Sorry, you cannot list resources." in exc_info.value.message


def test_transport_error_raises_remote_error():
    wcapi = MagicMock()
    wcapi.get.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(RemoteApiError) as exc_info:
        WooCommerceClient(wcapi).list_product_variations(11)

    assert exc_info.value.http_status is None


def test_single_entity_lookups_return_none_on_failure():
    wcapi = MagicMock()
    wcapi.get.return_value = FakeResponse(status_code=404, body={"message": "Invalid ID."})
    client = WooCommerceClient(wcapi)

    assert client.get_category(999) is None
    assert client.get_product_variation(1, 2) is None


def test_wc_request_requires_client():
    with pytest.raises(ValueError):
        wc_request("GET", "products")


def test_attributes_with_terms_tolerates_term_failures():
    wcapi = MagicMock()

    def get(path, params=None):
        if path == "products/attributes":
            return FakeResponse(body=[
                {"id": 1, "name": "Màu", "slug": "pa_mau"},
                {"id": 2, "name": "Size", "slug": "pa_size"},
            ])
        if path == "products/attributes/1/terms":
            return FakeResponse(body=[{"id": 10, "name": "Đỏ", "slug": "do"}])
        return FakeResponse(status_code=500, body={"message": "Internal error"})

    wcapi.get.side_effect = get

    attributes = asyncio.run(WooCommerceClient(wcapi).list_attributes_with_terms())

    assert [attr.name for attr in attributes] == ["Màu", "Size"]
    assert [term.name for term in attributes[0].terms] == ["Đỏ"]
    assert attributes[1].terms == []


def test_upload_simple_product_payload():
    wcapi = MagicMock()
    wcapi.post.return_value = FakeResponse(
        status_code=201, body={"id": 88, "permalink": "https://shop.example.com/ao-thun"}
    )

    result = WooCommerceClient(wcapi).upload_product(
        make_product(), categories=[CategoryRef(id="15", name="Áo", slug="ao")]
    )

    assert result.woocommerce_id == 88
    assert result.preview_url == "https://shop.example.com/ao-thun"
    path, payload = wcapi.post.call_args.args
    assert path == "products"
    assert payload["name"] == "Áo thun cotton"
    assert payload["type"] == "simple"
    assert payload["status"] == "publish"
    assert payload["regular_price"] == "250000"
    assert payload["categories"] == [{"id": 15}]
    assert payload["images"] == [
        {"src": "https://img.example.com/a.jpg", "alt": "Áo thun cotton", "position": 0},
        {"src": "https://img.example.com/b.jpg", "alt": "Áo thun cotton", "position": 1},
    ]
    assert {"key": "_yoast_wpseo_metadesc", "value": "Áo thun cotton thoáng mát"} in payload["meta_data"]
    assert {"key": "_yoast_wpseo_focuskw", "value": "áo thun, cotton"} in payload["meta_data"]
    assert "attributes" not in payload
    assert wcapi.post.call_count == 1


def test_upload_without_price_sends_empty_regular_price():
    wcapi = MagicMock()
    wcapi.post.return_value = FakeResponse(status_code=201, body={"id": 1, "permalink": "https://shop/p/1"})

    WooCommerceClient(wcapi).upload_product(make_product(price=None))

    assert wcapi.post.call_args.args[1]["regular_price"] == ""


def test_upload_variable_product_creates_parent_then_variations():
    wcapi = MagicMock()
    wcapi.post.side_effect = [
        FakeResponse(status_code=201, body={"id": 90, "permalink": "https://shop.example.com/ao"}),
        FakeResponse(body={"create": [{"id": 901}, {"id": 902}]}),
    ]
    variant = VariantAttribute(id=3, name="Size", options=["S", "M"], prices={"M": 270000})

    result = WooCommerceClient(wcapi).upload_product(make_product(), variants=[variant])

    parent_call, batch_call = wcapi.post.call_args_list
    parent_path, parent_payload = parent_call.args
    assert parent_path == "products"
    assert parent_payload["type"] == "variable"
    assert parent_payload["regular_price"] == ""
    assert parent_payload["attributes"] == [
        {"id": 3, "name": "Size", "variation": True, "visible": True, "options": ["S", "M"]}
    ]
    batch_path, batch_payload = batch_call.args
    assert batch_path == "products/90/variations/batch"
    assert batch_payload == {"create": [
        {"regular_price": "250000", "attributes": [{"id": 3, "option": "S"}]},
        {"regular_price": "270000", "attributes": [{"id": 3, "option": "M"}]},
    ]}
    assert result.variation_ids == [901, 902]


def test_variation_batch_failure_raises_after_parent_created():
    wcapi = MagicMock()
    wcapi.post.side_effect = [
        FakeResponse(status_code=201, body={"id": 91, "permalink": "https://shop.example.com/x"}),
        FakeResponse(status_code=400, body={"message": "Invalid attribute"}),
    ]
    variant = VariantAttribute(id=3, name="Size", options=["S"])

    with pytest.raises(RemoteApiError):
        WooCommerceClient(wcapi).upload_product(make_product(), variants=[variant])

    assert wcapi.post.call_count == 2


def test_upload_rejects_multiple_variant_attributes():
    wcapi = MagicMock()
    variants = [
        VariantAttribute(id=1, name="Màu", options=["Đỏ"]),
        VariantAttribute(id=2, name="Size", options=["S"]),
    ]

    with pytest.raises(ValidationError):
        WooCommerceClient(wcapi).upload_product(make_product(), variants=variants)

    wcapi.post.assert_not_called()


def test_image_alt_is_the_title():
    assert WooCommerceClient.generate_image_alt("Áo thun") == "Áo thun"

"""Tests for upstream payload parsing."""

import json

import pytest

from src.api.exceptions import UpstreamFetchError
from src.marketplace.parsing import parse_search_response

SHOP_URL = "https://shopee.tw"
IMAGE = {"image_url_list": ["https://cf.shopee.tw/file/x"]}


def test_parse_search_response_accepts_item_list_key():
    """Items may be listed under item_list."""
    payload = {
        "error": "",
        "response": {
            "item_list": [
                {"item_id": 1, "name": "Cap", "price": "120.5", "image_url": "https://x/1"},
            ]
        },
    }

    items = parse_search_response(payload, limit=10, shop_base_url=SHOP_URL)

    assert len(items) == 1
    assert items[0].name == "Cap"
    assert items[0].price == 120
    assert items[0].image_url == "https://x/1"
    assert items[0].shop_url == SHOP_URL


def test_parse_search_response_skips_items_without_id_and_truncates():
    """Entries without item_id are dropped and the limit is honored."""
    payload = {
        "response": {
            "item": [
                {"item_name": "no id", "image": IMAGE},
                {"item_id": 1, "item_name": "a", "image": IMAGE},
                {"item_id": 2, "item_name": "b", "image": IMAGE},
                {"item_id": 3, "item_name": "c", "image": IMAGE},
            ]
        }
    }

    items = parse_search_response(payload, limit=2, shop_base_url=SHOP_URL)

    assert [item.id for item in items] == ["1", "2"]
    assert items[0].price == 0


@pytest.mark.parametrize(
    "raw",
    [
        {"item_id": 1, "image": IMAGE},
        {"item_id": 1, "item_name": "", "image": IMAGE},
        {"item_id": 1, "item_name": "no image"},
        {"item_id": 1, "item_name": "relative", "image_url": "/file/x"},
        {"item_id": 1, "item_name": "empty list", "image": {"image_url_list": []}},
    ],
)
def test_parse_search_response_skips_items_without_name_or_image(raw):
    """Items must carry a display name and an absolute image URL."""
    payload = {"response": {"item": [raw]}}

    assert parse_search_response(payload, limit=5, shop_base_url=SHOP_URL) == []


def test_parse_search_response_empty_response():
    """A payload without results yields no items."""
    assert parse_search_response({"error": ""}, limit=5, shop_base_url=SHOP_URL) == []


@pytest.mark.parametrize("payload", [[], "text", None])
def test_parse_search_response_rejects_non_object(payload):
    """Bodies that are not JSON objects are fetch failures."""
    with pytest.raises(UpstreamFetchError):
        parse_search_response(payload, limit=5, shop_base_url=SHOP_URL)


@pytest.mark.parametrize("response", [["a"], "text", 3])
def test_parse_search_response_rejects_non_object_response_field(response):
    """A response field that is not an object is a fetch failure."""
    with pytest.raises(UpstreamFetchError):
        parse_search_response(
            {"error": "", "response": response}, limit=5, shop_base_url=SHOP_URL
        )


@pytest.mark.parametrize("entry", ["oops", 42, ["nested"], None])
def test_parse_search_response_rejects_non_object_items(entry):
    """Item entries that are not objects are fetch failures."""
    payload = {"error": "", "response": {"item": [entry]}}

    with pytest.raises(UpstreamFetchError) as exc_info:
        parse_search_response(payload, limit=5, shop_base_url=SHOP_URL)

    assert "unexpected item entry" in exc_info.value.message


@pytest.mark.parametrize(
    "price_fields",
    [
        {"price_info": {"current_price": 3}},
        {"price_info": ["not a dict"]},
        {"price_info": []},
        {"price": "abc"},
    ],
)
def test_parse_search_response_malformed_price_defaults_to_zero(price_fields):
    """Unusable price data yields a zero price instead of an exception."""
    raw = {"item_id": 1, "item_name": "x", "image": IMAGE}
    raw.update(price_fields)

    items = parse_search_response(
        {"response": {"item": [raw]}}, limit=5, shop_base_url=SHOP_URL
    )

    assert items[0].price == 0


def test_parse_search_response_infinite_price_defaults_to_zero():
    """JSON numbers beyond float range decode to inf and yield a zero price."""
    payload = json.loads(
        '{"response": {"item": [{"item_id": 1, "item_name": "x", "price": 1e400,'
        ' "image": {"image_url_list": ["https://cf.shopee.tw/file/x"]}}]}}'
    )

    items = parse_search_response(payload, limit=5, shop_base_url=SHOP_URL)

    assert items[0].price == 0

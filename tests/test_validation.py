# tests/test_validation.py
from decimal import Decimal

import pytest

from config import settings
from utils.validation import (
    NAME_REQUIRED, PRICE_INVALID, QUANTITY_INVALID,
    apply_defaults, validate_product
)


def test_valid_payload_has_no_errors():
    assert validate_product({"name": "Widget", "price": 9.99, "quantity": 3}) == []


def test_numeric_strings_are_accepted():
    assert validate_product({"name": "Widget", "price": "9.99", "quantity": "3"}) == []


@pytest.mark.parametrize("name", [None, "", "   ", "\t\n", 42])
def test_blank_or_missing_name_rejected(name):
    errors = validate_product({"name": name, "price": 1, "quantity": 1})
    assert errors == [NAME_REQUIRED]


@pytest.mark.parametrize("price", [-0.01, -5, "abc", "", None, True, float("nan"), float("inf"), [1]])
def test_bad_price_rejected(price):
    errors = validate_product({"name": "Widget", "price": price, "quantity": 1})
    assert errors == [PRICE_INVALID]


@pytest.mark.parametrize("quantity", [-1, 2.5, "1.5", "x", None, False])
def test_bad_quantity_rejected(quantity):
    errors = validate_product({"name": "Widget", "price": 1, "quantity": quantity})
    assert errors == [QUANTITY_INVALID]


def test_zero_price_and_quantity_allowed():
    assert validate_product({"name": "Freebie", "price": 0, "quantity": 0}) == []


def test_integral_float_quantity_allowed():
    assert validate_product({"name": "Widget", "price": 1, "quantity": 4.0}) == []


def test_all_violations_collected_in_order():
    errors = validate_product({"name": " ", "price": -1, "quantity": -1})
    assert errors == [NAME_REQUIRED, PRICE_INVALID, QUANTITY_INVALID]


@pytest.mark.parametrize("payload", [None, [], "name=Widget", 12])
def test_malformed_payload_never_raises(payload):
    assert validate_product(payload) == [NAME_REQUIRED, PRICE_INVALID, QUANTITY_INVALID]


def test_validate_does_not_mutate_payload():
    payload = {"name": "  Widget  ", "price": "1.005", "quantity": "2"}
    validate_product(payload)
    assert payload == {"name": "  Widget  ", "price": "1.005", "quantity": "2"}


def test_apply_defaults_fills_placeholder_and_description():
    data = apply_defaults({"name": "  Widget ", "price": 9.99, "quantity": 3, "id": 99, "createdAt": "x"})
    assert data == {
        "name": "Widget",
        "description": "",
        "price": Decimal("9.99"),
        "image": settings.PLACEHOLDER_IMAGE_URL,
        "quantity": 3,
    }


def test_apply_defaults_replaces_blank_image():
    data = apply_defaults({"name": "Widget", "price": 1, "quantity": 1, "image": "  "})
    assert data["image"] == settings.PLACEHOLDER_IMAGE_URL


def test_apply_defaults_rounds_price_to_cents():
    assert apply_defaults({"name": "W", "price": "1.005", "quantity": 1})["price"] == Decimal("1.01")


def test_apply_defaults_partial_only_touches_sent_fields():
    assert apply_defaults({"quantity": "1"}, partial=True) == {"quantity": 1}
    assert apply_defaults({"image": None}, partial=True) == {"image": settings.PLACEHOLDER_IMAGE_URL}


@pytest.mark.parametrize("price", [1e27, "100000000", 99999999.999, "1e30"])
def test_price_beyond_column_range_rejected(price):
    errors = validate_product({"name": "Widget", "price": price, "quantity": 1})
    assert errors == [PRICE_INVALID]


def test_largest_storable_price_accepted():
    assert validate_product({"name": "Widget", "price": "99999999.99", "quantity": 1}) == []


@pytest.mark.parametrize("quantity", [10 ** 20, 2 ** 31, "1e40"])
def test_quantity_beyond_column_range_rejected(quantity):
    errors = validate_product({"name": "Widget", "price": 1, "quantity": quantity})
    assert errors == [QUANTITY_INVALID]


def test_largest_storable_quantity_accepted():
    assert validate_product({"name": "Widget", "price": 1, "quantity": 2 ** 31 - 1}) == []

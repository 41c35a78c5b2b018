"""
Field rules for product payloads.

`validate_product` is the gate every create/update goes through before the
store is touched. It never raises: whatever the client sent, the caller
gets back a (possibly empty) list of violation messages, in rule order.

`apply_defaults` holds the default-value rules (placeholder image, empty
description) and the coercions that happen once a payload has passed.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping, Optional

from config import settings

NAME_REQUIRED = "Name is required"
PRICE_INVALID = "Price must be a valid non-negative number"
QUANTITY_INVALID = "Quantity must be a valid non-negative integer"

PRODUCT_FIELDS = ("name", "description", "price", "image", "quantity")
CENTS = Decimal("0.01")

# column limits: NUMERIC(10, 2) and a 32-bit INTEGER
MAX_PRICE = Decimal("100000000")
MAX_QUANTITY = 2 ** 31 - 1


def to_decimal(value: Any) -> Optional[Decimal]:
    """Returns the finite Decimal for a numeric value or numeric string, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not number.is_finite():
        return None
    return number


def _valid_name(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _valid_price(value: Any) -> bool:
    number = to_decimal(value)
    if number is None or number < 0 or number >= MAX_PRICE:
        return False
    return number.quantize(CENTS, rounding=ROUND_HALF_UP) < MAX_PRICE


def _valid_quantity(value: Any) -> bool:
    number = to_decimal(value)
    if number is None or number < 0 or number > MAX_QUANTITY:
        return False
    return number == number.to_integral_value()


def validate_product(payload: Any) -> List[str]:
    if not isinstance(payload, Mapping):
        payload = {}

    errors = []
    if not _valid_name(payload.get("name")):
        errors.append(NAME_REQUIRED)
    if not _valid_price(payload.get("price")):
        errors.append(PRICE_INVALID)
    if not _valid_quantity(payload.get("quantity")):
        errors.append(QUANTITY_INVALID)
    return errors


def apply_defaults(payload: Mapping[str, Any], partial: bool = False) -> Dict[str, Any]:
    """
    Keeps only product columns and coerces them to their stored types.

    With partial=True only the keys present in the payload are returned, so
    an update touches just the fields the client sent. Expects a payload
    that already passed validate_product.
    """
    data = {key: payload[key] for key in PRODUCT_FIELDS if key in payload}

    if "name" in data:
        data["name"] = data["name"].strip()
    if "price" in data:
        data["price"] = to_decimal(data["price"]).quantize(CENTS, rounding=ROUND_HALF_UP)
    if "quantity" in data:
        data["quantity"] = int(to_decimal(data["quantity"]))

    if not partial or "description" in data:
        data["description"] = data.get("description") or ""
    if not partial or "image" in data:
        image = data.get("image")
        if not isinstance(image, str) or not image.strip():
            image = settings.PLACEHOLDER_IMAGE_URL
        data["image"] = image.strip()

    return data

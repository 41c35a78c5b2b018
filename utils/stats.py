from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, List, Sequence

from schemas import InventoryStats, ChartPoint
from utils.validation import to_decimal

LOW_STOCK_THRESHOLD = 5
CHART_NAME_LENGTH = 15


def _field(product: Any, name: str) -> Any:
    # ORM rows and pydantic models expose attributes, API payloads are dicts
    if isinstance(product, dict):
        return product.get(name)
    return getattr(product, name, None)


def _quantity(product: Any) -> int:
    number = to_decimal(_field(product, "quantity"))
    return int(number) if number is not None else 0


def _price(product: Any) -> Decimal:
    number = to_decimal(_field(product, "price"))
    return number if number is not None else Decimal(0)


def is_low_stock(product: Any) -> bool:
    return _quantity(product) < LOW_STOCK_THRESHOLD


def compute_inventory_stats(products: Iterable[Any]) -> InventoryStats:
    """Summary over the whole collection. No rounding happens here."""
    total_products = 0
    total_value = Decimal(0)
    low_stock_count = 0
    total_quantity = 0

    for product in products:
        quantity = _quantity(product)
        total_products += 1
        total_value += _price(product) * quantity
        total_quantity += quantity
        if quantity < LOW_STOCK_THRESHOLD:
            low_stock_count += 1

    return InventoryStats(
        total_products=total_products,
        total_value=float(total_value),
        low_stock_count=low_stock_count,
        total_quantity=total_quantity,
    )


def format_currency(value: Any) -> str:
    amount = to_decimal(value) or Decimal(0)
    amount = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"${amount:,.2f}"


def filter_products(products: Sequence[Any], query: str) -> List[Any]:
    """Case-insensitive substring match on name or description, order kept."""
    term = (query or "").strip().lower()
    if not term:
        return list(products)

    matched = []
    for product in products:
        name = (_field(product, "name") or "").lower()
        description = (_field(product, "description") or "").lower()
        if term in name or term in description:
            matched.append(product)
    return matched


def stock_chart_data(products: Sequence[Any], limit: int = 10) -> List[ChartPoint]:
    ranked = sorted(products, key=_quantity, reverse=True)[:limit]

    points = []
    for product in ranked:
        name = _field(product, "name") or ""
        short = name[:CHART_NAME_LENGTH] + "..." if len(name) > CHART_NAME_LENGTH else name
        quantity = _quantity(product)
        points.append(ChartPoint(
            name=short,
            full_name=name,
            quantity=quantity,
            low_stock=quantity < LOW_STOCK_THRESHOLD,
        ))
    return points

from typing import List


class InventoryError(Exception):
    """Base class for errors raised by the product service."""
    pass


class ValidationError(InventoryError):
    """Payload failed one or more field rules."""
    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class NotFoundError(InventoryError):
    """No product with the requested id."""
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__("Product not found")


class StoreError(InventoryError):
    """Underlying persistence failure."""
    def __init__(self, message: str, details: str = ""):
        self.message = message
        self.details = details
        super().__init__(message)

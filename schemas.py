from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional, Dict, Any, List


class ProductBase(BaseModel):
    name: str
    description: Optional[str] = ""
    price: float
    image: Optional[str] = None
    quantity: int


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    image: Optional[str] = None
    quantity: Optional[int] = None


class ProductResponse(ProductBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class ValidationErrorResponse(BaseModel):
    errors: List[str]


class InventoryStats(BaseModel):
    total_products: int = Field(serialization_alias="totalProducts")
    total_value: float = Field(serialization_alias="totalValue")
    low_stock_count: int = Field(serialization_alias="lowStockCount")
    total_quantity: int = Field(serialization_alias="totalQuantity")


class ChartPoint(BaseModel):
    name: str
    full_name: str = Field(serialization_alias="fullName")
    quantity: int
    low_stock: bool = Field(serialization_alias="lowStock")


class InventoryApiResponse(BaseModel):
    success: bool
    status_code: Optional[int] = None
    data: Optional[Any] = None
    error: Optional[str] = None
    errors: List[str] = []
    raw_response: Optional[Dict[str, Any]] = None

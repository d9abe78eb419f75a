"""
Product Domain Model

Represents a product entity in the catalog.
This is the single source of truth for product data structure.

Author: TM3
Date: 2025-10-17
"""
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

NAME_MAX_LENGTH = 255

# Column limits: price DECIMAL(10,2), stock INTEGER
PRICE_MAX = Decimal("99999999.99")
STOCK_MAX = 2_147_483_647


class ProductValidationError(ValueError):
    """Raised when product data breaks an entity rule"""


def _is_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a price
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    return isinstance(value, int) or math.isfinite(value)


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    Immutable once built. Every instance passed the entity rules:

    Fields:
        id: Store-assigned identifier (None before persistence)
        name: Product name, trimmed, 1-255 chars
        price: Selling price, rounded to 2 decimals, 0.01 to 99999999.99
        stock: Units available, integer 0 to 2147483647
    """

    id: Optional[Union[str, int]] = Field(None, description="Store-assigned product ID")
    name: str = Field(..., description="Product name")
    price: float = Field(..., description="Sale price")
    stock: int = Field(..., description="Units in stock")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='before')
    @classmethod
    def _check_entity_rules(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            raise ValueError("Product: data must be a mapping")

        name = data.get('name')
        price = data.get('price')
        stock = data.get('stock')

        if not name or not price or stock is None:
            raise ValueError("Product: all fields are required (name, price, stock)")

        if not isinstance(name, str):
            raise ValueError("Product: name must be a string")

        if not _is_number(price) or price <= 0:
            raise ValueError("Product: price must be a number greater than 0")

        if price >= PRICE_MAX + 1:
            raise ValueError(f"Product: price cannot exceed {PRICE_MAX}")

        # Rules apply to the stored (2-decimal) price
        rounded_price = Decimal(str(price)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
        if rounded_price <= 0:
            raise ValueError("Product: price must be a number greater than 0")
        if rounded_price > PRICE_MAX:
            raise ValueError(f"Product: price cannot exceed {PRICE_MAX}")

        if not _is_number(stock) or stock < 0 or int(stock) != stock:
            raise ValueError("Product: stock must be an integer greater than or equal to 0")
        if stock > STOCK_MAX:
            raise ValueError(f"Product: stock cannot exceed {STOCK_MAX}")

        if not name.strip():
            raise ValueError("Product: name cannot be empty")

        if len(name) > NAME_MAX_LENGTH:
            raise ValueError(f"Product: name cannot exceed {NAME_MAX_LENGTH} characters")

        return {
            **data,
            'name': name.strip(),
            'price': float(rounded_price),
            'stock': int(stock),
        }

    @classmethod
    def create(cls, **data: Any) -> "Product":
        """
        Build a Product, raising ProductValidationError with a readable message

        Raises:
            ProductValidationError: If any entity rule fails
        """
        try:
            return cls(**data)
        except ValidationError as exc:
            messages = []
            for error in exc.errors():
                cause = error.get('ctx', {}).get('error')
                messages.append(str(cause) if cause else error['msg'])
            raise ProductValidationError("; ".join(messages)) from exc

    # Computed properties
    @property
    def is_available(self) -> bool:
        return self.stock > 0

    @property
    def is_out_of_stock(self) -> bool:
        return self.stock == 0

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'price': self.price,
            'stock': self.stock
        }

    def __str__(self) -> str:
        return f'Product(id={self.id}, name="{self.name}", price={self.price}, stock={self.stock})'

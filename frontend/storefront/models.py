"""
Storefront models - products, filters and filter stats
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product as seen by the storefront

    API products carry stock; bundled fallback products may carry an image
    instead.
    """
    id: Union[int, str] = Field(..., description="Product ID (int in the fallback dataset, UUID from the API)")
    name: str
    price: float
    image: Optional[str] = None
    stock: Optional[int] = None

    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class ProductFilters:
    """Snapshot of the filter inputs applied to a product list"""
    search_term: str = ""
    price_range: Tuple[float, float] = (15, 65)
    is_ascending: bool = True


@dataclass(frozen=True)
class FilterStats:
    """What the filter summary shows: 'Showing X of Y products'"""
    filtered_count: int
    total_count: int
    search_term: str = ""

    @property
    def summary(self) -> str:
        return f"Showing {self.filtered_count} of {self.total_count} products"

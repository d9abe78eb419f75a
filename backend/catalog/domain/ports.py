"""
Domain ports - contracts the infrastructure layer implements
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from catalog.domain.product import Product


class DuplicateProductError(Exception):
    """The store rejected a product because its name is already taken"""

    def __init__(self, name: str):
        super().__init__(f'A product named "{name}" already exists')
        self.name = name


class InvalidProductDataError(Exception):
    """The store rejected product values (check constraint or column range)"""


class ProductRepositoryPort(ABC):
    """
    Persistence contract for products

    Every method receives the transaction handle of the current unit of work.
    """

    @abstractmethod
    def create(self, product: Product, transaction: Any) -> Optional[Product]:
        """Insert the product and return it with its store-assigned id"""

    @abstractmethod
    def get_all(self, transaction: Any) -> List[Product]:
        """All products ordered by name ascending"""

    @abstractmethod
    def find_by_name(self, name: str, transaction: Any) -> Optional[Product]:
        """Exact (case-sensitive) match on the trimmed name"""

"""
Product Service - entry point the API layer talks to
"""
from typing import Any, Dict

from catalog.services.create_product_use_case import CreateProductUseCase
from catalog.services.get_products_use_case import GetProductsUseCase
from catalog.shared.result import Result


class ProductService:
    """Facade over the product use cases"""

    def __init__(self, create_product_use_case: CreateProductUseCase, get_products_use_case: GetProductsUseCase):
        self.create_product_use_case = create_product_use_case
        self.get_products_use_case = get_products_use_case

    def create(self, product_data: Dict[str, Any]) -> Result:
        return self.create_product_use_case.execute(product_data)

    def get_all(self) -> Result:
        return self.get_products_use_case.execute()

"""
Domain Layer - Business Entities

Pydantic models representing business entities plus the ports
the infrastructure implements.

Author: TM3
Date: 2025-10-17
"""
from catalog.domain.product import Product, ProductValidationError
from catalog.domain.ports import DuplicateProductError, InvalidProductDataError, ProductRepositoryPort

__all__ = [
    'Product',
    'ProductValidationError',
    'DuplicateProductError',
    'InvalidProductDataError',
    'ProductRepositoryPort',
]

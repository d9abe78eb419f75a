"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.

Author: TM3
Date: 2025-10-17
"""
from catalog.repositories.product_repository import ProductRepository
from catalog.repositories.unit_of_work import UnitOfWork

__all__ = [
    'ProductRepository',
    'UnitOfWork'
]

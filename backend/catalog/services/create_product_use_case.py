"""
Create Product use case

Business rules:
- Two products cannot share a name
- Product data must satisfy the entity rules
- The whole operation runs in one transaction

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Any, Dict

from catalog.domain.ports import DuplicateProductError, InvalidProductDataError, ProductRepositoryPort
from catalog.domain.product import Product, ProductValidationError
from catalog.repositories.unit_of_work import UnitOfWork
from catalog.shared.app_error import AppError
from catalog.shared.result import Result, fail, ok

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Creates a product after checking its name is free"""

    def __init__(self, product_repository: ProductRepositoryPort, unit_of_work: UnitOfWork):
        self.product_repository = product_repository
        self.unit_of_work = unit_of_work

    def execute(self, product_data: Dict[str, Any]) -> Result:
        """
        Create a product

        Args:
            product_data: Dict with name, price and stock

        Returns:
            ok(Product) on success, or fail(AppError) with one of
            PRODUCT_ALREADY_EXISTS, VALIDATION_ERROR, PRODUCT_NOT_CREATED
        """
        return self.unit_of_work.run(lambda transaction: self._create(product_data, transaction))

    def _create(self, product_data: Dict[str, Any], transaction) -> Result:
        name = product_data.get('name')

        if isinstance(name, str):
            existing = self.product_repository.find_by_name(name, transaction)
            if existing:
                return fail(self._already_exists(name))

        try:
            product = Product.create(**product_data)
        except ProductValidationError as e:
            return fail(AppError(
                "VALIDATION_ERROR",
                f"Invalid product data: {e}",
                400
            ))

        try:
            created = self.product_repository.create(product, transaction)
        except DuplicateProductError:
            return fail(self._already_exists(product.name))
        except InvalidProductDataError as e:
            return fail(AppError(
                "VALIDATION_ERROR",
                f"Invalid product data: {e}",
                400
            ))

        if not created:
            return fail(AppError(
                "PRODUCT_NOT_CREATED",
                "The product could not be created in the database",
                500
            ))

        logger.info(f"Product created: {created}")
        return ok(created)

    @staticmethod
    def _already_exists(name: str) -> AppError:
        return AppError(
            "PRODUCT_ALREADY_EXISTS",
            f'A product named "{name.strip()}" already exists',
            400
        )

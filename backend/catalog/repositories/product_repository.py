"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.
Queries run on the connection of the caller's unit of work; this class never
commits or closes it.

Author: TM3
Date: 2025-10-17
"""
import logging
import uuid
from typing import List, Optional

from psycopg2 import errors

from catalog.domain.ports import DuplicateProductError, InvalidProductDataError, ProductRepositoryPort
from catalog.domain.product import Product

logger = logging.getLogger(__name__)


class ProductRepository(ProductRepositoryPort):
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    @staticmethod
    def _map_row_to_product(row: Optional[dict]) -> Optional[Product]:
        """
        Helper method to map database row to Product domain model.

        NUMERIC price comes back as Decimal and is exposed as float.
        """
        if not row:
            return None

        try:
            return Product(
                id=str(row['id']),
                name=row['name'],
                price=float(row['price']),
                stock=row['stock']
            )
        except ValueError as e:
            logger.error(f"Error mapping products row {row.get('id')}: {e}")
            raise

    def create(self, product: Product, transaction) -> Optional[Product]:
        """
        Insert a product

        Args:
            product: Validated Product entity (id is ignored)
            transaction: psycopg2 connection of the current unit of work

        Returns:
            Created Product with its new id, or None if nothing was returned

        Raises:
            DuplicateProductError: If the unique constraint on name fires
            InvalidProductDataError: If a check constraint or column range rejects the values
        """
        cursor = transaction.cursor()

        try:
            cursor.execute("""
                INSERT INTO products (id, name, price, stock, created_at, updated_at)
                VALUES (%s, %s, %s, %s, NOW(), NOW())
                RETURNING id, name, price, stock
            """, (str(uuid.uuid4()), product.name, product.price, product.stock))

            return self._map_row_to_product(cursor.fetchone())

        except errors.UniqueViolation as e:
            logger.info(f"Unique constraint rejected product name '{product.name}'")
            raise DuplicateProductError(product.name) from e

        except (errors.CheckViolation, errors.DataError) as e:
            logger.info(f"Database rejected product values for '{product.name}': {e}")
            raise InvalidProductDataError("price or stock is outside the range the store accepts") from e

        finally:
            cursor.close()

    def get_all(self, transaction) -> List[Product]:
        """
        Get every product

        Returns:
            List of products ordered by name
        """
        cursor = transaction.cursor()

        try:
            cursor.execute("""
                SELECT id, name, price, stock
                FROM products
                ORDER BY name ASC
            """)

            rows = cursor.fetchall()
            return [self._map_row_to_product(row) for row in rows]

        finally:
            cursor.close()

    def find_by_name(self, name: str, transaction) -> Optional[Product]:
        """
        Find product by exact name

        Args:
            name: Product name (surrounding whitespace is ignored)

        Returns:
            Product or None if not found
        """
        cursor = transaction.cursor()

        try:
            cursor.execute("""
                SELECT id, name, price, stock
                FROM products
                WHERE name = %s
            """, (name.strip(),))

            return self._map_row_to_product(cursor.fetchone())

        finally:
            cursor.close()

"""
Unit tests for the Product entity
"""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from catalog.domain.product import Product, ProductValidationError


class TestProductEntity:
    """Entity rules and helpers"""

    def test_valid_product_is_normalized(self):
        product = Product.create(name="  Widget  ", price=9.999, stock=5)

        assert product.id is None
        assert product.name == "Widget"
        assert product.price == 10.0
        assert product.stock == 5

    def test_price_rounds_half_up_to_two_decimals(self):
        assert Product.create(name="Pen", price=1.005, stock=1).price == 1.01
        assert Product.create(name="Pen", price=2, stock=1).price == 2.0

    def test_integral_float_stock_is_accepted(self):
        product = Product.create(name="Pen", price=1.5, stock=3.0)

        assert product.stock == 3
        assert isinstance(product.stock, int)

    @pytest.mark.parametrize("data", [
        {"name": "", "price": 1, "stock": 1},
        {"name": "Pen", "price": 0, "stock": 1},
        {"name": "Pen", "price": 1, "stock": None},
        {"name": "Pen", "price": 1},
    ])
    def test_missing_fields_are_rejected(self, data):
        with pytest.raises(ProductValidationError, match="all fields are required"):
            Product.create(**data)

    def test_name_must_be_a_string(self):
        with pytest.raises(ProductValidationError, match="name must be a string"):
            Product.create(name=123, price=1, stock=1)

    @pytest.mark.parametrize("price", [-1, -0.01, "10", True, float("nan")])
    def test_invalid_price_is_rejected(self, price):
        with pytest.raises(ProductValidationError, match="price must be a number"):
            Product.create(name="Pen", price=price, stock=1)

    @pytest.mark.parametrize("stock", [-1, 1.5, "3", True])
    def test_invalid_stock_is_rejected(self, stock):
        with pytest.raises(ProductValidationError, match="stock must be an integer"):
            Product.create(name="Pen", price=1, stock=stock)

    @pytest.mark.parametrize("price", [0.001, 0.004, Decimal("0.0049")])
    def test_price_rounding_to_zero_is_rejected(self, price):
        with pytest.raises(ProductValidationError, match="price must be a number greater than 0"):
            Product.create(name="Pen", price=price, stock=1)

    def test_price_and_stock_limits(self):
        assert Product.create(name="Pen", price=0.005, stock=0).price == 0.01
        assert Product.create(name="Pen", price=99999999.99, stock=2147483647).stock == 2147483647

        with pytest.raises(ProductValidationError, match="price cannot exceed 99999999.99"):
            Product.create(name="Pen", price=1e9, stock=1)
        with pytest.raises(ProductValidationError, match="price cannot exceed"):
            Product.create(name="Pen", price=1e300, stock=1)
        with pytest.raises(ProductValidationError, match="stock cannot exceed 2147483647"):
            Product.create(name="Pen", price=1, stock=10**10)

    def test_blank_name_is_rejected(self):
        with pytest.raises(ProductValidationError, match="name cannot be empty"):
            Product.create(name="   ", price=1, stock=1)

    def test_name_length_limit(self):
        assert Product.create(name="x" * 255, price=1, stock=0).name == "x" * 255

        with pytest.raises(ProductValidationError, match="cannot exceed 255"):
            Product.create(name="x" * 256, price=1, stock=0)

    def test_product_is_immutable(self):
        product = Product.create(name="Pen", price=1, stock=1)

        with pytest.raises(ValidationError):
            product.stock = 10

    def test_stock_helpers(self):
        assert Product.create(name="Pen", price=1, stock=0).is_out_of_stock is True
        assert Product.create(name="Pen", price=1, stock=0).is_available is False
        assert Product.create(name="Pen", price=1, stock=2).is_available is True

    def test_to_dict(self):
        product = Product(id="abc", name="Pen", price=1.5, stock=2)

        assert product.to_dict() == {"id": "abc", "name": "Pen", "price": 1.5, "stock": 2}
        assert str(product) == 'Product(id=abc, name="Pen", price=1.5, stock=2)'

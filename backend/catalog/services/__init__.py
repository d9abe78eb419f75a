"""
Service Layer - use cases and the product service facade
"""
from catalog.services.create_product_use_case import CreateProductUseCase
from catalog.services.get_products_use_case import GetProductsUseCase
from catalog.services.product_service import ProductService

__all__ = ['CreateProductUseCase', 'GetProductsUseCase', 'ProductService']

"""
Modelos de base de datos
"""
from .product import ProductModel

__all__ = [
    "ProductModel",
]

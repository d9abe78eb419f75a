"""
Product filtering and sorting
"""
from typing import List, Sequence

from storefront.models import Product, ProductFilters
from storefront.utils.text_utils import normalize_text


def filter_products(products: Sequence[Product], filters: ProductFilters) -> List[Product]:
    """
    Keep products matching the search term and the price range

    Name matching is a substring test on normalized text; the price range
    is inclusive on both ends.
    """
    normalized_search = normalize_text(filters.search_term)
    min_price, max_price = filters.price_range

    return [
        product for product in products
        if normalized_search in normalize_text(product.name)
        and min_price <= product.price <= max_price
    ]


def sort_products_by_price(products: Sequence[Product], is_ascending: bool) -> List[Product]:
    """Return a new list sorted by price; the input is left untouched"""
    return sorted(products, key=lambda product: product.price, reverse=not is_ascending)


def filter_and_sort_products(products: Sequence[Product], filters: ProductFilters) -> List[Product]:
    """Filter then sort in one call"""
    filtered = filter_products(products, filters)
    return sort_products_by_price(filtered, filters.is_ascending)

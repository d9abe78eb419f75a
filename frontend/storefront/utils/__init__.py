"""
Storefront utilities
"""
from storefront.utils.product_utils import filter_and_sort_products, filter_products, sort_products_by_price
from storefront.utils.text_utils import highlight_search_term, normalize_text

__all__ = [
    'filter_products',
    'sort_products_by_price',
    'filter_and_sort_products',
    'normalize_text',
    'highlight_search_term',
]

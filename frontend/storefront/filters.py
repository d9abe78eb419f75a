"""
Filter state for the product catalog view
"""
from typing import List, Optional, Sequence, Tuple

from storefront.constants import PRICE_RANGE, SORT_OPTIONS
from storefront.models import FilterStats, Product, ProductFilters
from storefront.utils.product_utils import filter_and_sort_products


class ProductFilterState:
    """
    Holds search term, price range and sort direction for one session
    and derives the visible product list from them.

    The derived list is recomputed only when an input changes.
    """

    def __init__(self, products: Sequence[Product] = ()):
        self._products: List[Product] = list(products)
        self.search_term = ""
        self.price_range: Tuple[float, float] = PRICE_RANGE['DEFAULT']
        self.is_ascending = SORT_OPTIONS['ASCENDING']

        self._cache_key: Optional[ProductFilters] = None
        self._cached: List[Product] = []

    @property
    def products(self) -> List[Product]:
        return list(self._products)

    def set_products(self, products: Sequence[Product]) -> None:
        self._products = list(products)
        self._cache_key = None

    @property
    def filters(self) -> ProductFilters:
        return ProductFilters(
            search_term=self.search_term,
            price_range=self.price_range,
            is_ascending=self.is_ascending,
        )

    def update_search_term(self, term: str) -> None:
        self.search_term = term

    def update_price_range(self, price_range: Tuple[float, float]) -> None:
        min_price, max_price = price_range
        if min_price > max_price:
            raise ValueError(f"Invalid price range: min {min_price} is greater than max {max_price}")
        self.price_range = (min_price, max_price)

    def update_sort_order(self, is_ascending: bool) -> None:
        self.is_ascending = is_ascending

    def clear_filters(self) -> None:
        """Reset search and price range; the sort direction is kept"""
        self.search_term = ""
        self.price_range = PRICE_RANGE['DEFAULT']

    @property
    def filtered_products(self) -> List[Product]:
        filters = self.filters
        if filters != self._cache_key:
            self._cached = filter_and_sort_products(self._products, filters)
            self._cache_key = filters
        return list(self._cached)

    @property
    def total_products(self) -> int:
        return len(self._products)

    @property
    def has_active_filters(self) -> bool:
        return (
            self.search_term.strip() != ""
            or self.price_range[0] != PRICE_RANGE['MIN']
            or self.price_range[1] != PRICE_RANGE['MAX']
        )

    def stats(self) -> FilterStats:
        return FilterStats(
            filtered_count=len(self.filtered_products),
            total_count=self.total_products,
            search_term=self.search_term,
        )

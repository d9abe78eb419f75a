"""
Catalog API client

Reads fall back to the bundled dataset whenever the API cannot answer;
writes raise ProductCreateError so the caller can show the problem and
keep the form data.
"""
import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

import httpx
from pydantic import ValidationError

from storefront.constants import (
    DEFAULT_API_URL,
    QUERY_RETRIES,
    QUERY_STALE_TIME_SECONDS,
    REQUEST_TIMEOUT_SECONDS,
)
from storefront.models import Product

logger = logging.getLogger(__name__)

FALLBACK_DATA_PATH = Path(__file__).parent / "data" / "product-mock.json"


class ProductCreateError(Exception):
    """The API refused (or never received) a create-product request"""

    def __init__(self, code: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


def load_fallback_products(path: Path = FALLBACK_DATA_PATH) -> List[Product]:
    """Read the bundled product dataset"""
    with open(path, 'r', encoding='utf-8') as f:
        return [Product.model_validate(item) for item in json.load(f)]


def merge_products(api_products: Sequence[Product], fallback_products: Sequence[Product]) -> List[Product]:
    """
    API products first, then fallback products whose id the API did not return

    Ids are compared as strings (the API uses UUIDs, the dataset integers).
    """
    api_ids = {str(product.id) for product in api_products}
    merged = list(api_products)
    merged.extend(product for product in fallback_products if str(product.id) not in api_ids)
    return merged


class ProductApiClient:
    """
    Async client for the Catalog API

    Args:
        base_url: API base including /api (default http://localhost:3000/api)
        timeout: Request timeout in seconds
        retries: Extra attempts for a failed read before falling back
        fallback_products: Dataset used when the API is unavailable
            (default: bundled product-mock.json)
        transport: Optional httpx transport (tests use httpx.MockTransport)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        retries: int = QUERY_RETRIES,
        fallback_products: Optional[Sequence[Product]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.retries = retries
        self.transport = transport
        self._fallback_products = list(fallback_products) if fallback_products is not None else None

    @property
    def fallback_products(self) -> List[Product]:
        if self._fallback_products is None:
            self._fallback_products = load_fallback_products()
        return list(self._fallback_products)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
            headers={'Content-Type': 'application/json'}
        )

    async def fetch_api_products(self) -> List[Product]:
        """
        GET /products straight from the API

        Raises:
            httpx.HTTPError: Network failure or non-2xx status
            ValueError: Body is not a list of products
        """
        async with self._client() as client:
            response = await client.get('/products')
            response.raise_for_status()

            data = response.json()
            if not isinstance(data, list):
                raise ValueError(f"Expected a list of products, got {type(data).__name__}")

            return [Product.model_validate(item) for item in data]

    async def get_products(self) -> List[Product]:
        """
        Products from the API merged with the fallback dataset

        Never raises for API problems: after 1 + retries failed attempts the
        fallback dataset alone is returned.
        """
        attempts = 1 + self.retries

        for attempt in range(1, attempts + 1):
            try:
                api_products = await self.fetch_api_products()
            except (httpx.HTTPError, ValueError) as e:
                logger.warning(f"API not available (attempt {attempt}/{attempts}): {e}")
                continue

            logger.info(f"Fetched {len(api_products)} products from the API")
            merged = merge_products(api_products, self.fallback_products)
            logger.debug(f"Combined catalog: {len(merged)} products")
            return merged

        logger.info("Using bundled fallback products only")
        return self.fallback_products

    async def create_product(self, product_data: Dict[str, Any]) -> Product:
        """
        POST /products

        Args:
            product_data: Dict with name, price and stock

        Returns:
            Created product as returned by the API

        Raises:
            ProductCreateError: API error body (code/message) or NETWORK_ERROR
        """
        try:
            async with self._client() as client:
                response = await client.post('/products', json=product_data)
        except httpx.HTTPError as e:
            raise ProductCreateError("NETWORK_ERROR", f"Could not reach the catalog API: {e}") from e

        if response.is_error:
            raise self._error_from_response(response)

        try:
            product = Product.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ProductCreateError(
                "INVALID_RESPONSE",
                f"Unexpected response from the catalog API: {e}",
                response.status_code
            ) from e

        logger.info(f"Product created in API: {product.name} ({product.id})")
        return product

    @staticmethod
    def _error_from_response(response: httpx.Response) -> ProductCreateError:
        try:
            body = response.json()
        except ValueError:
            body = {}

        if not isinstance(body, dict):
            body = {}

        return ProductCreateError(
            body.get('code') or "HTTP_ERROR",
            body.get('message') or f"Catalog API answered {response.status_code}",
            response.status_code
        )


class ProductQuery:
    """
    Cached product list with a staleness window

    fetch() reuses the last result while it is fresh; invalidate() forces
    the next fetch to reload (call it after a successful create).
    """

    def __init__(
        self,
        client: ProductApiClient,
        stale_time: float = QUERY_STALE_TIME_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        self.client = client
        self.stale_time = stale_time
        self._clock = clock
        self._data: Optional[List[Product]] = None
        self._fetched_at: Optional[float] = None

    @property
    def is_stale(self) -> bool:
        if self._data is None or self._fetched_at is None:
            return True
        return self._clock() - self._fetched_at >= self.stale_time

    async def fetch(self, force: bool = False) -> List[Product]:
        if force or self.is_stale:
            self._data = await self.client.get_products()
            self._fetched_at = self._clock()
        return list(self._data)

    def invalidate(self) -> None:
        self._fetched_at = None

    async def create(self, product_data: Dict[str, Any]) -> Product:
        """Create through the client and mark the cached list stale"""
        product = await self.client.create_product(product_data)
        self.invalidate()
        return product

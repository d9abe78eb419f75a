"""
Pytest fixtures for the storefront tests
"""
import httpx
import pytest

from storefront.api import ProductApiClient
from storefront.models import Product


@pytest.fixture
def products():
    return [
        Product(id=1, name="Lápiz Grafito HB", price=15),
        Product(id=2, name="Taza de Cerámica", price=22),
        Product(id=3, name="Café de Especialidad", price=32.5),
        Product(id=4, name="Lámpara LED", price=52),
        Product(id=5, name="Mochila Ergonómica", price=65),
    ]


@pytest.fixture
def fallback_products():
    return [
        Product(id=1, name="Cuaderno", price=18.5),
        Product(id=2, name="Agenda", price=35),
    ]


class RecordingHandler:
    """httpx.MockTransport handler answering from a queue of responses"""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def make_client(fallback_products):
    """Build a ProductApiClient whose requests go to a RecordingHandler"""
    def _make(*responses, retries=1):
        handler = RecordingHandler(*responses)
        client = ProductApiClient(
            base_url="http://catalog.test/api",
            retries=retries,
            fallback_products=fallback_products,
            transport=httpx.MockTransport(handler),
        )
        return client, handler
    return _make

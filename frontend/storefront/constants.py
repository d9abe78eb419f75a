"""
Constants for product filters and the API client
"""

PRICE_RANGE = {
    'MIN': 15,
    'MAX': 65,
    'DEFAULT': (15, 65),
}

SEARCH_CONFIG = {
    'PLACEHOLDER': 'Search product...',
    'MIN_SEARCH_LENGTH': 0,
}

SORT_OPTIONS = {
    'ASCENDING': True,
    'DESCENDING': False,
}

DEFAULT_API_URL = "http://localhost:3000/api"

# Client query layer
QUERY_STALE_TIME_SECONDS = 5 * 60
QUERY_RETRIES = 1
REQUEST_TIMEOUT_SECONDS = 10.0

"""
Storefront configuration from environment variables / .env
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from storefront.constants import DEFAULT_API_URL, QUERY_STALE_TIME_SECONDS, REQUEST_TIMEOUT_SECONDS


@dataclass
class StorefrontConfig:
    """Settings for the storefront client and CLI"""

    api_url: str = DEFAULT_API_URL
    timeout: float = REQUEST_TIMEOUT_SECONDS
    stale_time: float = QUERY_STALE_TIME_SECONDS

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> 'StorefrontConfig':
        """
        Create configuration from environment variables

        CATALOG_API_URL, CATALOG_API_TIMEOUT and CATALOG_STALE_TIME are read
        after loading .env (or env_file when given).

        Raises:
            ValueError: If a numeric setting is not a number
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        timeout = os.getenv('CATALOG_API_TIMEOUT', str(REQUEST_TIMEOUT_SECONDS))
        stale_time = os.getenv('CATALOG_STALE_TIME', str(QUERY_STALE_TIME_SECONDS))

        try:
            return cls(
                api_url=os.getenv('CATALOG_API_URL', DEFAULT_API_URL),
                timeout=float(timeout),
                stale_time=float(stale_time),
            )
        except ValueError as e:
            raise ValueError(f"Invalid storefront configuration: {e}") from e

"""
External Request Manager for unified HTTP request handling.

This module provides a centralized manager for all outbound HTTP requests
(indexer lookups, metadata documents, media) with proxy configuration,
retry logic and timing logs.
"""

import time
from typing import Any, Optional

import requests
from loguru import logger
from requests.adapters import HTTPAdapter
from requests.exceptions import RequestException, Timeout
from urllib3.util.retry import Retry

from ..settings import Settings


class ExternalRequestManager:
    """
    Unified manager for all HTTP requests with proper proxy configuration.

    Features:
    - One pooled session with retries on transient status codes
    - Optional proxy configuration
    - Unified timeout and error handling
    - Request timing logs
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the request manager.

        Args:
            settings: Application settings (optional, will create default if not provided)
        """
        self.settings = settings or Settings()
        self.session = requests.Session()
        self._configure_session()

        logger.info("ExternalRequestManager initialized")

    def _configure_session(self):
        """Configure the session with retries, proxies and headers."""
        retry_strategy = Retry(
            total=self.settings.external_api_max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["HEAD", "GET", "OPTIONS"],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        proxy_dict = self.settings.get_proxy_dict()
        if proxy_dict:
            self.session.proxies = proxy_dict
            logger.info(f"Session configured with proxy: {proxy_dict}")
        else:
            self.session.proxies = {"http": "", "https": ""}

        self.session.headers.update(
            {
                "User-Agent": "NFT Viewer Backend/0.2",
                "Accept": "application/json, */*;q=0.8",
            },
        )

    def request(
        self,
        method: str,
        url: str,
        timeout: Optional[int] = None,
        **kwargs: Any,
    ) -> requests.Response:
        """
        Make an HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Request URL
            timeout: Request timeout in seconds
            **kwargs: Additional arguments passed to requests

        Returns:
            Response object

        Raises:
            RequestException: If request fails after retries
        """
        request_timeout = timeout or self.settings.external_api_timeout

        start_time = time.time()

        try:
            logger.debug(f"Making {method} request to {url}")
            response = self.session.request(
                method=method,
                url=url,
                timeout=request_timeout,
                **kwargs,
            )

            elapsed_time = time.time() - start_time
            logger.debug(f"{method} {url} -> {response.status_code} ({elapsed_time:.2f}s)")

            response.raise_for_status()
            return response

        except Timeout as e:
            elapsed_time = time.time() - start_time
            logger.error(f"{method} {url} -> TIMEOUT after {elapsed_time:.2f}s")
            raise RequestException(f"Request timeout after {elapsed_time:.2f}s") from e

        except RequestException as e:
            elapsed_time = time.time() - start_time
            logger.error(f"{method} {url} -> ERROR after {elapsed_time:.2f}s: {e}")
            raise

    def get(
        self,
        url: str,
        timeout: Optional[int] = None,
        **kwargs: Any,
    ) -> requests.Response:
        """Convenience method for GET requests."""
        return self.request("GET", url, timeout, **kwargs)

    def close(self) -> None:
        self.session.close()

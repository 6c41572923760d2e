"""
Web Client for handling HTTP requests to playoverwatch.com
"""

import requests
import time
import random
import logging
from typing import Any, Tuple

from overwatch_crawler.config.settings import DEFAULT_HEADERS, DEFAULT_DELAY_RANGE, REQUEST_TIMEOUT
from overwatch_crawler.core.errors import error_for

class WebClient:
    """Fetches career pages and search results, failures are raised once and never retried"""

    def __init__(self, delay_range: Tuple[float, float] = DEFAULT_DELAY_RANGE):
        """
        Initialize Web Client with configurable delay range.

        Args:
            delay_range: Min and max seconds to wait before each request
        """
        self.session = requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
        self.delay_range = delay_range

    def get_page(self, url: str) -> requests.Response:
        """
        Get a page, raising an OverwatchError subclass on failure.

        Args:
            url: URL to fetch

        Returns:
            requests.Response with status 200

        Raises:
            ProfileNotFound: on HTTP 404
            StructureChanged: on HTTP 5xx
            UnclassifiedFailure: on any other status or transport error
        """
        if self.delay_range and max(self.delay_range) > 0:
            time.sleep(random.uniform(*self.delay_range))

        try:
            response = self.session.get(url, timeout=REQUEST_TIMEOUT)
        except requests.exceptions.Timeout as e:
            logging.warning(f"Timeout for URL: {url}")
            raise error_for(None, url, 'timeout') from e
        except requests.exceptions.RequestException as e:
            logging.warning(f"Request error for URL: {url}: {e}")
            raise error_for(None, url, str(e)) from e

        if response.status_code != 200:
            logging.warning(f"HTTP {response.status_code} for URL: {url}")
            raise error_for(response.status_code, url)

        return response

    def get_json(self, url: str) -> Any:
        """Get a JSON document, a body that isn't JSON counts as an unclassified failure"""
        response = self.get_page(url)
        try:
            return response.json()
        except ValueError as e:
            logging.warning(f"Invalid JSON from URL: {url}")
            raise error_for(response.status_code, url, 'invalid JSON body') from e

    def close(self):
        """Close the underlying session"""
        self.session.close()

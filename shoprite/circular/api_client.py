"""
RedPepper API Client

Read-only client for the RedPepper Digital endpoints that host ShopRite's
circulars: the store geo-location listing, catalogue node metadata and the
catalogue page-image list.
"""

import logging
from typing import Any, Optional

import requests

from ..common import constants

logger = logging.getLogger(__name__)


class RedPepperClient:
    """
    JSON client for app.redpepper.digital.

    Every failure (HTTP error status, transport error, bad JSON) is logged
    and returned as None. Nothing is retried.

    Usage:
        with RedPepperClient() as client:
            locations = client.fetch_json(client.geo_location_url())
    """

    def __init__(
        self,
        client_id: str = constants.REDPEPPER_CLIENT_ID,
        base_url: str = constants.REDPEPPER_BASE_URL,
        timeout: int = constants.REQUEST_TIMEOUT,
        user_agent: str = constants.CIRCULAR_USER_AGENT,
    ):
        """
        Args:
            client_id: RedPepper client ID (ShopRite is 4573)
            base_url: API host
            timeout: Per-request timeout in seconds
            user_agent: User-Agent header sent with every request
        """
        self.client_id = client_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": user_agent,
        })

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def geo_location_url(self) -> str:
        return f"{self.base_url}/client/{self.client_id}/catalogue/geo_location/json?_format=json"

    def pages_url(self, catalogue_id: str) -> str:
        return f"{self.base_url}/catalogue/{catalogue_id}/page-images/json?_format=json"

    def metadata_url(self, catalogue_id: str) -> str:
        return f"{self.base_url}/node/{catalogue_id}?_format=json"

    def fetch_json(self, url: str) -> Optional[Any]:
        """
        GET a URL and decode its JSON body.

        Returns:
            Decoded JSON, or None on any error
        """
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout:
            logger.error("Request timeout: %s", url)
            return None
        except requests.exceptions.RequestException as e:
            logger.error("Error fetching %s: %s", url, e)
            return None

        if response.status_code >= 400:
            logger.error("HTTP error fetching %s: %d", url, response.status_code)
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error("Invalid JSON from %s: %s", url, e)
            return None

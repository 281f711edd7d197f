"""
Preloaded State Parser

Extracts the Redux store snapshot that ShopRite category pages embed for
client-side hydration:

    <script>window.__PRELOADED_STATE__ = {"departments": {...}, ...};</script>

The snapshot carries the page's product cards (productCardDictionary) and the
subcategory listing (departments.subCategory).
"""

import json
import logging
import re
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class PreloadedStateParser:
    """
    Parses window.__PRELOADED_STATE__ out of a page.

    Usage:
        parser = PreloadedStateParser()
        state = parser.parse(html)
        if state is None:
            ...  # page layout changed or the blob is corrupt
    """

    MARKER = "window.__PRELOADED_STATE__"

    # Matched against a single <script> body
    SCRIPT_PATTERN = re.compile(
        r'window\.__PRELOADED_STATE__\s*=\s*(\{.+?\});?\s*$', re.DOTALL
    )
    # Matched against raw HTML when the script body can't be isolated
    HTML_PATTERN = re.compile(
        r'window\.__PRELOADED_STATE__\s*=\s*(\{.+?\});?\s*</script>', re.DOTALL
    )

    def parse(self, html: str) -> Optional[Dict[str, Any]]:
        """
        Extract and decode the preloaded state.

        Args:
            html: Raw HTML string of the category page

        Returns:
            Decoded state object, or None if the marker is missing
            or the JSON is invalid
        """
        if not html or self.MARKER not in html:
            logger.error("No %s found in page", self.MARKER)
            return None

        json_str = self._find_in_scripts(html)
        if json_str is None:
            match = self.HTML_PATTERN.search(html)
            if not match:
                logger.error("Could not isolate %s object", self.MARKER)
                return None
            json_str = match.group(1)

        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            logger.error("Error parsing preloaded state: %s", e)
            return None

        if not isinstance(data, dict):
            logger.error("Preloaded state is not an object")
            return None

        return data

    def _find_in_scripts(self, html: str) -> Optional[str]:
        soup = BeautifulSoup(html, 'html.parser')
        for script in soup.find_all('script'):
            text = script.string
            if not text or self.MARKER not in text:
                continue
            match = self.SCRIPT_PATTERN.search(text)
            if match:
                return match.group(1)
        return None

"""Finding API client: keyword search and sold-item search."""

import httpx
import logging
import os
from typing import Callable, Optional, Union

from dotenv import load_dotenv

from .decoder import XML_DECODER, ResponseDecoder, decode_response
from .errors import TransportError
from .models import SearchResult
from .options import GlobalId, Option
from .urls import FINDING_API_URL, build_search_url, build_sold_url


load_dotenv()
logger = logging.getLogger(__name__)


USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_7_3) AppleWebKit/535.11 "
    "(KHTML, like Gecko) Chrome/17.0.963.56 Safari/535.11"
)


class FindingClient:
    """Client for the eBay Finding API."""

    def __init__(
        self,
        app_id: Optional[str] = None,
        timeout: float = 30.0,
        http_client: Optional[httpx.Client] = None,
        decoder: ResponseDecoder = XML_DECODER,
        base_url: str = FINDING_API_URL,
    ):
        self.app_id = app_id or os.getenv("EBAY_APPLICATION_ID")

        if not self.app_id:
            raise ValueError("EBAY_APPLICATION_ID must be set")

        self.base_url = base_url
        self.decoder = decoder
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)

    def _get(self, url: str) -> tuple[bytes, int]:
        """Issue the GET request and return ``(body, status_code)``."""
        try:
            response = self._client.get(url, headers={"User-Agent": USER_AGENT})
        except httpx.HTTPError as e:
            logger.warning(f"HTTP error fetching Finding API: {e}")
            raise TransportError(f"Request failed: {e}") from e
        return response.content, response.status_code

    def _find(
        self,
        build: Callable[..., str],
        global_id: Union[GlobalId, str],
        keywords: str,
        options: tuple[Option, ...],
    ) -> SearchResult:
        url = build(self.app_id, global_id, keywords, *options, base_url=self.base_url)
        logger.info(f"Querying Finding API for {keywords!r}")
        body, status_code = self._get(url)
        return decode_response(status_code, body, self.decoder)

    def search(
        self,
        global_id: Union[GlobalId, str],
        keywords: str,
        *options: Option,
    ) -> SearchResult:
        """Search active listings by keywords.

        Args:
            global_id: Marketplace, e.g. GlobalId.EBAY_US
            keywords: Search keywords
            *options: Request options such as page_size(10), page_number(2)

        Returns:
            SearchResult for the requested page
        """
        return self._find(build_search_url, global_id, keywords, options)

    def find_sold_items(
        self,
        global_id: Union[GlobalId, str],
        keywords: str,
        *options: Option,
    ) -> SearchResult:
        """Search completed listings that sold, in used or unspecified condition."""
        return self._find(build_sold_url, global_id, keywords, options)

    def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "FindingClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

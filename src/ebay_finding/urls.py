"""Query URL builders for the two Finding API operations."""

import logging
from typing import Union
from urllib.parse import urlencode, urlsplit

from .errors import ConfigError
from .filters import FilterAccumulator
from .options import GlobalId, Option, enum_value


logger = logging.getLogger(__name__)

FINDING_API_URL = "http://svcs.ebay.com/services/search/FindingService/v1"
SERVICE_VERSION = "1.0.0"

SEARCH_OPERATION = "findItemsByKeywords"
SOLD_OPERATION = "findCompletedItems"


def _check_endpoint(base_url: str) -> str:
    parts = urlsplit(base_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigError(f"Invalid Finding API endpoint: {base_url!r}")
    return base_url


def build_url(
    operation: str,
    app_id: str,
    global_id: Union[GlobalId, str],
    keywords: str,
    filters: FilterAccumulator,
    base_url: str = FINDING_API_URL,
) -> str:
    """Merge protocol parameters with ``filters`` and encode the full URL."""
    endpoint = _check_endpoint(base_url)

    params = [
        ("OPERATION-NAME", operation),
        ("SERVICE-VERSION", SERVICE_VERSION),
        ("SECURITY-APPNAME", app_id),
        ("GLOBAL-ID", enum_value(global_id)),
        ("RESPONSE-DATA-FORMAT", "XML"),
        ("REST-PAYLOAD", ""),
        ("keywords", keywords),
    ]
    params.extend(filters.items())

    logger.debug(f"Built {operation} URL with {len(filters)} filter params")
    return f"{endpoint}?{urlencode(params)}"


def build_search_url(
    app_id: str,
    global_id: Union[GlobalId, str],
    keywords: str,
    *options: Option,
    base_url: str = FINDING_API_URL,
) -> str:
    """Build a keyword search URL over all listing types, with seller info."""
    filters = FilterAccumulator()
    filters.add_item_filter("ListingType", "FixedPrice", "AuctionWithBIN", "Auction")
    filters.add_output_selector("SellerInfo")

    for option in options:
        option(filters)

    return build_url(SEARCH_OPERATION, app_id, global_id, keywords, filters, base_url)


def build_sold_url(
    app_id: str,
    global_id: Union[GlobalId, str],
    keywords: str,
    *options: Option,
    base_url: str = FINDING_API_URL,
) -> str:
    """Build a completed-items URL restricted to sold, used listings."""
    filters = FilterAccumulator()
    filters.add_item_filter("Condition", "Used", "Unspecified")
    filters.add_item_filter("SoldItemsOnly", "true")

    for option in options:
        option(filters)

    return build_url(SOLD_OPERATION, app_id, global_id, keywords, filters, base_url)

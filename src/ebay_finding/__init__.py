from .client import FindingClient
from .decoder import ResponseDecoder, XmlResponseDecoder, decode_response
from .errors import ConfigError, DecodeError, FindingError, ProviderError, TransportError
from .filters import FilterAccumulator
from .models import ApiError, Item, SearchResult, Seller
from .options import (
    GlobalId,
    SortOrder,
    max_price,
    min_price,
    page_number,
    page_size,
    sort_order,
)
from .urls import build_search_url, build_sold_url

__all__ = [
    "FindingClient",
    "ResponseDecoder",
    "XmlResponseDecoder",
    "decode_response",
    "ConfigError",
    "DecodeError",
    "FindingError",
    "ProviderError",
    "TransportError",
    "FilterAccumulator",
    "ApiError",
    "Item",
    "SearchResult",
    "Seller",
    "GlobalId",
    "SortOrder",
    "max_price",
    "min_price",
    "page_number",
    "page_size",
    "sort_order",
    "build_search_url",
    "build_sold_url",
]

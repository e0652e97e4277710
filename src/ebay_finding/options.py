"""Composable request options and Finding API constants."""

from enum import Enum
from typing import Callable, Union

from .filters import FilterAccumulator


Option = Callable[[FilterAccumulator], None]


class GlobalId(str, Enum):
    """Marketplace identifiers. Other ids may be passed as plain strings."""

    EBAY_US = "EBAY-US"
    EBAY_FR = "EBAY-FR"
    EBAY_DE = "EBAY-DE"
    EBAY_IT = "EBAY-IT"
    EBAY_ES = "EBAY-ES"


class SortOrder(str, Enum):
    """Result orderings accepted by the Finding API."""

    DEFAULT = ""
    BEST_MATCH = "BestMatch"
    BID_COUNT_FEWEST = "BidCountFewest"
    BID_COUNT_MOST = "BidCountMost"
    COUNTRY_ASCENDING = "CountryAscending"
    COUNTRY_DESCENDING = "CountryDescending"
    CURRENT_PRICE_HIGHEST = "CurrentPriceHighest"
    DISTANCE_NEAREST = "DistanceNearest"
    END_TIME_SOONEST = "EndTimeSoonest"
    PRICE_PLUS_SHIPPING_HIGHEST = "PricePlusShippingHighest"
    PRICE_PLUS_SHIPPING_LOWEST = "PricePlusShippingLowest"
    START_TIME_NEWEST = "StartTimeNewest"


def enum_value(value: Union[str, Enum]) -> str:
    """Return the wire value of an enum member, or the string unchanged."""
    if isinstance(value, Enum):
        return value.value
    return str(value)


def sort_order(value: Union[SortOrder, str]) -> Option:
    """Request an ordering. Unknown values are sent as-is."""

    def apply(filters: FilterAccumulator) -> None:
        # Always sent, the empty DEFAULT asks the API for its own ordering
        filters.add("sortOrder", enum_value(value))

    return apply


def page_number(number: int) -> Option:
    """Select a result page (1-indexed). Values <= 0 leave it unset."""

    def apply(filters: FilterAccumulator) -> None:
        if number > 0:
            filters.add("paginationInput.pageNumber", number)

    return apply


def page_size(size: int) -> Option:
    """Set entries per page. Values <= 0 leave it unset."""

    def apply(filters: FilterAccumulator) -> None:
        if size > 0:
            filters.add("paginationInput.entriesPerPage", size)

    return apply


def min_price(price: float) -> Option:
    """Filter on minimum price. Emitted for every value, including zero."""

    def apply(filters: FilterAccumulator) -> None:
        filters.add_item_filter("MinPrice", price)

    return apply


def max_price(price: float) -> Option:
    """Filter on maximum price. Values <= 0 leave it unset."""

    def apply(filters: FilterAccumulator) -> None:
        if price > 0:
            filters.add_item_filter("MaxPrice", price)

    return apply

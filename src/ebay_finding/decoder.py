"""Decoding of Finding API response bodies into results or errors."""

import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Union
from xml.etree import ElementTree as ET

from .errors import DecodeError, ProviderError
from .models import ApiError, Item, SearchResult, Seller


logger = logging.getLogger(__name__)

Body = Union[str, bytes]


class ResponseDecoder(ABC):
    """Turns a response body into a result or an API error for one format."""

    @abstractmethod
    def decode_result(self, body: Body) -> SearchResult:
        """Decode a success envelope. Raises DecodeError on mismatch."""

    @abstractmethod
    def decode_error(self, body: Body) -> ApiError:
        """Decode an error envelope. Raises DecodeError on mismatch."""


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _strip_namespaces(root: ET.Element) -> ET.Element:
    # Responses carry a default namespace; paths below are written without it
    for elem in root.iter():
        elem.tag = _local(elem.tag)
    return root


def _text(elem: ET.Element, path: str) -> str:
    found = elem.find(path)
    if found is None or found.text is None:
        return ""
    return found.text.strip()


def _float(elem: ET.Element, path: str) -> float:
    text = _text(elem, path)
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        raise DecodeError(f"Invalid number in <{path}>: {text!r}")


def _int(elem: ET.Element, path: str) -> int:
    text = _text(elem, path)
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        raise DecodeError(f"Invalid integer in <{path}>: {text!r}")


_FRACTION = re.compile(r"\.(\d+)")


def _datetime(elem: ET.Element, path: str) -> Optional[datetime]:
    text = _text(elem, path)
    if not text:
        return None
    # ISO format: 2024-01-15T14:30:00.000Z, fraction may have any number of digits
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise DecodeError(f"Invalid timestamp in <{path}>: {text!r}")


class XmlResponseDecoder(ResponseDecoder):
    """Decoder for RESPONSE-DATA-FORMAT=XML bodies."""

    def _parse(self, body: Body) -> ET.Element:
        try:
            root = ET.fromstring(body)
        except ET.ParseError as e:
            raise DecodeError(f"Malformed XML: {e}")
        return _strip_namespaces(root)

    def _parse_error(self, error: ET.Element) -> ApiError:
        return ApiError(
            error_id=_text(error, "errorId"),
            domain=_text(error, "domain"),
            severity=_text(error, "severity"),
            category=_text(error, "category"),
            message=_text(error, "message"),
            subdomain=_text(error, "subdomain"),
        )

    def _parse_item(self, item: ET.Element) -> Item:
        # convertedCurrentPrice is in the marketplace currency, prefer it
        price_path = "sellingStatus/convertedCurrentPrice"
        if item.find(price_path) is None:
            price_path = "sellingStatus/currentPrice"

        seller = Seller(
            username=_text(item, "sellerInfo/sellerUserName"),
            feedback_score=_int(item, "sellerInfo/feedbackScore"),
            feedback_percent=_float(item, "sellerInfo/positiveFeedbackPercent"),
        )

        return Item(
            item_id=_text(item, "itemId"),
            title=_text(item, "title"),
            location=_text(item, "location"),
            current_price=_float(item, price_path),
            shipping_price=_float(item, "shippingInfo/shippingServiceCost"),
            buy_it_now_price=_float(item, "listingInfo/buyItNowPrice"),
            ships_to=tuple(
                loc.text.strip()
                for loc in item.findall("shippingInfo/shipToLocations")
                if loc.text
            ),
            listing_url=_text(item, "viewItemURL"),
            image_url=_text(item, "galleryURL"),
            site=_text(item, "globalId"),
            end_time=_datetime(item, "listingInfo/endTime"),
            seller=seller,
        )

    def decode_result(self, body: Body) -> SearchResult:
        root = self._parse(body)
        if not root.tag.endswith("Response"):
            raise DecodeError(f"Unexpected response root <{root.tag}>")

        return SearchResult(
            items=tuple(self._parse_item(item) for item in root.findall("searchResult/item")),
            timestamp=_datetime(root, "timestamp"),
            page_number=_int(root, "paginationOutput/pageNumber"),
            total_pages=_int(root, "paginationOutput/totalPages"),
            total_entries=_int(root, "paginationOutput/totalEntries"),
        )

    def decode_error(self, body: Body) -> ApiError:
        root = self._parse(body)
        error = root.find("error")
        if root.tag != "errorMessage" or error is None:
            raise DecodeError(f"Unexpected error envelope <{root.tag}>")
        return self._parse_error(error)


XML_DECODER = XmlResponseDecoder()


def decode_response(
    status_code: int,
    body: Body,
    decoder: ResponseDecoder = XML_DECODER,
) -> SearchResult:
    """Decode a response body according to its HTTP status.

    Args:
        status_code: HTTP status of the response
        body: Raw response body
        decoder: Format-specific decoder (XML by default)

    Returns:
        SearchResult for a 200 response

    Raises:
        ProviderError: The body is a well-formed API error
        DecodeError: The body does not match the envelope expected for the status
    """
    try:
        if status_code == 200:
            result = decoder.decode_result(body)
            logger.info(
                f"Parsed {len(result.items)} items, "
                f"page {result.page_number}/{result.total_pages}"
            )
            return result
        error = decoder.decode_error(body)
    except DecodeError as e:
        logger.error(f"Failed to decode HTTP {status_code} response: {e.message}")
        raise DecodeError(e.message, status_code) from e

    logger.warning(f"eBay API error (HTTP {status_code}): {error.message}")
    raise ProviderError(error, status_code)

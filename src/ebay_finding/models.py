"""Typed results decoded from Finding API responses."""

import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, TextIO


@dataclass(frozen=True)
class Seller:
    """Seller block embedded in an item when SellerInfo is selected."""

    username: str = ""
    feedback_score: int = 0
    feedback_percent: float = 0.0

    def to_dict(self) -> dict:
        return {
            "username": self.username,
            "feedback_score": self.feedback_score,
            "feedback_percent": self.feedback_percent,
        }


@dataclass(frozen=True)
class Item:
    """Represents a single listing from a search result."""

    item_id: str = ""
    title: str = ""
    location: str = ""
    current_price: float = 0.0
    shipping_price: float = 0.0
    buy_it_now_price: float = 0.0
    ships_to: tuple[str, ...] = ()
    listing_url: str = ""
    image_url: str = ""
    site: str = ""
    end_time: Optional[datetime] = None
    seller: Seller = field(default_factory=Seller)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "item_id": self.item_id,
            "title": self.title,
            "location": self.location,
            "current_price": self.current_price,
            "shipping_price": self.shipping_price,
            "buy_it_now_price": self.buy_it_now_price,
            "ships_to": list(self.ships_to),
            "listing_url": self.listing_url,
            "image_url": self.image_url,
            "site": self.site,
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "seller": self.seller.to_dict(),
        }


@dataclass(frozen=True)
class SearchResult:
    """One decoded page of results."""

    items: tuple[Item, ...] = ()
    timestamp: Optional[datetime] = None
    page_number: int = 0
    total_pages: int = 0
    total_entries: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "page_number": self.page_number,
            "total_pages": self.total_pages,
            "total_entries": self.total_entries,
            "items": [item.to_dict() for item in self.items],
        }

    def dump(self, out: Optional[TextIO] = None) -> None:
        """Write a human-readable summary of the page."""
        out = out or sys.stdout
        timestamp = self.timestamp.isoformat() if self.timestamp else ""
        print("SearchResult", file=out)
        print("--------------------------", file=out)
        print(f"Timestamp: {timestamp}", file=out)
        print(f"Page: {self.page_number}/{self.total_pages} ({self.total_entries} entries)", file=out)
        print("Items:", file=out)
        print("------", file=out)
        for item in self.items:
            print(f"Title: {item.title}", file=out)
            print("------", file=out)
            print(f"\tListing Url:      {item.listing_url}", file=out)
            print(f"\tBuy-it-now Price: {item.buy_it_now_price}", file=out)
            print(f"\tCurrent Price:    {item.current_price}", file=out)
            print(f"\tShipping Price:   {item.shipping_price}", file=out)
            print(f"\tShips To:         {', '.join(item.ships_to)}", file=out)
            print(f"\tSeller Location:  {item.location}", file=out)
            print(
                f"\tSeller:           {item.seller.username} "
                f"({item.seller.feedback_score}, {item.seller.feedback_percent}%)",
                file=out,
            )
            print(file=out)


@dataclass(frozen=True)
class ApiError:
    """Error block reported by the API."""

    error_id: str = ""
    domain: str = ""
    severity: str = ""
    category: str = ""
    message: str = ""
    subdomain: str = ""

    def to_dict(self) -> dict:
        return {
            "error_id": self.error_id,
            "domain": self.domain,
            "severity": self.severity,
            "category": self.category,
            "message": self.message,
            "subdomain": self.subdomain,
        }

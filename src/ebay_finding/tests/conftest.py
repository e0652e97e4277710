"""Shared fixtures: canned Finding API response bodies."""
import pytest


SEARCH_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<findItemsByKeywordsResponse xmlns="http://www.ebay.com/marketplace/search/v1/services">
  <ack>Success</ack>
  <version>1.13.0</version>
  <timestamp>2024-01-15T14:30:00.000Z</timestamp>
  <searchResult count="2">
    <item>
      <itemId>110001</itemId>
      <title>Pioneer DJM 900 Nexus Mixer</title>
      <globalId>EBAY-US</globalId>
      <galleryURL>https://i.ebayimg.com/images/110001.jpg</galleryURL>
      <viewItemURL>https://www.ebay.com/itm/110001</viewItemURL>
      <location>Brooklyn,NY,USA</location>
      <sellerInfo>
        <sellerUserName>djgear</sellerUserName>
        <feedbackScore>1520</feedbackScore>
        <positiveFeedbackPercent>99.8</positiveFeedbackPercent>
      </sellerInfo>
      <shippingInfo>
        <shippingServiceCost currencyId="USD">25.0</shippingServiceCost>
        <shipToLocations>US</shipToLocations>
        <shipToLocations>CA</shipToLocations>
      </shippingInfo>
      <sellingStatus>
        <currentPrice currencyId="USD">1199.99</currentPrice>
        <convertedCurrentPrice currencyId="USD">1199.99</convertedCurrentPrice>
      </sellingStatus>
      <listingInfo>
        <buyItNowPrice currencyId="USD">1299.0</buyItNowPrice>
        <endTime>2024-01-20T18:00:00.000Z</endTime>
      </listingInfo>
    </item>
    <item>
      <itemId>110002</itemId>
      <title>Pioneer DJM 850 Mixer</title>
      <globalId>EBAY-US</globalId>
      <viewItemURL>https://www.ebay.com/itm/110002</viewItemURL>
      <location>Austin,TX,USA</location>
      <sellingStatus>
        <currentPrice currencyId="USD">650.5</currentPrice>
      </sellingStatus>
    </item>
  </searchResult>
  <paginationOutput>
    <pageNumber>1</pageNumber>
    <entriesPerPage>2</entriesPerPage>
    <totalPages>12</totalPages>
    <totalEntries>23</totalEntries>
  </paginationOutput>
</findItemsByKeywordsResponse>
"""

SOLD_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<findCompletedItemsResponse xmlns="http://www.ebay.com/marketplace/search/v1/services">
  <ack>Success</ack>
  <timestamp>2024-02-01T09:00:00.000Z</timestamp>
  <searchResult count="0"/>
  <paginationOutput>
    <pageNumber>1</pageNumber>
    <totalPages>0</totalPages>
    <totalEntries>0</totalEntries>
  </paginationOutput>
</findCompletedItemsResponse>
"""

ERROR_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<errorMessage xmlns="http://www.ebay.com/marketplace/search/v1/services">
  <error>
    <errorId>11002</errorId>
    <domain>Security</domain>
    <severity>Error</severity>
    <category>System</category>
    <message>Authentication failed : Invalid Application: bad-app-id</message>
    <subdomain>Authentication</subdomain>
  </error>
</errorMessage>
"""

FAILURE_ACK_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<findItemsByKeywordsResponse xmlns="http://www.ebay.com/marketplace/search/v1/services">
  <ack>Failure</ack>
  <errorMessage>
    <error>
      <errorId>3</errorId>
      <domain>Marketplace</domain>
      <severity>Error</severity>
      <category>Request</category>
      <message>Keywords value required.</message>
      <subdomain>Search</subdomain>
    </error>
  </errorMessage>
  <timestamp>2024-01-15T14:30:00.000Z</timestamp>
</findItemsByKeywordsResponse>
"""


@pytest.fixture
def search_response():
    return SEARCH_RESPONSE


@pytest.fixture
def sold_response():
    return SOLD_RESPONSE


@pytest.fixture
def error_response():
    return ERROR_RESPONSE


@pytest.fixture
def failure_ack_response():
    return FAILURE_ACK_RESPONSE

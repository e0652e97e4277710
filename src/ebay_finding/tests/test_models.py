"""Tests for result models."""
import dataclasses
import io
import json

import pytest

from ebay_finding.decoder import decode_response


def test_search_result_is_frozen(search_response):
    result = decode_response(200, search_response)

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.page_number = 2


def test_to_dict_is_json_serializable(search_response):
    data = decode_response(200, search_response).to_dict()

    assert json.loads(json.dumps(data)) == data
    assert data["timestamp"] == "2024-01-15T14:30:00+00:00"
    assert data["items"][0]["ships_to"] == ["US", "CA"]
    assert data["items"][0]["seller"]["username"] == "djgear"
    assert data["items"][1]["end_time"] is None


def test_dump_lists_every_item(search_response):
    out = io.StringIO()
    decode_response(200, search_response).dump(out)

    text = out.getvalue()
    assert "Timestamp: 2024-01-15T14:30:00+00:00" in text
    assert "Title: Pioneer DJM 900 Nexus Mixer" in text
    assert "Title: Pioneer DJM 850 Mixer" in text
    assert "Ships To:         US, CA" in text

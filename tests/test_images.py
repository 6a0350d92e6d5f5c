"""Tests for image data URI handling."""

import base64

import pytest

from app.core.errors import ValidationError
from app.services.images import decode_data_uri, parse_image_input, to_data_uri
from tests.conftest import PNG_BYTES, PNG_DATA_URI


def test_to_data_uri_is_self_describing():
    assert to_data_uri(PNG_BYTES, "image/png") == PNG_DATA_URI


def test_decode_data_uri_returns_bytes_and_mime():
    assert decode_data_uri(PNG_DATA_URI) == (PNG_BYTES, "image/png")


def test_decode_accepts_extra_parameters():
    uri = "data:image/svg+xml;charset=utf-8;base64," + base64.b64encode(b"<svg/>").decode()
    assert decode_data_uri(uri) == (b"<svg/>", "image/svg+xml")


def test_decode_rejects_non_base64_uri():
    with pytest.raises(ValidationError):
        decode_data_uri("data:image/png,rawpixels")


def test_decode_rejects_corrupt_payload():
    with pytest.raises(ValidationError):
        decode_data_uri("data:image/png;base64,@@not-base64@@")


@pytest.mark.parametrize("value", [None, "", "   "])
def test_empty_input_means_no_image(value):
    image = parse_image_input(value, max_bytes=1024)
    assert image.data is None
    assert image.mime is None
    assert image.url is None


def test_external_url_is_kept_as_link():
    image = parse_image_input("https://cdn.example.com/a.jpg", max_bytes=1024)
    assert image.url == "https://cdn.example.com/a.jpg"
    assert image.data is None
    assert image.mime is None


def test_data_uri_is_decoded_for_storage():
    image = parse_image_input(PNG_DATA_URI, max_bytes=1024)
    assert image.data == PNG_BYTES
    assert image.mime == "image/png"
    assert image.url is None


def test_non_image_mime_rejected():
    uri = "data:text/plain;base64," + base64.b64encode(b"hello").decode()
    with pytest.raises(ValidationError):
        parse_image_input(uri, max_bytes=1024)


def test_empty_payload_rejected():
    with pytest.raises(ValidationError):
        parse_image_input("data:image/png;base64,", max_bytes=1024)


def test_oversized_payload_rejected():
    with pytest.raises(ValidationError):
        parse_image_input(PNG_DATA_URI, max_bytes=len(PNG_BYTES) - 1)


def test_plain_text_rejected():
    with pytest.raises(ValidationError):
        parse_image_input("not an image", max_bytes=1024)

"""Tests for the request normalization pipeline in wire_request.pipeline."""

from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import ValidationError

from wire_request.headers import JSON_CONTENT_TYPE
from wire_request.models import PreparedRequest, RequestConfig
from wire_request.pipeline import prepare, transform_headers, transform_url


class TestPrepare:
    """prepare runs URL, header and body transforms in order."""

    def test_end_to_end(self) -> None:
        config = RequestConfig(
            url="http://api.test",
            params={"q": "a b", "tags": ["x", "y"]},
            data={"n": 1},
        )

        prepared = prepare(config)

        assert prepared.url == "http://api.test?q=a+b&tags%5B%5D=x&tags%5B%5D=y"
        assert prepared.headers == {"Content-Type": "application/json;charset=utf-8"}
        assert prepared.data == '{"n":1}'
        assert prepared.method == "GET"

    def test_returns_prepared_request(self) -> None:
        assert isinstance(prepare(RequestConfig(url="http://a.com")), PreparedRequest)

    def test_descriptor_not_mutated(self) -> None:
        headers = {"content-type": "text/plain"}
        data = {"n": 1}
        config = RequestConfig(url="http://a.com", params={"a": 1}, headers=headers, data=data)

        prepare(config)

        assert config.url == "http://a.com"
        assert config.headers == {"content-type": "text/plain"}
        assert config.data == {"n": 1}

    def test_method_uppercased(self) -> None:
        prepared = prepare(RequestConfig(url="http://a.com", method="post"))
        assert prepared.method == "POST"

    def test_string_body_gets_no_inferred_type(self) -> None:
        prepared = prepare(RequestConfig(url="http://a.com", method="POST", data="raw"))
        assert prepared.headers == {}
        assert prepared.data == "raw"

    def test_no_params_no_data(self) -> None:
        prepared = prepare(RequestConfig(url="http://a.com#top"))
        assert prepared.url == "http://a.com#top"
        assert prepared.headers == {}
        assert prepared.data is None

    def test_header_variant_canonicalized(self) -> None:
        config = RequestConfig(
            url="http://a.com",
            headers={"CONTENT-TYPE": "application/merge-patch+json"},
            data={"n": 1},
        )
        prepared = prepare(config)
        assert prepared.headers == {"Content-Type": "application/merge-patch+json"}
        assert prepared.data == '{"n":1}'

    def test_prepared_request_is_frozen(self) -> None:
        prepared = prepare(RequestConfig(url="http://a.com"))
        with pytest.raises(ValidationError):
            prepared.url = "http://b.com"

    def test_uuid_and_decimal_in_body_and_params(self) -> None:
        item_id = UUID("12345678-1234-5678-1234-567812345678")
        config = RequestConfig(
            url="http://a.com",
            method="POST",
            params={"id": item_id},
            data={"id": item_id, "price": Decimal("9.99")},
        )

        prepared = prepare(config)

        assert prepared.url == "http://a.com?id=12345678-1234-5678-1234-567812345678"
        assert prepared.headers == {"Content-Type": JSON_CONTENT_TYPE}
        assert prepared.data == (
            '{"id":"12345678-1234-5678-1234-567812345678","price":"9.99"}'
        )

    def test_serialization_failure_propagates(self) -> None:
        config = RequestConfig(url="http://a.com", params={"s": {"bad": {1, 2}}})
        with pytest.raises(TypeError):
            prepare(config)


class TestTransforms:
    def test_transform_url(self) -> None:
        config = RequestConfig(url="http://a.com?x=1", params={"a": 1})
        assert transform_url(config) == "http://a.com?x=1&a=1"

    def test_transform_headers_sees_structured_body(self) -> None:
        config = RequestConfig(url="http://a.com", data=[1, 2])
        assert transform_headers(config) == {"Content-Type": JSON_CONTENT_TYPE}

    def test_transform_headers_returns_copy(self) -> None:
        config = RequestConfig(url="http://a.com", data={"n": 1})
        transform_headers(config)
        assert config.headers == {}

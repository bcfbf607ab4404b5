"""Tests for havenox.server.negotiation — handler return values to Responses."""

import pytest

from havenox.errors import ConfigurationError
from havenox.http.response import JSON_CONTENT_TYPE, Response
from havenox.server.negotiation import negotiate


class TestNegotiate:
    def test_response_passes_through(self) -> None:
        original = Response(body="raw", status=202, content_type="text/plain")
        assert negotiate(original) is original

    def test_none_is_empty_204(self) -> None:
        response = negotiate(None)
        assert response.status == 204
        assert response.body == ""

    def test_dict(self) -> None:
        response = negotiate({"status": "ok"})
        assert response.status == 200
        assert response.content_type == JSON_CONTENT_TYPE
        assert response.json() == {"status": "ok"}

    def test_list(self) -> None:
        assert negotiate([1, 2]).json() == [1, 2]

    def test_scalars_are_json(self) -> None:
        assert negotiate("hi").text == '"hi"'
        assert negotiate(3).json() == 3
        assert negotiate(True).json() is True

    def test_tuple_with_status(self) -> None:
        response = negotiate(({"id": "listing_1"}, 201))
        assert response.status == 201
        assert response.json() == {"id": "listing_1"}

    def test_tuple_with_status_and_headers(self) -> None:
        response = negotiate(({"id": "x"}, 201, {"Location": "/listings/x"}))
        assert response.status == 201
        assert response.header("location") == "/listings/x"

    def test_two_item_list_is_not_a_status(self) -> None:
        response = negotiate([{"id": "x"}, 201])
        assert response.status == 200
        assert response.json() == [{"id": "x"}, 201]

    def test_unsupported_type(self) -> None:
        with pytest.raises(ConfigurationError, match="object"):
            negotiate(object())

    def test_non_finite_float_rejected(self) -> None:
        with pytest.raises(ValueError):
            negotiate({"price": float("nan")})

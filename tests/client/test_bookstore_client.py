"""
Unit Tests: BookstoreClient

requests.Session is mocked; the tests check URLs, payloads, token caching
and error mapping.
"""
from unittest.mock import MagicMock

import pytest
import requests

from app.client import ApiError, BookstoreClient


def _response(status=200, body=None):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = body if body is not None else {}
    resp.text = ""
    resp.reason = "Error"
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return BookstoreClient(base_url="http://api.local/", timeout=3, session=session)


class TestAuth:

    def test_login_caches_token(self, api, session):
        session.request.return_value = _response(body={"token": "tok", "user": {"id": 1}})

        user = api.login("a@mail.com", "pw")

        assert user == {"id": 1}
        assert api.token == "tok"
        session.request.assert_called_once_with(
            "POST", "http://api.local/api/user/login",
            timeout=3, headers={}, json={"email": "a@mail.com", "password": "pw"},
        )

    def test_token_sent_as_bearer(self, api, session):
        api.token = "tok"
        session.request.return_value = _response(body=[])

        api.all_books()

        _, kwargs = session.request.call_args
        assert kwargs["headers"] == {"Authorization": "Bearer tok"}

    def test_logout_drops_token(self, api, session):
        api.token = "tok"
        api.logout()
        session.request.return_value = _response(body={"user": {"id": 1}})

        api.check()

        _, kwargs = session.request.call_args
        assert kwargs["headers"] == {}


class TestCalls:

    def test_add_to_cart(self, api, session):
        session.request.return_value = _response(body={"success": True, "cartItem": {"quantity": 2}})

        item = api.add_to_cart(5, 2)

        assert item == {"quantity": 2}
        args, kwargs = session.request.call_args
        assert args == ("POST", "http://api.local/api/buyer/add-to-cart")
        assert kwargs["json"] == {"bookId": 5, "quantity": 2}

    def test_add_book_multipart(self, api, session):
        session.request.return_value = _response(body={"book": {"id": 9}})

        book = api.add_book("Dune", "Spice", 12.5, 3, cover_image=("c.png", b"img", "image/png"))

        assert book == {"id": 9}
        _, kwargs = session.request.call_args
        assert kwargs["data"] == {"title": "Dune", "description": "Spice", "price": "12.5", "stock": "3"}
        assert kwargs["files"] == {"coverImage": ("c.png", b"img", "image/png")}

    def test_update_status(self, api, session):
        session.request.return_value = _response(body={"success": True, "order": {"id": 4, "status": "shipped"}})

        order = api.update_order_status(4, "shipped")

        assert order["status"] == "shipped"
        args, _ = session.request.call_args
        assert args == ("PUT", "http://api.local/api/seller/orders/4/status")


class TestErrors:

    def test_error_body_is_mapped(self, api, session):
        session.request.return_value = _response(409, {"error": "insufficient_stock", "message": "Insufficient stock"})

        with pytest.raises(ApiError) as exc_info:
            api.place_order()

        assert exc_info.value.status_code == 409
        assert exc_info.value.kind == "insufficient_stock"

    def test_connection_errors_are_retried(self, api, session):
        session.request.side_effect = [
            requests.ConnectionError("refused"),
            _response(body={"orders": []}),
        ]

        assert api.place_order() == []
        assert session.request.call_count == 2

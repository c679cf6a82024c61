# app/client/bookstore_client.py
import requests

from app.utils.retry import http_retry
from app.utils.settings import API_BASE_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ApiError(Exception):
    """Non-2xx answer from the bookstore API."""

    def __init__(self, status_code: int, kind: str, message: str):
        super().__init__(f"{status_code} {kind}: {message}")
        self.status_code = status_code
        self.kind = kind
        self.message = message


class BookstoreClient:
    """
    HTTP client for the bookstore API, the same calls the mobile app makes.

    ``signup`` and ``login`` cache the returned token; every later call
    sends it as a bearer header until ``logout``.
    """

    def __init__(self, base_url: str | None = None, timeout: int = 10, session: requests.Session | None = None):
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.token: str | None = None

    # =====================================================
    # AUTH
    # =====================================================
    def signup(self, role: str, name: str, email: str, password: str) -> dict:
        data = self._request("POST", "/api/user/signup", json={
            "role": role, "name": name, "email": email, "password": password,
        })
        self.token = data["token"]
        return data["user"]

    def login(self, email: str, password: str) -> dict:
        data = self._request("POST", "/api/user/login", json={"email": email, "password": password})
        self.token = data["token"]
        return data["user"]

    def check(self) -> dict:
        return self._request("GET", "/api/user/check")["user"]

    def logout(self):
        self.token = None

    # =====================================================
    # BUYER
    # =====================================================
    def all_books(self) -> list[dict]:
        return self._request("GET", "/api/buyer/all-books")

    def add_to_cart(self, book_id: int, quantity: int = 1) -> dict:
        return self._request("POST", "/api/buyer/add-to-cart", json={"bookId": book_id, "quantity": quantity})["cartItem"]

    def cart(self) -> list[dict]:
        return self._request("GET", "/api/buyer/cart")

    def place_order(self) -> list[dict]:
        return self._request("POST", "/api/buyer/place-order")["orders"]

    def my_orders(self) -> list[dict]:
        return self._request("GET", "/api/buyer/my-order")

    # =====================================================
    # SELLER
    # =====================================================
    def my_books(self) -> list[dict]:
        return self._request("GET", "/api/seller/all-books")

    def add_book(
        self,
        title: str,
        description: str,
        price,
        stock: int,
        cover_image: tuple[str, bytes, str] | None = None,
    ) -> dict:
        """``cover_image`` is ``(file_name, content, content_type)``."""
        form = {"title": title, "description": description, "price": str(price), "stock": str(stock)}
        files = {"coverImage": cover_image} if cover_image else None
        return self._request("POST", "/api/seller/add-book", data=form, files=files)["book"]

    def seller_orders(self) -> list[dict]:
        return self._request("GET", "/api/seller/orders")

    def update_order_status(self, order_id: int, status: str) -> dict:
        return self._request("PUT", f"/api/seller/orders/{order_id}/status", json={"status": status})["order"]

    # =====================================================
    # TRANSPORT
    # =====================================================
    @http_retry()
    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        return self.session.request(method, url, timeout=self.timeout, **kwargs)

    def _request(self, method: str, path: str, **kwargs):
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        url = f"{self.base_url}{path}"
        logger.info(f"BookstoreClient {method} {url}")
        resp = self._send(method, url, headers=headers, **kwargs)

        if resp.status_code >= 400:
            try:
                body = resp.json()
            except ValueError:
                body = {}
            raise ApiError(
                resp.status_code,
                body.get("error", "internal"),
                body.get("message", resp.text or resp.reason),
            )
        return resp.json()

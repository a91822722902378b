"""HTTP client for the salon REST API"""

import logging
from datetime import date
from typing import Any, Callable, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API"""

    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"HTTP {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class SalonApiClient:
    """
    Thin wrapper over httpx.Client.

    token_getter is called before each request and its result, when not None,
    is sent as the bearer token.
    """

    def __init__(
        self,
        base_url: str = "",
        http: Optional[httpx.Client] = None,
        token_getter: Optional[Callable[[], Optional[str]]] = None,
        timeout: float = 10.0,
    ):
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)
        self.token_getter = token_getter

    def _request(self, method: str, path: str, token: Optional[str] = None, **kwargs) -> Any:
        headers = kwargs.pop("headers", {})
        token = token or (self.token_getter() if self.token_getter else None)
        if token:
            headers["Authorization"] = f"Bearer {token}"

        response = self.http.request(method, path, headers=headers, **kwargs)
        if response.status_code >= 400:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            logger.warning(f"⚠️ {method} {path} failed with {response.status_code}: {detail}")
            raise ApiError(response.status_code, detail)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # Auth
    def sync(self, token: str) -> dict:
        return self._request("POST", "/api/auth/firebase-sync", token=token)

    # Catalog
    def list_services(self) -> list[dict]:
        return self._request("GET", "/api/services")

    def list_team(self) -> list[dict]:
        return self._request("GET", "/api/team")

    def active_events(self) -> list[dict]:
        return self._request("GET", "/api/events/active")

    # Booking
    def get_availability(self, stylist_id: str, day: date) -> dict:
        return self._request("GET", f"/api/availability/{stylist_id}/{day.isoformat()}")

    def create_appointment(self, payload: dict) -> dict:
        return self._request("POST", "/api/appointments", json=payload)

    def my_appointments(self) -> list[dict]:
        return self._request("GET", "/api/appointments/my")

    # Notifications
    def notifications(self) -> list[dict]:
        return self._request("GET", "/api/notifications")

    def unread_count(self) -> int:
        return self._request("GET", "/api/notifications/unread-count")["count"]

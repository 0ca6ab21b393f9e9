"""
HTTP client for the FitTrack API.

Wraps a ``requests.Session`` with the base URL and Bearer token. Any object
with a compatible ``request(method, url, **kwargs)`` method can stand in for
the session.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ApiClientError(Exception):
    def __init__(self, status: int, code: str, message: str):
        super().__init__(f"{status} {code}: {message}")
        self.status = status
        self.code = code
        self.message = message


class FitTrackClient:
    def __init__(self, base_url: str = "", token: Optional[str] = None, session=None, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    def request(self, method: str, path: str, json: Any = None, params: Optional[Dict[str, Any]] = None) -> Any:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        response = self.session.request(
            method,
            f"{self.base_url}{path}",
            json=json,
            params=params,
            headers=headers,
            timeout=self.timeout,
        )

        if response.status_code >= 400:
            try:
                err = (response.json() or {}).get("error") or {}
            except ValueError:
                err = {}
            raise ApiClientError(
                response.status_code,
                err.get("code", "HTTP_ERROR"),
                err.get("message", "Request failed"),
            )
        return response.json()

    # Auth

    def login(self, email: str, password: str) -> Dict[str, Any]:
        data = self.request("POST", "/api/auth/login", json={"email": email, "password": password})
        self.token = data["token"]
        return data

    # Workouts

    def get_workout(self, instance_id: int) -> Dict[str, Any]:
        return self.request("GET", f"/api/workout-instances/{instance_id}")

    def update_workout(self, instance_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self.request("PATCH", f"/api/workout-instances/{instance_id}", json=fields)

    def update_set(self, set_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self.request("PATCH", f"/api/exercise-sets/{set_id}", json=fields)

    # Water

    def get_water(self, day: Optional[str] = None) -> Dict[str, Any]:
        # the server requires an explicit day
        return self.request("GET", "/api/water-entries", params={"date": day or date.today().isoformat()})

    def add_water(self, amount: float, unit: str, day: Optional[str] = None) -> Dict[str, Any]:
        body = {"amount": amount, "unit": unit}
        if day:
            body["date"] = day
        return self.request("POST", "/api/water-entries", json=body)

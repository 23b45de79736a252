"""
Shared HTTP client.

Provides a ``requests.Session`` with a default timeout and User-Agent.
Requests are sent once; a failed lookup surfaces to the caller instead of
being retried. Datasource modules should use this instead of bare
``requests.get`` so tests have one place to patch.

Usage::

    from weather_lookup.services.http import session

    resp = session.get("https://api.open-meteo.com/v1/forecast", params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

from typing import Any

import requests

DEFAULT_TIMEOUT = 15  # seconds

USER_AGENT = "weather-lookup/0.1"


class TimeoutSession(requests.Session):
    """Session that applies ``timeout`` when a request doesn't set one."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        super().__init__()
        self.timeout = timeout
        self.headers["User-Agent"] = USER_AGENT

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(timeout: float = DEFAULT_TIMEOUT) -> requests.Session:
    """Build a session for the Open-Meteo APIs."""
    return TimeoutSession(timeout=timeout)


#: Module-level session, import and use directly.
session: requests.Session = create_session()

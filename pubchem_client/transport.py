"""Blocking HTTP transport for PubChem requests."""

import logging
from logging import Logger
from typing import Optional

import requests

from .config import REQUEST_TIMEOUT, USER_AGENT
from .exceptions import TransportError
from .models import HttpResponse

logger: Logger = logging.getLogger(__name__)


class Transport:
    """
    Issue single GET requests and hand back status and body.

    Non-OK statuses are returned to the caller as-is; only failures to send
    the request or receive a response raise. Nothing is retried.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = REQUEST_TIMEOUT,
        user_agent: str = USER_AGENT,
    ):
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent})
        self.timeout = timeout

    def get(self, url: str) -> HttpResponse:
        try:
            logger.debug(f"Request: GET {url}")
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise TransportError(f"PubChem request failed: {e}", url=url) from e

        logger.debug(f"Response: HTTP {response.status_code}, {len(response.content)} bytes")
        return HttpResponse(status_code=response.status_code, text=response.text)

    def close(self):
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
